"""
Values -- Amount arithmetic and commodity conversion.

Responsibility:
    Provides the numeric value types used by every posting: Amount (a
    Decimal quantity tagged with an optional commodity symbol), ExchangeRate
    and ConversionTable (the known rates ``Amount.value`` may convert
    through).

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O.
    Imported by accounts, entry and the journal parsers.

Invariants enforced:
    - Quantities are Decimal, never float.
    - Amounts of two different known commodities are never silently added.
    - ``copy()`` shares no state with the original.

Failure modes:
    - AmountParseError from ``Amount.parse`` on malformed text.
    - CommodityMismatchError from ``accumulate`` across known commodities.
    - NoConversionRateError from ``value`` when no rate is registered.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from ledger_kernel.domain.commodity import Commodity
from ledger_kernel.exceptions import (
    AmountParseError,
    CommodityMismatchError,
    NoConversionRateError,
)

_SYMBOL = r'"[^"]+"|[^\s\d.,;@"+\-]+'
_NUMBER = r"(?:\d{1,3}(?:,\d{3})+|\d+)(?:\.\d*)?|\.\d+"

# $10, -$10, $-10.00, EUR 10, "Mutual Fund" 3.5
_PREFIX_RE = re.compile(
    rf"^(?P<sign>[-+])?(?P<symbol>{_SYMBOL})(?P<gap>\s*)"
    rf"(?P<inner_sign>[-+])?(?P<number>{_NUMBER})$"
)
# 10, -10.5, 10 EUR, 1,000.00 USD
_SUFFIX_RE = re.compile(
    rf"^(?P<sign>[-+])?(?P<number>{_NUMBER})(?:(?P<gap>\s*)(?P<symbol>{_SYMBOL}))?$"
)


@dataclass(slots=True)
class Amount:
    """
    A Decimal quantity with an optional commodity symbol.

    Contract:
        ``commodity is None`` means "unspecified": such an amount adds to any
        other amount and adopts the other side's commodity. Amounts are
        mutable; ``negate`` and ``accumulate`` change the instance in place,
        so callers that need an independent value take a ``copy()`` first.
    """

    quantity: Decimal
    commodity: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.quantity, float):
            raise TypeError("Amount quantity must not be a float")
        if not isinstance(self.quantity, Decimal):
            try:
                self.quantity = Decimal(str(self.quantity))
            except (InvalidOperation, ValueError) as e:
                raise ValueError(f"Invalid quantity: {self.quantity}") from e
        if self.commodity == "":
            self.commodity = None

    @classmethod
    def of(cls, quantity: Decimal | str | int, commodity: str | None = None) -> Amount:
        """Factory method; accepts str/int quantities, never float."""
        return cls(quantity=Decimal(str(quantity)), commodity=commodity)

    @classmethod
    def zero(cls) -> Amount:
        """A commodity-agnostic zero."""
        return cls(quantity=Decimal("0"))

    @classmethod
    def parse(cls, text: str) -> Amount:
        """
        Parse cost text such as ``$10``, ``-10.50 EUR`` or ``1,000 AAPL``.

        Raises:
            AmountParseError: on empty or malformed text.
        """
        amount, _ = cls.parse_with_style(text)
        return amount

    @classmethod
    def parse_with_style(cls, text: str) -> tuple[Amount, Commodity | None]:
        """
        Parse cost text and also report how its commodity was written.

        Returns:
            The Amount and a Commodity describing the observed symbol
            placement and precision, or None when no symbol was given.
        """
        stripped = text.strip()
        if not stripped:
            raise AmountParseError(text, "empty amount")

        match = _PREFIX_RE.match(stripped)
        prefix = True
        if match is None:
            match = _SUFFIX_RE.match(stripped)
            prefix = False
        if match is None:
            raise AmountParseError(text)

        groups = match.groupdict()
        signs = [s for s in (groups["sign"], groups.get("inner_sign")) if s]
        if len(signs) > 1:
            raise AmountParseError(text, "more than one sign")

        number = groups["number"].replace(",", "")
        try:
            quantity = Decimal(number)
        except InvalidOperation as e:
            raise AmountParseError(text) from e
        if signs and signs[0] == "-":
            quantity = -quantity

        symbol = groups.get("symbol")
        if symbol and symbol.startswith('"'):
            symbol = symbol[1:-1]

        amount = cls(quantity=quantity, commodity=symbol or None)
        if amount.commodity is None:
            return amount, None
        style = Commodity(
            symbol=amount.commodity,
            precision=amount.precision,
            prefix=prefix,
            separated=bool(groups.get("gap")),
        )
        return amount, style

    @property
    def precision(self) -> int:
        """Number of decimal places carried by the quantity."""
        exponent = self.quantity.as_tuple().exponent
        return max(0, -exponent) if isinstance(exponent, int) else 0

    @property
    def is_zero(self) -> bool:
        return self.quantity == 0

    @property
    def is_negative(self) -> bool:
        return self.quantity < 0

    def negate(self) -> Amount:
        """Flip the sign in place and return self."""
        self.quantity = -self.quantity
        return self

    def accumulate(self, other: Amount) -> Amount:
        """
        Add ``other`` into this amount in place and return self.

        Raises:
            CommodityMismatchError: both sides carry different known commodities.
        """
        if (
            self.commodity is not None
            and other.commodity is not None
            and self.commodity != other.commodity
        ):
            raise CommodityMismatchError(self.commodity, other.commodity)
        self.quantity += other.quantity
        if self.commodity is None:
            self.commodity = other.commodity
        return self

    def copy(self) -> Amount:
        """Independent duplicate."""
        return Amount(quantity=self.quantity, commodity=self.commodity)

    def value(self, target: str, rates: ConversionTable) -> Amount:
        """
        This amount expressed in ``target``.

        Raises:
            NoConversionRateError: no rate from this commodity to ``target``.
        """
        if self.commodity == target:
            return self.copy()
        return rates.convert(self, target)

    def __neg__(self) -> Amount:
        return self.copy().negate()

    def __str__(self) -> str:
        if self.commodity is None:
            return str(self.quantity)
        symbol = self.commodity
        if not symbol.isalpha() and len(symbol) == 1:
            return f"{symbol}{self.quantity}"
        if any(ch.isspace() for ch in symbol):
            symbol = f'"{symbol}"'
        return f"{self.quantity} {symbol}"


@dataclass(frozen=True, slots=True)
class ExchangeRate:
    """
    Conversion rate between two commodities.

    Represents: 1 unit of from_commodity = rate units of to_commodity.
    The rate must be a positive Decimal.
    """

    from_commodity: str
    to_commodity: str
    rate: Decimal

    def __post_init__(self) -> None:
        if isinstance(self.rate, float):
            raise TypeError("Exchange rate must not be a float")
        if not isinstance(self.rate, Decimal):
            try:
                object.__setattr__(self, "rate", Decimal(str(self.rate)))
            except (InvalidOperation, ValueError) as e:
                raise ValueError(f"Invalid exchange rate: {self.rate}") from e

        if self.rate <= Decimal("0"):
            raise ValueError(f"Exchange rate must be positive: {self.rate}")

    @classmethod
    def of(cls, from_commodity: str, to_commodity: str, rate: Decimal | str | int) -> ExchangeRate:
        return cls(from_commodity=from_commodity, to_commodity=to_commodity, rate=Decimal(str(rate)))

    def convert(self, amount: Amount) -> Amount:
        """
        Convert an amount in from_commodity into to_commodity.

        Raises:
            CommodityMismatchError: the amount is in some other commodity.
        """
        if amount.commodity != self.from_commodity:
            raise CommodityMismatchError(
                str(amount.commodity), self.from_commodity, operation="convert"
            )
        return Amount(quantity=amount.quantity * self.rate, commodity=self.to_commodity)

    def inverse(self) -> ExchangeRate:
        """If this rate is USD->EUR at 0.85, inverse is EUR->USD at 1/0.85."""
        return ExchangeRate(
            from_commodity=self.to_commodity,
            to_commodity=self.from_commodity,
            rate=Decimal("1") / self.rate,
        )

    @property
    def pair(self) -> tuple[str, str]:
        return (self.from_commodity, self.to_commodity)

    def __str__(self) -> str:
        return f"{self.from_commodity}/{self.to_commodity} = {self.rate}"


class ConversionTable:
    """Known exchange rates, looked up directly or through their inverse."""

    def __init__(self, rates: tuple[ExchangeRate, ...] | list[ExchangeRate] = ()) -> None:
        self._rates: dict[tuple[str, str], ExchangeRate] = {}
        for rate in rates:
            self.register(rate)

    def register(self, rate: ExchangeRate) -> None:
        self._rates[rate.pair] = rate

    def register_rate(self, from_commodity: str, to_commodity: str, rate: Decimal | str | int) -> ExchangeRate:
        exchange_rate = ExchangeRate.of(from_commodity, to_commodity, rate)
        self.register(exchange_rate)
        return exchange_rate

    def find(self, from_commodity: str | None, to_commodity: str) -> ExchangeRate | None:
        if from_commodity is None:
            return None
        direct = self._rates.get((from_commodity, to_commodity))
        if direct is not None:
            return direct
        reverse = self._rates.get((to_commodity, from_commodity))
        if reverse is not None:
            return reverse.inverse()
        return None

    def convert(self, amount: Amount, target: str) -> Amount:
        """
        Raises:
            NoConversionRateError: no direct or inverse rate is registered.
        """
        rate = self.find(amount.commodity, target)
        if rate is None:
            raise NoConversionRateError(amount.commodity, target)
        return rate.convert(amount)

    def __len__(self) -> int:
        return len(self._rates)
