"""Commodity -- observed display style and precision-derived tolerance."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Commodity:
    """
    Display information about one commodity symbol.

    ``precision`` is the greatest number of decimal places seen for the
    symbol; ``prefix`` is True when the symbol is written before the number
    (``$10``) and ``separated`` when a space sits between them (``EUR 10``).
    """

    symbol: str
    precision: int = 0
    prefix: bool = True
    separated: bool = False

    @property
    def tolerance(self) -> Decimal:
        """Balancing tolerance derived from precision, never hardcoded."""
        return tolerance_for(self.precision)

    @property
    def quantize_string(self) -> str:
        """String for Decimal.quantize() to round to this commodity's precision."""
        if self.precision == 0:
            return "1"
        return "0." + "0" * self.precision

    def format(self, quantity: Decimal) -> str:
        """Render a quantity in this commodity's observed style."""
        if -quantity.as_tuple().exponent <= self.precision:
            quantity = quantity.quantize(Decimal(self.quantize_string))
        symbol = f'"{self.symbol}"' if _needs_quotes(self.symbol) else self.symbol
        gap = " " if self.separated else ""
        if self.prefix:
            return f"{symbol}{gap}{quantity}"
        return f"{quantity}{gap}{symbol}"


def tolerance_for(precision: int) -> Decimal:
    """Smallest unit at the given number of decimal places."""
    if precision <= 0:
        return Decimal("1")
    return Decimal("0." + "0" * (precision - 1) + "1")


def _needs_quotes(symbol: str) -> bool:
    return any(ch.isspace() or ch.isdigit() or ch in '-+.,;@' for ch in symbol)


class CommodityRegistry:
    """
    Commodities seen during one parse session.

    Each observation widens the recorded precision; the first observation of
    a symbol fixes its display style.
    """

    def __init__(self) -> None:
        self._commodities: dict[str, Commodity] = {}

    def observe(self, commodity: Commodity) -> Commodity:
        """Record a parsed occurrence and return the merged entry."""
        existing = self._commodities.get(commodity.symbol)
        if existing is None:
            self._commodities[commodity.symbol] = commodity
            return commodity
        if commodity.precision > existing.precision:
            existing = Commodity(
                symbol=existing.symbol,
                precision=commodity.precision,
                prefix=existing.prefix,
                separated=existing.separated,
            )
            self._commodities[commodity.symbol] = existing
        return existing

    def get(self, symbol: str | None) -> Commodity | None:
        if symbol is None:
            return None
        return self._commodities.get(symbol)

    def precision(self, symbol: str | None) -> int | None:
        info = self.get(symbol)
        return info.precision if info else None

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._commodities

    def __iter__(self):
        return iter(self._commodities.values())

    def __len__(self) -> int:
        return len(self._commodities)
