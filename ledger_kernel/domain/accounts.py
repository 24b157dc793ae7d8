"""
Accounts -- path-identified accounts with per-commodity balances.

Responsibility:
    Balance accumulates one Amount per commodity. Account pairs a full
    colon-separated path with its Balance. AccountRegistry maps paths to
    Accounts and creates them lazily on first reference.

Architecture position:
    Kernel > Domain -- pure, zero I/O. The hierarchy is purely textual:
    there are no parent/child object links, only path prefixes.

Invariants enforced:
    - At most one Amount per commodity per Balance.
    - One Account per path for the lifetime of a registry; accounts are
      never removed or replaced.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from decimal import Decimal

from ledger_kernel.domain.values import Amount

ACCOUNT_SEPARATOR = ":"


class Balance:
    """Per-commodity running totals for one account."""

    def __init__(self) -> None:
        self._amounts: dict[str | None, Amount] = {}

    def credit(self, amount: Amount) -> None:
        """Add ``amount`` under its commodity, inserting a copy if unseen."""
        existing = self._amounts.get(amount.commodity)
        if existing is None:
            self._amounts[amount.commodity] = amount.copy()
        else:
            existing.accumulate(amount)

    def get(self, commodity: str | None) -> Amount:
        """Total for one commodity; a zero Amount if never credited."""
        existing = self._amounts.get(commodity)
        if existing is None:
            return Amount(quantity=Decimal("0"), commodity=commodity)
        return existing.copy()

    @property
    def commodities(self) -> tuple[str | None, ...]:
        return tuple(self._amounts)

    @property
    def is_zero(self) -> bool:
        return all(amount.is_zero for amount in self._amounts.values())

    def amounts(self) -> tuple[Amount, ...]:
        return tuple(amount.copy() for amount in self._amounts.values())

    def __len__(self) -> int:
        return len(self._amounts)

    def __repr__(self) -> str:
        inner = ", ".join(str(amount) for amount in self._amounts.values())
        return f"Balance({inner})"


@dataclass(eq=False)
class Account:
    """
    A ledger account identified by its full path, e.g. ``Assets:Checking``.

    Identity is object identity; the registry guarantees one instance per path.
    """

    path: str
    balance: Balance = field(default_factory=Balance)

    @property
    def segments(self) -> tuple[str, ...]:
        return tuple(self.path.split(ACCOUNT_SEPARATOR))

    @property
    def name(self) -> str:
        """Last path segment."""
        return self.segments[-1]

    @property
    def parent_path(self) -> str | None:
        head, sep, _ = self.path.rpartition(ACCOUNT_SEPARATOR)
        return head if sep else None

    @property
    def depth(self) -> int:
        return len(self.segments)

    def __str__(self) -> str:
        return self.path


class AccountRegistry:
    """Path -> Account mapping with lookup-or-create semantics."""

    def __init__(self) -> None:
        self._accounts: dict[str, Account] = {}

    def find_account(self, path: str) -> Account:
        """Return the account for ``path``, creating it on first reference."""
        account = self._accounts.get(path)
        if account is None:
            account = Account(path=path)
            self._accounts[path] = account
        return account

    def get(self, path: str) -> Account | None:
        """Lookup without creating."""
        return self._accounts.get(path)

    def children_of(self, path: str) -> list[Account]:
        """Accounts whose path extends ``path`` by one or more segments."""
        prefix = path + ACCOUNT_SEPARATOR
        return [a for p, a in self._accounts.items() if p.startswith(prefix)]

    @property
    def paths(self) -> tuple[str, ...]:
        return tuple(self._accounts)

    def __contains__(self, path: object) -> bool:
        return path in self._accounts

    def __iter__(self) -> Iterator[Account]:
        return iter(self._accounts.values())

    def __len__(self) -> int:
        return len(self._accounts)
