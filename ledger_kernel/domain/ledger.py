"""
Ledger -- the result store of one parse session.

Holds the committed entries in commit order, the account registry, the
commodities observed while parsing and the conversion rates available to
post-transaction hooks. Balance credits are applied here, when an entry
commits, so that a rejected entry never touches an account balance.
"""

from __future__ import annotations

from collections.abc import Iterator

from ledger_kernel.domain.accounts import Account, AccountRegistry
from ledger_kernel.domain.commodity import CommodityRegistry
from ledger_kernel.domain.entry import Entry
from ledger_kernel.domain.values import ConversionTable


class Ledger:
    """Ordered committed entries plus the account registry."""

    def __init__(self, rates: ConversionTable | None = None) -> None:
        self.entries: list[Entry] = []
        self.accounts = AccountRegistry()
        self.commodities = CommodityRegistry()
        self.rates = rates if rates is not None else ConversionTable()

    def find_account(self, path: str) -> Account:
        return self.accounts.find_account(path)

    def commit(self, entry: Entry, *, compute_balances: bool = True) -> None:
        """Append a validated entry and, if enabled, credit its accounts."""
        if compute_balances:
            for transaction in entry.transactions:
                self.accounts.find_account(transaction.account).balance.credit(
                    transaction.cost
                )
        self.entries.append(entry)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)
