"""
Entry -- dated groups of postings.

Responsibility:
    Transaction is one posting line: an account path, an owned cost Amount
    and an optional note. Entry is a dated, described, ordered sequence of
    Transactions that must sum to zero per commodity before it is committed.

Architecture position:
    Kernel > Domain -- pure, zero I/O. Transactions refer to accounts by
    path, so they stay valid however the account registry is reorganized.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from ledger_kernel.domain.values import Amount


@dataclass
class Transaction:
    """One posting within an Entry."""

    account: str
    cost: Amount
    note: str | None = None
    line_number: int | None = None  # None for hook-generated postings

    def __str__(self) -> str:
        text = f"    {self.account:<34}  {self.cost}"
        if self.note:
            text += f"  ; {self.note}"
        return text


@dataclass
class Entry:
    """
    A dated journal entry and its postings, in source order.

    Invariant (checked by the finalizer, not enforced here): for every
    commodity among the transactions, the costs sum to zero.
    """

    date: date
    description: str
    cleared: bool = False
    code: str | None = None
    line_number: int | None = None
    transactions: list[Transaction] = field(default_factory=list)

    def add_transaction(self, transaction: Transaction) -> None:
        self.transactions.append(transaction)

    @property
    def first_transaction(self) -> Transaction | None:
        return self.transactions[0] if self.transactions else None

    def commodity_totals(self) -> dict[str | None, Decimal]:
        """Sum of costs per commodity; None groups amounts with no commodity."""
        totals: dict[str | None, Decimal] = {}
        for transaction in self.transactions:
            key = transaction.cost.commodity
            totals[key] = totals.get(key, Decimal("0")) + transaction.cost.quantity
        return totals

    def header(self) -> str:
        parts = [self.date.strftime("%Y/%m/%d")]
        if self.cleared:
            parts.append("*")
        if self.code:
            parts.append(f"({self.code})")
        parts.append(self.description)
        return " ".join(parts)

    def dump(self) -> str:
        """Human-readable rendering used in diagnostics."""
        lines = [self.header()]
        lines.extend(str(transaction) for transaction in self.transactions)
        return "\n".join(lines)
