"""
Post-transaction hooks.

A hook runs after each parsed posting has been appended to its entry and may
return extra postings for the same entry, e.g. an automatic side posting
into a dedicated pair of accounts. Hooks are composed by passing them to the
parser; the parser itself has no built-in side postings.

Hooks may raise NoConversionRateError when they convert through
``ledger.rates``; the error propagates to the caller of the parse run.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol, runtime_checkable

from ledger_kernel.domain.entry import Entry, Transaction
from ledger_kernel.domain.ledger import Ledger


@runtime_checkable
class PostTransactionHook(Protocol):
    """Capability interface for automatic side postings."""

    def __call__(
        self, transaction: Transaction, entry: Entry, ledger: Ledger
    ) -> Iterable[Transaction]:
        """Return zero or more postings to append to ``entry``."""
        ...


def run_hooks(
    hooks: Sequence[PostTransactionHook],
    transaction: Transaction,
    entry: Entry,
    ledger: Ledger,
) -> list[Transaction]:
    """Invoke every hook in order and append what they return to ``entry``."""
    added: list[Transaction] = []
    for hook in hooks:
        for extra in list(hook(transaction, entry, ledger)):
            ledger.find_account(extra.account)
            entry.add_transaction(extra)
            added.append(extra)
    return added
