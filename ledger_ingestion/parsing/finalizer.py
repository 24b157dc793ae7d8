"""
Entry validator and finalizer.

Closes the open entry: groups its postings by commodity, requires each group
to sum to zero within the commodity's tolerance, then commits the entry to
the ledger or rejects it. Account balances are credited only on commit.
"""

from __future__ import annotations

from decimal import Decimal

from ledger_kernel.domain.commodity import CommodityRegistry, tolerance_for
from ledger_kernel.domain.entry import Entry
from ledger_kernel.domain.ledger import Ledger
from ledger_kernel.exceptions import UnbalancedEntryError


def group_tolerance(
    entry: Entry, commodity: str | None, commodities: CommodityRegistry
) -> Decimal:
    """
    Tolerance for one commodity group of an entry.

    Uses the precision observed across the whole journal when the commodity
    is known, otherwise the finest precision among the group's own amounts.
    """
    precision = commodities.precision(commodity)
    if precision is None:
        precision = max(
            (t.cost.precision for t in entry.transactions if t.cost.commodity == commodity),
            default=0,
        )
    return tolerance_for(precision)


def unbalanced_totals(entry: Entry, commodities: CommodityRegistry) -> dict[str | None, Decimal]:
    """Commodity totals that are not zero within tolerance; empty when balanced."""
    return {
        commodity: total
        for commodity, total in entry.commodity_totals().items()
        if abs(total) >= group_tolerance(entry, commodity, commodities)
    }


def validate_entry(entry: Entry, commodities: CommodityRegistry, ending_line: int) -> None:
    """
    Raises:
        UnbalancedEntryError: some commodity group does not sum to zero.
    """
    offending = unbalanced_totals(entry, commodities)
    if offending:
        raise UnbalancedEntryError(ending_line, entry.description, offending)


def finalize_entry(
    entry: Entry,
    ledger: Ledger,
    ending_line: int,
    *,
    compute_balances: bool = True,
) -> None:
    """
    Validate and commit ``entry``.

    Raises:
        UnbalancedEntryError: the entry was not committed.
    """
    validate_entry(entry, ledger.commodities, ending_line)
    ledger.commit(entry, compute_balances=compute_balances)
