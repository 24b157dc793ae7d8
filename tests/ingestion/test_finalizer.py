"""Tests for entry validation and commit/reject."""

from datetime import date
from decimal import Decimal

import pytest

from ledger_ingestion.parsing.finalizer import (
    finalize_entry,
    group_tolerance,
    unbalanced_totals,
    validate_entry,
)
from ledger_kernel.domain.commodity import Commodity, CommodityRegistry
from ledger_kernel.domain.entry import Entry, Transaction
from ledger_kernel.domain.ledger import Ledger
from ledger_kernel.domain.values import Amount
from ledger_kernel.exceptions import UnbalancedEntryError


def _entry(*postings: tuple[str, str, str | None]) -> Entry:
    entry = Entry(date=date(2024, 2, 1), description="Dinner", line_number=1)
    for account, quantity, commodity in postings:
        entry.add_transaction(Transaction(account, Amount.of(quantity, commodity)))
    return entry


class TestTolerance:
    def test_uses_registry_precision(self):
        registry = CommodityRegistry()
        registry.observe(Commodity("$", precision=2))
        entry = _entry(("A", "1", "$"))
        assert group_tolerance(entry, "$", registry) == Decimal("0.01")

    def test_falls_back_to_group_precision(self):
        entry = _entry(("A", "1.125", None), ("B", "-1", None))
        assert group_tolerance(entry, None, CommodityRegistry()) == Decimal("0.001")


class TestValidation:
    def test_balanced_single_commodity(self):
        entry = _entry(("A", "10", "$"), ("B", "-10", "$"))
        assert unbalanced_totals(entry, CommodityRegistry()) == {}

    def test_each_commodity_must_balance(self):
        entry = _entry(("A", "10", "$"), ("B", "-10", "$"), ("C", "5", "EUR"), ("D", "-4", "EUR"))
        assert unbalanced_totals(entry, CommodityRegistry()) == {"EUR": Decimal("1")}

    def test_unspecified_commodity_is_its_own_group(self):
        entry = _entry(("A", "10", "$"), ("B", "-10", None))
        offending = unbalanced_totals(entry, CommodityRegistry())
        assert set(offending) == {"$", None}

    def test_difference_below_tolerance_is_balanced(self):
        registry = CommodityRegistry()
        registry.observe(Commodity("$", precision=2))
        entry = _entry(("A", "10.004", "$"), ("B", "-10", "$"))
        assert unbalanced_totals(entry, registry) == {}

    def test_difference_at_tolerance_is_unbalanced(self):
        registry = CommodityRegistry()
        registry.observe(Commodity("$", precision=2))
        entry = _entry(("A", "10.01", "$"), ("B", "-10", "$"))
        assert unbalanced_totals(entry, registry) == {"$": Decimal("0.01")}

    def test_empty_entry_is_balanced(self):
        validate_entry(_entry(), CommodityRegistry(), 3)

    def test_unbalanced_error_carries_context(self):
        entry = _entry(("A", "10", "$"), ("B", "-9", "$"))
        with pytest.raises(UnbalancedEntryError) as exc_info:
            validate_entry(entry, CommodityRegistry(), 14)
        err = exc_info.value
        assert err.line_number == 14
        assert err.description == "Dinner"
        assert err.totals == {"$": Decimal("1")}
        assert err.code == "UNBALANCED_ENTRY"


class TestFinalize:
    def test_commits_balanced_entry_and_credits(self):
        ledger = Ledger()
        finalize_entry(_entry(("A", "10", "$"), ("B", "-10", "$")), ledger, 4)
        assert len(ledger.entries) == 1
        assert ledger.find_account("A").balance.get("$").quantity == Decimal("10")

    def test_rejected_entry_leaves_balances_untouched(self):
        ledger = Ledger()
        ledger.find_account("A")
        with pytest.raises(UnbalancedEntryError):
            finalize_entry(_entry(("A", "10", "$"), ("B", "-9", "$")), ledger, 4)
        assert ledger.entries == []
        assert ledger.find_account("A").balance.is_zero
