"""Tests for Balance, Account, AccountRegistry, Entry totals and Ledger.commit."""

from datetime import date
from decimal import Decimal

from ledger_kernel.domain.accounts import Account, AccountRegistry, Balance
from ledger_kernel.domain.entry import Entry, Transaction
from ledger_kernel.domain.ledger import Ledger
from ledger_kernel.domain.values import Amount


class TestBalance:
    def test_credit_unseen_commodity_inserts_copy(self):
        balance = Balance()
        amount = Amount.of("10", "$")
        balance.credit(amount)
        amount.negate()
        assert balance.get("$") == Amount(Decimal("10"), "$")

    def test_credit_accumulates(self):
        balance = Balance()
        balance.credit(Amount.of("10", "$"))
        balance.credit(Amount.of("-4", "$"))
        assert balance.get("$").quantity == Decimal("6")
        assert len(balance) == 1

    def test_one_amount_per_commodity(self):
        balance = Balance()
        balance.credit(Amount.of("1", "$"))
        balance.credit(Amount.of("2", "EUR"))
        balance.credit(Amount.of("3", "$"))
        assert set(balance.commodities) == {"$", "EUR"}

    def test_get_unknown_is_zero(self):
        assert Balance().get("$") == Amount(Decimal("0"), "$")

    def test_is_zero(self):
        balance = Balance()
        assert balance.is_zero
        balance.credit(Amount.of("1", "$"))
        balance.credit(Amount.of("-1", "$"))
        assert balance.is_zero


class TestAccount:
    def test_path_helpers(self):
        account = Account("Expenses:Food:Dining Out")
        assert account.name == "Dining Out"
        assert account.parent_path == "Expenses:Food"
        assert account.depth == 3

    def test_top_level_has_no_parent(self):
        assert Account("Assets").parent_path is None


class TestAccountRegistry:
    def test_lookup_creates_once(self):
        registry = AccountRegistry()
        first = registry.find_account("Assets:Checking")
        second = registry.find_account("Assets:Checking")
        assert first is second
        assert len(registry) == 1

    def test_get_does_not_create(self):
        registry = AccountRegistry()
        assert registry.get("Assets") is None
        assert "Assets" not in registry

    def test_children_of_uses_path_prefix(self):
        registry = AccountRegistry()
        for path in ("Assets", "Assets:Checking", "Assets:Savings", "AssetsX", "Expenses"):
            registry.find_account(path)
        children = {a.path for a in registry.children_of("Assets")}
        assert children == {"Assets:Checking", "Assets:Savings"}


def _entry(*postings: tuple[str, str, str | None]) -> Entry:
    entry = Entry(date=date(2024, 3, 15), description="Test")
    for account, quantity, commodity in postings:
        entry.add_transaction(Transaction(account=account, cost=Amount.of(quantity, commodity)))
    return entry


class TestEntry:
    def test_commodity_totals_grouped(self):
        entry = _entry(("A", "10", "$"), ("B", "-10", "$"), ("C", "5", "EUR"), ("D", "1", None))
        assert entry.commodity_totals() == {
            "$": Decimal("0"),
            "EUR": Decimal("5"),
            None: Decimal("1"),
        }

    def test_header_and_dump(self):
        entry = Entry(date=date(2024, 3, 15), description="Coffee", cleared=True, code="42")
        entry.add_transaction(Transaction("Expenses:Coffee", Amount.of("3.50", "$"), note="latte"))
        assert entry.header() == "2024/03/15 * (42) Coffee"
        dump = entry.dump()
        assert dump.splitlines()[0] == "2024/03/15 * (42) Coffee"
        assert "Expenses:Coffee" in dump
        assert "$3.50" in dump
        assert "; latte" in dump

    def test_first_transaction(self):
        assert _entry().first_transaction is None
        assert _entry(("A", "1", "$")).first_transaction.account == "A"


class TestLedgerCommit:
    def test_commit_credits_accounts(self):
        ledger = Ledger()
        ledger.commit(_entry(("A", "10", "$"), ("B", "-10", "$")))
        assert len(ledger) == 1
        assert ledger.find_account("A").balance.get("$").quantity == Decimal("10")
        assert ledger.find_account("B").balance.get("$").quantity == Decimal("-10")

    def test_commit_without_balances(self):
        ledger = Ledger()
        ledger.commit(_entry(("A", "10", "$"), ("B", "-10", "$")), compute_balances=False)
        assert ledger.entries[0].description == "Test"
        assert ledger.find_account("A").balance.is_zero
