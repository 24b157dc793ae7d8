"""Domain value objects and the in-memory ledger store."""

from ledger_kernel.domain.accounts import ACCOUNT_SEPARATOR, Account, AccountRegistry, Balance
from ledger_kernel.domain.clock import Clock, DeterministicClock, SystemClock
from ledger_kernel.domain.commodity import Commodity, CommodityRegistry, tolerance_for
from ledger_kernel.domain.entry import Entry, Transaction
from ledger_kernel.domain.ledger import Ledger
from ledger_kernel.domain.values import Amount, ConversionTable, ExchangeRate

__all__ = [
    "ACCOUNT_SEPARATOR",
    "Account",
    "AccountRegistry",
    "Amount",
    "Balance",
    "Clock",
    "Commodity",
    "CommodityRegistry",
    "ConversionTable",
    "DeterministicClock",
    "Entry",
    "ExchangeRate",
    "Ledger",
    "SystemClock",
    "Transaction",
    "tolerance_for",
]
