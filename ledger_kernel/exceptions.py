"""
Typed Exception Hierarchy for the Ledger Kernel.

===============================================================================
WHY TYPED EXCEPTIONS
===============================================================================

A journal parse produces many small, recoverable failures (a bad header, an
unparsable amount, an entry that does not balance) and exactly one failure
that ends the run (an implicit amount with nothing to infer it from). Callers
must tell these apart without matching on message text, so:

  1. Every error has a TYPED exception class (catch by type, not message)
  2. Every exception has a CODE attribute (machine-readable, log-safe)
  3. Exceptions carry structured DATA (line numbers, commodities, totals)

Example:
    try:
        amount = Amount.parse(text)
    except AmountParseError as e:
        diagnostics.append(Diagnostic(code=e.code, line_number=n, ...))

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

    LedgerKernelError (base)
    |
    +-- JournalError
    |   +-- JournalSyntaxError
    |   +-- MissingPriorTransactionError   (fatal to the parse run)
    |
    +-- AmountError
    |   +-- AmountParseError
    |   +-- CommodityMismatchError
    |   +-- NoConversionRateError
    |
    +-- PostingError
        +-- UnbalancedEntryError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Category  | Code                       | When Raised
----------|----------------------------|------------------------------------------
Journal   | SYNTAX_ERROR               | Header/posting/year line fails its grammar
          | MISSING_PRIOR_TRANSACTION  | Implicit amount with no earlier posting
----------|----------------------------|------------------------------------------
Amount    | AMOUNT_PARSE_ERROR         | Cost text is not a valid amount
          | COMMODITY_MISMATCH         | Arithmetic across two known commodities
          | NO_CONVERSION_RATE         | value() with no registered rate
----------|----------------------------|------------------------------------------
Posting   | UNBALANCED_ENTRY           | Some commodity in an entry sums to non-zero

===============================================================================
"""

from __future__ import annotations

from decimal import Decimal


class LedgerKernelError(Exception):
    """
    Base exception for all ledger kernel errors.

    All subclasses must have a `code` class attribute for machine-readable
    error identification.
    """

    code: str = "LEDGER_KERNEL_ERROR"


# Journal (grammar) exceptions


class JournalError(LedgerKernelError):
    """Base exception for journal text errors."""

    code: str = "JOURNAL_ERROR"


class JournalSyntaxError(JournalError):
    """A header, posting or year directive line does not match its grammar."""

    code: str = "SYNTAX_ERROR"

    def __init__(self, line_number: int, text: str, reason: str = "Failed to parse"):
        self.line_number = line_number
        self.text = text
        self.reason = reason
        super().__init__(f"{reason}, line {line_number}: {text}")


class MissingPriorTransactionError(JournalError):
    """
    An implicit-amount posting appeared before any posting with an amount.

    There is no sound default to substitute, so this aborts the parse run.
    """

    code: str = "MISSING_PRIOR_TRANSACTION"

    def __init__(self, line_number: int, account: str):
        self.line_number = line_number
        self.account = account
        super().__init__(
            f"Posting to {account} on line {line_number} has no amount "
            f"and no earlier posting in its entry to balance against"
        )


# Amount exceptions


class AmountError(LedgerKernelError):
    """Base exception for amount and commodity errors."""

    code: str = "AMOUNT_ERROR"


class AmountParseError(AmountError):
    """Cost text could not be read as an amount."""

    code: str = "AMOUNT_PARSE_ERROR"

    def __init__(self, text: str, reason: str = "not a valid amount"):
        self.text = text
        self.reason = reason
        super().__init__(f"Cannot parse amount {text!r}: {reason}")


class CommodityMismatchError(AmountError):
    """Arithmetic was attempted between two different known commodities."""

    code: str = "COMMODITY_MISMATCH"

    def __init__(self, left: str, right: str, operation: str = "accumulate"):
        self.left = left
        self.right = right
        self.operation = operation
        super().__init__(
            f"Cannot {operation} amounts with different commodities: {left} and {right}"
        )


class NoConversionRateError(AmountError):
    """No rate is known to convert from one commodity into another."""

    code: str = "NO_CONVERSION_RATE"

    def __init__(self, from_commodity: str | None, to_commodity: str):
        self.from_commodity = from_commodity
        self.to_commodity = to_commodity
        super().__init__(
            f"No conversion rate from {from_commodity or '<none>'} to {to_commodity}"
        )


# Posting exceptions


class PostingError(LedgerKernelError):
    """Base exception for entry/posting errors."""

    code: str = "POSTING_ERROR"


class UnbalancedEntryError(PostingError):
    """The postings of an entry do not sum to zero in some commodity."""

    code: str = "UNBALANCED_ENTRY"

    def __init__(
        self,
        line_number: int,
        description: str,
        totals: dict[str | None, Decimal],
    ):
        self.line_number = line_number
        self.description = description
        self.totals = totals
        rendered = ", ".join(
            f"{commodity or '<none>'}={total}" for commodity, total in totals.items()
        )
        super().__init__(
            f"Failed to balance entry '{description}', ending on line "
            f"{line_number}: {rendered}"
        )
