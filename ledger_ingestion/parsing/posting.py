"""
Transaction line parser.

A posting line is indented; the account path runs up to the first run of
two or more spaces, which is the only thing separating an account name with
embedded single spaces (``Dining Out``) from the cost field after it. The
cost field may end in a ``; note``. An empty cost field, or one that is only
a note, is an implicit amount: the negation of the entry's first posting.
"""

from __future__ import annotations

from dataclasses import dataclass

from ledger_kernel.domain.commodity import Commodity
from ledger_kernel.domain.entry import Entry, Transaction
from ledger_kernel.domain.values import Amount
from ledger_kernel.exceptions import MissingPriorTransactionError

ACCOUNT_DELIMITER = "  "
NOTE_MARKER = ";"


@dataclass(frozen=True)
class PostingFields:
    """The textual pieces of a posting line, before any amount parsing."""

    account: str
    cost_text: str | None  # None for an implicit amount
    note: str | None = None

    @property
    def is_implicit(self) -> bool:
        return self.cost_text is None


def _clean_note(text: str) -> str | None:
    note = text.lstrip(NOTE_MARKER + " ").rstrip()
    return note or None


def split_posting(line: str) -> PostingFields:
    """Split an indented line into account, cost text and note."""
    rest = line.strip()
    head, delimiter, tail = rest.partition(ACCOUNT_DELIMITER)
    account = head.rstrip() if delimiter else rest
    cost_field = tail.lstrip() if delimiter else ""

    if not cost_field or cost_field.startswith(NOTE_MARKER):
        return PostingFields(account=account, cost_text=None, note=_clean_note(cost_field))

    cost_text, marker, note_text = cost_field.partition(NOTE_MARKER)
    return PostingFields(
        account=account,
        cost_text=cost_text.rstrip(),
        note=_clean_note(note_text) if marker else None,
    )


def is_comment(line: str) -> bool:
    """An indented line whose first visible character is the note marker."""
    return line.lstrip().startswith(NOTE_MARKER)


def resolve_cost(
    fields: PostingFields, entry: Entry, line_number: int
) -> tuple[Amount, Commodity | None]:
    """
    The posting's Amount, and the commodity style when it was written out.

    Raises:
        MissingPriorTransactionError: implicit amount with no earlier posting.
        AmountParseError: the cost text is malformed.
    """
    if fields.cost_text is None:
        first = entry.first_transaction
        if first is None:
            raise MissingPriorTransactionError(line_number, fields.account)
        return first.cost.copy().negate(), None
    return Amount.parse_with_style(fields.cost_text)


def parse_posting(line: str, entry: Entry, line_number: int) -> tuple[Transaction, Commodity | None]:
    """Parse one posting line against the entry it belongs to."""
    fields = split_posting(line)
    cost, style = resolve_cost(fields, entry, line_number)
    transaction = Transaction(
        account=fields.account,
        cost=cost,
        note=fields.note,
        line_number=line_number,
    )
    return transaction, style
