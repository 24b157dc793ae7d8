"""
ledger_ingestion.domain.types -- Pure dataclasses for the journal parser.

ZERO I/O. Imports only from ledger_kernel.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ledger_kernel.domain.entry import Entry
from ledger_kernel.domain.ledger import Ledger
from ledger_kernel.exceptions import LedgerKernelError


# =============================================================================
# Line classification
# =============================================================================


class LineKind(str, Enum):
    """What a raw journal line is, judged from its first character."""

    BLANK = "blank"
    ENTRY_HEADER = "entry_header"  # Starts with a digit
    INDENTED_POSTING = "indented_posting"  # Starts with whitespace
    YEAR_DIRECTIVE = "year_directive"  # Starts with "Y"
    UNRECOGNIZED = "unrecognized"  # Anything else; skipped silently


# =============================================================================
# Parse outcomes
# =============================================================================


@dataclass(frozen=True)
class Diagnostic:
    """One problem found while parsing, tied to a 1-based source line."""

    code: str  # Exception code, e.g. SYNTAX_ERROR
    line_number: int
    message: str
    text: str = ""  # Raw line text, when the problem is a single line
    detail: str | None = None  # Entry dump for UNBALANCED_ENTRY
    fatal: bool = False

    def __str__(self) -> str:
        rendered = f"line {self.line_number}: [{self.code}] {self.message}"
        if self.detail:
            rendered += "\n" + self.detail
        return rendered


@dataclass(frozen=True)
class RejectedEntry:
    """An entry that was parsed but never committed."""

    entry: Entry
    code: str  # UNBALANCED_ENTRY, or the fatal error's code when aborted
    line_number: int  # Line at which the entry was closed


@dataclass(frozen=True)
class ParseResult:
    """Everything one parse run produced."""

    ledger: Ledger
    diagnostics: tuple[Diagnostic, ...] = ()
    rejected: tuple[RejectedEntry, ...] = ()
    failure: LedgerKernelError | None = None
    source: str = "<journal>"
    line_count: int = 0

    @property
    def ok(self) -> bool:
        return self.failure is None

    @property
    def entries(self) -> list[Entry]:
        return self.ledger.entries

    def raise_for_failure(self) -> None:
        """Re-raise the fatal error, if the run was aborted."""
        if self.failure is not None:
            raise self.failure
