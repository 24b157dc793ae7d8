"""
ledger_ingestion -- plain-text journal parsing.

Reads journal lines, recognizes entry headers, indented postings and year
directives, and commits balanced entries to a ``ledger_kernel`` Ledger.

Architecture:
    ledger_ingestion/ is a top-level package. Nothing in ledger_kernel
    imports from ingestion.
"""

from ledger_ingestion.domain.types import Diagnostic, LineKind, ParseResult, RejectedEntry
from ledger_ingestion.parsing.hooks import PostTransactionHook
from ledger_ingestion.services.parse_service import (
    JournalParser,
    parse_journal,
    parse_journal_file,
)

__all__ = [
    "Diagnostic",
    "JournalParser",
    "LineKind",
    "ParseResult",
    "PostTransactionHook",
    "RejectedEntry",
    "parse_journal",
    "parse_journal_file",
]
