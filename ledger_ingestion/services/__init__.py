"""Parse session and convenience entry points."""

from ledger_ingestion.services.parse_service import (
    JournalParser,
    parse_journal,
    parse_journal_file,
)

__all__ = [
    "JournalParser",
    "parse_journal",
    "parse_journal_file",
]
