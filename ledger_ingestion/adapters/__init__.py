"""Source adapters for journal ingestion (file I/O only)."""

from ledger_ingestion.adapters.text_adapter import JournalSourceAdapter

__all__ = [
    "JournalSourceAdapter",
]
