"""
Pytest fixtures for the ledger journal test suite.

Provides:
- A deterministic clock pinned to 2024 so headers without a year are stable
- A ``parse`` helper that dedents inline journal text and parses it
- Logging reset between tests
"""

import textwrap
from datetime import datetime, timezone

import pytest

from ledger_config import ParserConfig
from ledger_ingestion import parse_journal
from ledger_kernel.domain.clock import DeterministicClock
from ledger_kernel.logging_config import LogContext, reset_logging


@pytest.fixture(autouse=True)
def _clean_logging():
    """Reset logging state between tests."""
    reset_logging()
    LogContext.clear()
    yield
    LogContext.clear()
    reset_logging()


@pytest.fixture
def clock() -> DeterministicClock:
    return DeterministicClock(datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def parse(clock):
    """Parse dedented journal text with the pinned clock."""

    def _parse(text: str, config: ParserConfig | None = None, **kwargs):
        kwargs.setdefault("clock", clock)
        return parse_journal(textwrap.dedent(text).strip("\n"), config, **kwargs)

    return _parse
