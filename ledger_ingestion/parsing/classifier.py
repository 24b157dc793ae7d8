"""Line classifier: tag a raw journal line by its first character."""

from __future__ import annotations

from ledger_ingestion.domain.types import LineKind

_DIGITS = frozenset("0123456789")


def normalize_line(raw: str) -> str:
    """Drop the line terminator and turn every tab into a single space."""
    return raw.rstrip("\r\n").replace("\t", " ")


def classify_line(line: str) -> LineKind:
    """
    Classify a normalized line. No grammar checking happens here.

    A line of only whitespace is BLANK: it cannot name an account.
    """
    if not line or line.isspace():
        return LineKind.BLANK
    first = line[0]
    if first in _DIGITS:
        return LineKind.ENTRY_HEADER
    if first.isspace():
        return LineKind.INDENTED_POSTING
    if first == "Y":
        return LineKind.YEAR_DIRECTIVE
    return LineKind.UNRECOGNIZED
