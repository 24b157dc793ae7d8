"""
Entry header parser.

Grammar, anchored at line start::

    [YYYY SEP] MM SEP DD WS+ [* WS+] [(CODE) WS+] DESCRIPTION

SEP is ``.`` or ``/``. CODE is any text without ``)``. DESCRIPTION is the
rest of the line. A header without a year takes the session's current year.
"""

from __future__ import annotations

import re
from datetime import date

from ledger_kernel.domain.entry import Entry
from ledger_kernel.exceptions import JournalSyntaxError

HEADER_RE = re.compile(
    r"^(?:(?P<year>[0-9]{4})[./])?(?P<month>[0-9]+)[./](?P<day>[0-9]+)\s+"
    r"(?P<cleared>\*\s+)?"
    r"(?:\((?P<code>[^)]+)\)\s+)?"
    r"(?P<description>.+)"
)


def parse_header(line: str, line_number: int, current_year: int) -> Entry:
    """
    Build a provisional Entry from a header line.

    Raises:
        JournalSyntaxError: the line does not match the grammar, or its
            month/day do not name a real calendar date.
    """
    match = HEADER_RE.match(line)
    if match is None or not match["description"].strip():
        raise JournalSyntaxError(line_number, line)

    year = int(match["year"]) if match["year"] else current_year
    try:
        entry_date = date(year, int(match["month"]), int(match["day"]))
    except ValueError as e:
        raise JournalSyntaxError(line_number, line, f"Invalid date ({e})") from e

    return Entry(
        date=entry_date,
        description=match["description"].rstrip(),
        cleared=match["cleared"] is not None,
        code=match["code"],
        line_number=line_number,
    )
