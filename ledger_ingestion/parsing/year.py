"""Year directive handler: ``Y 2024`` sets the session's current year."""

from __future__ import annotations

import re

from ledger_kernel.exceptions import JournalSyntaxError

YEAR_RE = re.compile(r"^Y\s*(?P<year>[0-9]+)")


def parse_year_directive(line: str, line_number: int) -> int:
    """
    Raises:
        JournalSyntaxError: no positive numeric year follows the ``Y``.
    """
    match = YEAR_RE.match(line)
    if match is None or int(match["year"]) < 1:
        raise JournalSyntaxError(line_number, line, "Invalid year directive")
    return int(match["year"])
