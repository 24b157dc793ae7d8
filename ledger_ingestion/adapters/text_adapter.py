"""
Journal source adapter.

Streams a plain-text journal one line at a time. Handles a BOM via
utf-8-sig when the encoding is utf-8.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterator


def _get_encoding(options: dict[str, Any]) -> str:
    enc = options.get("encoding", "utf-8")
    if enc.lower() in ("utf-8", "utf8"):
        return "utf-8-sig"  # Strip BOM if present
    return enc


class JournalSourceAdapter:
    """Read a journal file as raw lines. Streams; does not load entire file."""

    def read(self, source_path: Path, options: dict[str, Any] | None = None) -> Iterator[str]:
        encoding = _get_encoding(options or {})
        with source_path.open("r", encoding=encoding, newline=None) as f:
            yield from f
