"""Tests for the journal source adapter."""

import tempfile
from pathlib import Path

from ledger_ingestion.adapters import JournalSourceAdapter


class TestJournalSourceAdapter:
    """Streams raw lines; strips a UTF-8 BOM; honours a configured encoding."""

    def test_read_yields_lines(self):
        with tempfile.NamedTemporaryFile(mode="w", suffix=".dat", delete=False, newline="") as f:
            f.write("3/1 Lunch\n  A  $1\n  B\n")
            path = Path(f.name)
        try:
            lines = list(JournalSourceAdapter().read(path))
            assert lines == ["3/1 Lunch\n", "  A  $1\n", "  B\n"]
        finally:
            path.unlink()

    def test_bom_stripped(self):
        with tempfile.NamedTemporaryFile(mode="wb", suffix=".dat", delete=False) as f:
            f.write("\ufeffY 2020\n".encode("utf-8"))
            path = Path(f.name)
        try:
            assert list(JournalSourceAdapter().read(path)) == ["Y 2020\n"]
        finally:
            path.unlink()

    def test_crlf_normalized(self):
        with tempfile.NamedTemporaryFile(mode="wb", suffix=".dat", delete=False) as f:
            f.write(b"Y 2020\r\n3/1 Lunch\r\n")
            path = Path(f.name)
        try:
            assert list(JournalSourceAdapter().read(path)) == ["Y 2020\n", "3/1 Lunch\n"]
        finally:
            path.unlink()

    def test_custom_encoding(self):
        with tempfile.NamedTemporaryFile(mode="wb", suffix=".dat", delete=False) as f:
            f.write("3/1 Café\n".encode("latin-1"))
            path = Path(f.name)
        try:
            lines = list(JournalSourceAdapter().read(path, {"encoding": "latin-1"}))
            assert lines == ["3/1 Café\n"]
        finally:
            path.unlink()
