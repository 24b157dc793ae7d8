"""
Journal parse service.

Flow: scan lines in order; classify each; headers close the open entry
(validate, then commit or reject) and open a new one; postings accumulate on
the open entry; ``Y`` lines move the current year; end of input closes the
last entry.

Recovery: grammar, amount and balance failures become Diagnostics and the
scan continues. MissingPriorTransactionError ends the run; the result then
carries ``failure`` and the entries committed before it.
"""

from __future__ import annotations

import io
from collections.abc import Iterable, Sequence
from pathlib import Path
from uuid import uuid4

from ledger_config.schema import ParserConfig
from ledger_ingestion.adapters.text_adapter import JournalSourceAdapter
from ledger_ingestion.domain.types import Diagnostic, LineKind, ParseResult, RejectedEntry
from ledger_ingestion.parsing.classifier import classify_line, normalize_line
from ledger_ingestion.parsing.finalizer import finalize_entry
from ledger_ingestion.parsing.header import parse_header
from ledger_ingestion.parsing.hooks import PostTransactionHook, run_hooks
from ledger_ingestion.parsing.posting import is_comment, parse_posting
from ledger_ingestion.parsing.year import parse_year_directive
from ledger_kernel.domain.clock import Clock, SystemClock
from ledger_kernel.domain.entry import Entry
from ledger_kernel.domain.ledger import Ledger
from ledger_kernel.domain.values import ConversionTable
from ledger_kernel.exceptions import (
    AmountParseError,
    JournalSyntaxError,
    LedgerKernelError,
    MissingPriorTransactionError,
    UnbalancedEntryError,
)
from ledger_kernel.logging_config import LogContext, get_logger

logger = get_logger("ingestion.parser")


class JournalParser:
    """
    One parse session.

    Holds the state the grammar needs between lines: the current year, the
    line counter and the single open entry. A session parses one journal;
    create a new one for the next.
    """

    def __init__(
        self,
        config: ParserConfig | None = None,
        *,
        clock: Clock | None = None,
        hooks: Sequence[PostTransactionHook] = (),
        rates: ConversionTable | None = None,
        source: str = "<journal>",
    ):
        self._config = config or ParserConfig()
        self._clock = clock or SystemClock()
        self._hooks = tuple(hooks)
        self._source = source
        self.ledger = Ledger(rates)
        self.current_year = self._config.default_year or self._clock.current_year
        self.line_number = 0
        self.current_entry: Entry | None = None
        self._diagnostics: list[Diagnostic] = []
        self._rejected: list[RejectedEntry] = []
        self._failure: MissingPriorTransactionError | None = None
        self._closed = False

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def parse(self, lines: Iterable[str]) -> ParseResult:
        """Feed every line, then close the session."""
        self._ensure_open()
        with LogContext.bind(parse_id=str(uuid4()), source=self._source):
            logger.info(
                "parse_started",
                extra={
                    "compute_balances": self._config.compute_balances,
                    "current_year": self.current_year,
                },
            )
            try:
                for raw in lines:
                    self.feed(raw)
            except MissingPriorTransactionError as exc:
                self._abort(exc)
            else:
                self._close_entry(self.line_number + 1)
            finally:
                # A hook error propagating from here also ends the session.
                self._closed = True
            result = self.result()
            logger.info(
                "parse_completed",
                extra={
                    "line_count": self.line_number,
                    "committed": len(self.ledger.entries),
                    "rejected": len(self._rejected),
                    "diagnostics": len(self._diagnostics),
                    "accounts": len(self.ledger.accounts),
                    "ok": result.ok,
                },
            )
        return result

    def feed(self, raw: str) -> None:
        """
        Process one raw line.

        Raises:
            MissingPriorTransactionError: implicit amount with nothing to negate.
            RuntimeError: the session has already been closed.
        """
        self._ensure_open()
        self.line_number += 1
        line = normalize_line(raw)
        kind = classify_line(line)

        if kind is LineKind.ENTRY_HEADER:
            self._handle_header(line)
        elif kind is LineKind.INDENTED_POSTING:
            self._handle_posting(line)
        elif kind is LineKind.YEAR_DIRECTIVE:
            self._handle_year(line)

    def _ensure_open(self) -> None:
        if self._closed:
            raise RuntimeError("Parse session already closed; create a new JournalParser")

    def result(self) -> ParseResult:
        return ParseResult(
            ledger=self.ledger,
            diagnostics=tuple(self._diagnostics),
            rejected=tuple(self._rejected),
            failure=self._failure,
            source=self._source,
            line_count=self.line_number,
        )

    # ------------------------------------------------------------------
    # Line handlers
    # ------------------------------------------------------------------

    def _handle_header(self, line: str) -> None:
        try:
            entry = parse_header(line, self.line_number, self.current_year)
        except JournalSyntaxError as exc:
            # The open entry stays open; following postings still join it.
            self._report(exc, text=line)
            return
        self._close_entry(self.line_number)
        self.current_entry = entry

    def _handle_posting(self, line: str) -> None:
        if is_comment(line):
            return
        entry = self.current_entry
        if entry is None:
            self._report(
                JournalSyntaxError(self.line_number, line, "Posting outside of an entry"),
                text=line,
            )
            return

        try:
            transaction, style = parse_posting(line, entry, self.line_number)
        except AmountParseError as exc:
            self._report(exc, text=line)
            return

        if style is not None:
            self.ledger.commodities.observe(style)
        self.ledger.find_account(transaction.account)
        entry.add_transaction(transaction)
        if self._hooks:
            run_hooks(self._hooks, transaction, entry, self.ledger)

    def _handle_year(self, line: str) -> None:
        try:
            year = parse_year_directive(line, self.line_number)
        except JournalSyntaxError as exc:
            self._report(exc, text=line)
            return
        self.current_year = year
        logger.debug("year_directive", extra={"line_number": self.line_number, "year": year})

    # ------------------------------------------------------------------
    # Entry lifecycle
    # ------------------------------------------------------------------

    def _close_entry(self, ending_line: int) -> None:
        entry = self.current_entry
        if entry is None:
            return
        self.current_entry = None
        try:
            finalize_entry(
                entry,
                self.ledger,
                ending_line,
                compute_balances=self._config.compute_balances,
            )
        except UnbalancedEntryError as exc:
            self._rejected.append(RejectedEntry(entry=entry, code=exc.code, line_number=ending_line))
            self._report(exc, text=entry.header(), detail=entry.dump())
            return
        logger.debug(
            "entry_committed",
            extra={
                "line_number": entry.line_number,
                "entry_date": entry.date,
                "description": entry.description,
                "postings": len(entry.transactions),
            },
        )

    def _abort(self, exc: MissingPriorTransactionError) -> None:
        self._failure = exc
        entry = self.current_entry
        self.current_entry = None
        if entry is not None:
            self._rejected.append(
                RejectedEntry(entry=entry, code=exc.code, line_number=self.line_number)
            )
        self._report(exc, fatal=True)

    def _report(
        self,
        exc: LedgerKernelError,
        *,
        text: str = "",
        detail: str | None = None,
        fatal: bool = False,
    ) -> None:
        line_number = getattr(exc, "line_number", self.line_number)
        diagnostic = Diagnostic(
            code=exc.code,
            line_number=line_number,
            message=str(exc),
            text=text,
            detail=detail,
            fatal=fatal,
        )
        self._diagnostics.append(diagnostic)
        event = "parse_aborted" if fatal else exc.code.lower()
        log = logger.error if fatal else logger.warning
        log(
            event,
            extra={
                "code": exc.code,
                "line_number": line_number,
                "text": text,
                "detail": detail,
            },
        )


# ---------------------------------------------------------------------------
# Convenience entry points
# ---------------------------------------------------------------------------


def parse_journal(
    lines: Iterable[str] | str,
    config: ParserConfig | None = None,
    *,
    clock: Clock | None = None,
    hooks: Sequence[PostTransactionHook] = (),
    rates: ConversionTable | None = None,
    source: str = "<journal>",
) -> ParseResult:
    """Parse journal text (a string or any iterable of lines) into a ParseResult."""
    if isinstance(lines, str):
        # Only "\n" ends a line, as when the journal is read from a file.
        lines = io.StringIO(lines)
    parser = JournalParser(config, clock=clock, hooks=hooks, rates=rates, source=source)
    return parser.parse(lines)


def parse_journal_file(
    path: Path | str,
    config: ParserConfig | None = None,
    *,
    clock: Clock | None = None,
    hooks: Sequence[PostTransactionHook] = (),
    rates: ConversionTable | None = None,
) -> ParseResult:
    """Stream a journal file from disk through a new parse session."""
    config = config or ParserConfig()
    path = Path(path)
    adapter = JournalSourceAdapter()
    lines = adapter.read(path, {"encoding": config.source_encoding})
    return parse_journal(lines, config, clock=clock, hooks=hooks, rates=rates, source=str(path))
