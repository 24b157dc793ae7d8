"""
ParserConfig schema.

The options one journal parse run recognizes. YAML files are parsed into
this type by the loader; callers may also construct it directly.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ParserConfig:
    """Options for one parse run."""

    # Credit account balances as entries commit. When False the registry
    # still gains every referenced account, with zero balances.
    compute_balances: bool = True
    # Initial current year for headers without one; None uses the clock.
    default_year: int | None = None
    # Encoding used when reading a journal from a path.
    source_encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if not isinstance(self.compute_balances, bool):
            raise ValueError(
                f"compute_balances must be a boolean, got {self.compute_balances!r}"
            )
        if self.default_year is not None and (
            isinstance(self.default_year, bool)
            or not isinstance(self.default_year, int)
            or self.default_year < 1
        ):
            raise ValueError(
                f"default_year must be a positive integer, got {self.default_year!r}"
            )
        if not isinstance(self.source_encoding, str) or not self.source_encoding:
            raise ValueError("source_encoding must be a non-empty string")
