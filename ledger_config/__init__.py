"""
ledger_config -- configuration for journal parse runs.

``ParserConfig`` is the only configuration type. ``load_parser_config()``
reads one from YAML; the kernel never imports from this package.
"""

from ledger_config.loader import load_parser_config, parse_parser_config
from ledger_config.schema import ParserConfig

__all__ = [
    "ParserConfig",
    "load_parser_config",
    "parse_parser_config",
]
