"""
Configuration Loader (``ledger_config.loader``).

Loads a YAML file and parses it into a ``ParserConfig``.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Unknown keys or wrongly typed values  -> ``ValueError``.
"""

from __future__ import annotations

from dataclasses import fields
from pathlib import Path
from typing import Any

import yaml

from ledger_config.schema import ParserConfig

_KNOWN_KEYS = frozenset(f.name for f in fields(ParserConfig))


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
        ValueError: if the document is not a mapping.
    """
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping, got {type(data).__name__}")
    return data


def parse_parser_config(data: dict[str, Any]) -> ParserConfig:
    """
    Build a ``ParserConfig`` from an already-loaded mapping.

    Accepts the options either at the top level or nested under a
    ``parser`` key.
    """
    if "parser" in data and isinstance(data["parser"], dict):
        data = data["parser"]
    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise ValueError(f"Unknown parser config keys: {', '.join(unknown)}")
    return ParserConfig(**data)


def load_parser_config(path: Path | str) -> ParserConfig:
    """Load a ``ParserConfig`` from a YAML file."""
    return parse_parser_config(load_yaml_file(Path(path)))
