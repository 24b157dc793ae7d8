"""Tests for ParserConfig and its YAML loader."""

import pytest
import yaml

from ledger_config import ParserConfig, load_parser_config, parse_parser_config


class TestParserConfig:
    def test_defaults(self):
        config = ParserConfig()
        assert config.compute_balances is True
        assert config.default_year is None
        assert config.source_encoding == "utf-8"

    def test_frozen(self):
        with pytest.raises(AttributeError):
            ParserConfig().compute_balances = False

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"compute_balances": "yes"},
            {"default_year": 0},
            {"default_year": "2020"},
            {"default_year": True},
            {"source_encoding": ""},
        ],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            ParserConfig(**kwargs)


class TestLoader:
    def test_load_top_level_keys(self, tmp_path):
        path = tmp_path / "parser.yaml"
        path.write_text("compute_balances: false\ndefault_year: 2019\n")
        config = load_parser_config(path)
        assert config == ParserConfig(compute_balances=False, default_year=2019)

    def test_load_nested_under_parser(self, tmp_path):
        path = tmp_path / "parser.yaml"
        path.write_text("parser:\n  source_encoding: latin-1\n")
        assert load_parser_config(path).source_encoding == "latin-1"

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "parser.yaml"
        path.write_text("")
        assert load_parser_config(str(path)) == ParserConfig()

    def test_unknown_key_rejected(self):
        with pytest.raises(ValueError, match="computeBalances"):
            parse_parser_config({"computeBalances": True})

    def test_non_mapping_rejected(self, tmp_path):
        path = tmp_path / "parser.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ValueError):
            load_parser_config(path)

    def test_malformed_yaml_propagates(self, tmp_path):
        path = tmp_path / "parser.yaml"
        path.write_text("compute_balances: [unclosed\n")
        with pytest.raises(yaml.YAMLError):
            load_parser_config(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_parser_config(tmp_path / "absent.yaml")
