"""Unit tests for configuration loading.

Each test has a single assertion and focuses on behavior.
"""

import json

import pytest
from pydantic import ValidationError

from wordlib.cli import create_parser
from wordlib.core import Config, load_config


class TestConfigValidation:
    """Test Config field and cross-field validation."""

    def test_file_source_requires_word_file(self) -> None:
        """When source is file and no word file given, rejects the config."""
        with pytest.raises(ValidationError):
            Config()

    def test_wordfreq_source_requires_top_n(self) -> None:
        """When source is wordfreq without top_n, rejects the config."""
        with pytest.raises(ValidationError):
            Config(source="wordfreq")

    def test_max_length_below_min_length_rejected(self) -> None:
        """When max_length < min_length, rejects the config."""
        with pytest.raises(ValidationError, match="max_length"):
            Config(word_file="w.txt", min_length=5, max_length=3)

    def test_non_positive_length_rejected(self) -> None:
        """When length is zero, rejects the config."""
        with pytest.raises(ValidationError):
            Config(word_file="w.txt", length=0)

    def test_only_one_store_query_allowed(self) -> None:
        """When two store queries are set, rejects the config."""
        with pytest.raises(ValidationError, match="Only one of"):
            Config(word_file="w.txt", palindromes=True, anagrams_of="cat")

    def test_letter_list_is_joined(self) -> None:
        """When with_letters is a list, joins it into a string."""
        assert Config(word_file="w.txt", with_letters=["a", "b"]).with_letters == "ab"

    def test_unknown_sort_rejected(self) -> None:
        """When sort is not a known order, rejects the config."""
        with pytest.raises(ValidationError):
            Config(word_file="w.txt", sort="random")


class TestLoadConfig:
    """Test CLI > JSON > default priority."""

    def test_cli_values_are_used(self) -> None:
        """When only CLI args given, uses them."""
        parser = create_parser()
        args = parser.parse_args(["words.txt", "--starts-with", "st"])
        assert load_config(None, args, parser).starts_with == "st"

    def test_json_values_fill_unset_cli_args(self, tmp_path) -> None:
        """When JSON sets a value the CLI left alone, uses the JSON value."""
        config_file = tmp_path / "query.json"
        config_file.write_text(json.dumps({"word_file": "words.txt", "min_length": 4}))
        parser = create_parser()
        args = parser.parse_args([])
        assert load_config(str(config_file), args, parser).min_length == 4

    def test_cli_overrides_json(self, tmp_path) -> None:
        """When both set a value, the CLI wins."""
        config_file = tmp_path / "query.json"
        config_file.write_text(json.dumps({"word_file": "words.txt", "sort": "length"}))
        parser = create_parser()
        args = parser.parse_args(["--sort", "alpha"])
        assert load_config(str(config_file), args, parser).sort == "alpha"

    def test_json_verbose_flag_is_honored(self, tmp_path) -> None:
        """When JSON enables verbose, the config is verbose."""
        config_file = tmp_path / "query.json"
        config_file.write_text(json.dumps({"word_file": "words.txt", "verbose": True}))
        parser = create_parser()
        args = parser.parse_args([])
        assert load_config(str(config_file), args, parser).verbose is True

    def test_missing_config_file_raises(self) -> None:
        """When the JSON file does not exist, raises FileNotFoundError."""
        parser = create_parser()
        args = parser.parse_args([])
        with pytest.raises(FileNotFoundError):
            load_config("/nonexistent/query.json", args, parser)

    def test_invalid_json_raises_value_error(self, tmp_path) -> None:
        """When the JSON file is malformed, raises ValueError."""
        config_file = tmp_path / "query.json"
        config_file.write_text("{not json")
        parser = create_parser()
        args = parser.parse_args([])
        with pytest.raises(ValueError, match="Invalid JSON configuration"):
            load_config(str(config_file), args, parser)

    def test_invalid_values_raise_value_error(self) -> None:
        """When the merged values fail validation, raises ValueError."""
        parser = create_parser()
        args = parser.parse_args([])
        with pytest.raises(ValueError, match="Invalid configuration"):
            load_config(None, args, parser)
