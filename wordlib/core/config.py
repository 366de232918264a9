"""Configuration management for wordlib queries."""

from __future__ import annotations

import json
from argparse import ArgumentParser
from typing import Literal

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from wordlib.utils import expand_file_path


class Config(BaseModel):
    """One word query: where the words come from and what to do with them."""

    # Word source
    word_file: str | None = None
    source: Literal["file", "wordfreq", "english-words"] = Field(
        "file", description="Where to load words from"
    )
    lang: str = Field("en", description="wordfreq language code")
    top_n: int | None = Field(None, ge=1, description="Top N most common words (wordfreq)")
    lowercase: bool = False

    # Store queries, at most one
    letters: str | None = Field(None, description="Pool of letters words must be spelled from")
    anagrams_of: str | None = None
    palindromes: bool = False
    autocomplete: str | None = None
    max_corrections: int = Field(1, ge=0, description="Corrections allowed by autocomplete")

    # Filters
    starts_with: str | None = None
    ends_with: str | None = None
    contains: str | None = None
    min_length: int | None = Field(None, ge=1)
    max_length: int | None = Field(None, ge=1)
    length: int | None = Field(None, ge=1)
    pattern: str | None = Field(None, description="* any, ? vowel, ! consonant")
    regex: str | None = None
    with_letters: str = Field("", description="Every one of these letters must appear")
    without_letters: str = Field("", description="None of these letters may appear")
    unique_letters: bool | None = Field(
        None, description="True: no repeated letters, False: at least one repeat"
    )

    # Ordering and sampling
    sort: Literal["alpha", "length", "occurrence"] | None = None
    descending: bool = False
    distinct: bool = False
    reverse: bool = False
    random: int | None = Field(None, ge=0, description="Sample this many words")
    seed: int | None = None

    # Output
    output: str | None = None
    log_file: str | None = None
    verbose: bool = False
    debug: bool = False

    @field_validator("with_letters", "without_letters", mode="before")
    @classmethod
    def parse_letter_list(cls, v):
        """Accept a string of letters or a list of single letters."""
        if v is None:
            return ""
        if isinstance(v, list):
            return "".join(s.strip() for s in v)
        return v

    @model_validator(mode="after")
    def validate_cross_fields(self):
        """Validate cross-field constraints."""
        if self.source == "file" and not self.word_file:
            raise ValueError("word_file is required when source is 'file'")
        if self.source == "wordfreq" and not self.top_n:
            raise ValueError("top_n is required when source is 'wordfreq'")
        if (
            self.min_length is not None
            and self.max_length is not None
            and self.max_length < self.min_length
        ):
            raise ValueError(
                f"max_length ({self.max_length}) must be >= min_length ({self.min_length})"
            )
        store_queries = [
            self.letters is not None,
            self.anagrams_of is not None,
            self.palindromes,
            self.autocomplete is not None,
        ]
        if sum(store_queries) > 1:
            raise ValueError(
                "Only one of letters, anagrams_of, palindromes and autocomplete can be used"
            )
        return self


def load_config(json_path: str | None, cli_args, parser: ArgumentParser) -> Config:
    """Load JSON config, override with CLI args, return Config object."""

    def get_value(key: str, fallback):
        """Get value with correct priority: CLI > JSON > Fallback."""
        cli_value = getattr(cli_args, key)
        default_value = parser.get_default(key)
        # Use CLI value only if it was explicitly set by the user
        if cli_value != default_value:
            return cli_value
        return json_config.get(key, fallback)

    json_config = {}
    if json_path:
        json_path = expand_file_path(json_path) or json_path
        try:
            with open(json_path, "r", encoding="utf-8") as f:
                json_config = json.load(f)
        except FileNotFoundError:
            logger.error(f"✗ Config file not found: {json_path}")
            logger.error("  Please check the file path and try again")
            raise
        except json.JSONDecodeError as e:
            logger.error(f"✗ Invalid JSON in config file {json_path}: {e}")
            logger.error("  Please validate your JSON syntax")
            raise ValueError(f"Invalid JSON configuration: {e}") from e
        except PermissionError:
            logger.error(f"✗ Permission denied reading config file: {json_path}")
            logger.error("  Please check file permissions and try again")
            raise

    config_dict = {
        key: get_value(key, field.default)
        for key, field in Config.model_fields.items()
        if key not in ("verbose", "debug")
    }
    config_dict["verbose"] = cli_args.verbose or json_config.get("verbose", False)
    config_dict["debug"] = cli_args.debug or json_config.get("debug", False)

    try:
        return Config.model_validate(config_dict)
    except ValidationError as e:
        logger.error(f"✗ Configuration validation failed: {e}")
        logger.error("  Please check your configuration values")
        raise ValueError(f"Invalid configuration: {e}") from e
