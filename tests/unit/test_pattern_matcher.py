"""Unit tests for positional word patterns.

Tests verify pattern compilation, matching behavior and filtering.
Each test has a single assertion and uses type hints.
"""

import re

import pytest

from wordlib.matching import WordPattern, compile_regex, compile_word_pattern

# pylint: disable=missing-function-docstring


class TestWordPatternMatches:
    """Test the matches() method with various patterns and words."""

    def test_matches_exact_word(self) -> None:
        assert WordPattern("cat").matches("cat") is True

    def test_any_character_wildcard(self) -> None:
        assert WordPattern("c*t").matches("cot") is True

    def test_wildcard_does_not_relax_literals(self) -> None:
        assert WordPattern("c*t").matches("cup") is False

    def test_shorter_word_never_matches(self) -> None:
        assert WordPattern("c*t").matches("ct") is False

    def test_longer_word_never_matches(self) -> None:
        assert WordPattern("c*t").matches("cart") is False

    def test_vowel_placeholder_accepts_vowel(self) -> None:
        assert WordPattern("c?t").matches("cut") is True

    def test_vowel_placeholder_rejects_consonant(self) -> None:
        assert WordPattern("c?t").matches("cst") is False

    def test_consonant_placeholder_accepts_consonant(self) -> None:
        assert WordPattern("c!t").matches("cst") is True

    def test_consonant_placeholder_rejects_vowel(self) -> None:
        assert WordPattern("c!t").matches("cat") is False

    def test_consonant_placeholder_rejects_digit(self) -> None:
        assert WordPattern("c!t").matches("c4t") is False

    def test_regex_metacharacters_are_literal(self) -> None:
        assert WordPattern("a.c").matches("abc") is False

    def test_literal_match_is_case_sensitive(self) -> None:
        assert WordPattern("Cat").matches("cat") is False

    def test_empty_pattern_matches_empty_word(self) -> None:
        assert WordPattern("").matches("") is True


class TestWordPatternFilter:
    """Test the filter() method."""

    def test_filter_keeps_matching_words_in_order(self) -> None:
        result = WordPattern("c*t").filter(["cot", "cup", "dot", "cat"])
        assert result == ["cot", "cat"]

    def test_filter_empty_input(self) -> None:
        assert WordPattern("c*t").filter([]) == []


@pytest.mark.parametrize(
    "pattern,word,expected",
    [
        ("*", "x", True),
        ("**", "x", False),
        ("?!?", "aba", True),
        ("?!?", "bab", False),
        ("!!!!", "myth", True),
        ("h*ll?", "hello", True),
        ("h*ll?", "hells", False),
    ],
)
def test_word_pattern_edge_cases(pattern: str, word: str, expected: bool) -> None:
    """Test mixed placeholders against a range of words."""
    assert WordPattern(pattern).matches(word) is expected


class TestCompilation:
    """Test the cached compile helpers."""

    def test_word_pattern_compiles_once(self) -> None:
        assert compile_word_pattern("c?t") is compile_word_pattern("c?t")

    def test_invalid_regex_raises(self) -> None:
        with pytest.raises(re.error):
            compile_regex("(unclosed")
