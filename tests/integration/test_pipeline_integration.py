"""Integration tests for running configured queries end to end."""

from unittest.mock import MagicMock, patch

import pytest

from wordlib import WordStore
from wordlib.core import Config
from wordlib.pipeline import run_query


@pytest.fixture
def word_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text(
        "Cat\ncat\ncot\ncut\ncast\ncastle\ndog\nbat\nlisten\nsilent\ntinsel\n"
        "racecar\nlevel\nnoon\nhello\n\n"
    )
    return path


class TestRunQuery:
    """Integration tests verifying configured chains."""

    def test_all_words_without_filters(self, word_file) -> None:
        """With no filters, returns every distinct word."""
        result = run_query(Config(word_file=str(word_file)))
        assert result.count == 15

    def test_lowercase_collapses_case_variants(self, word_file) -> None:
        """With lowercase enabled, Cat and cat become one word."""
        result = run_query(Config(word_file=str(word_file), lowercase=True))
        assert result.count == 14

    def test_pattern_and_sort(self, word_file) -> None:
        """Pattern filter followed by alphabetical sort."""
        config = Config(word_file=str(word_file), pattern="c?t", sort="alpha")
        assert run_query(config).to_list() == ["cat", "cot", "cut"]

    def test_letters_with_length_filter(self, word_file) -> None:
        """Letter pool query narrowed by a minimum length."""
        config = Config(word_file=str(word_file), letters="abctdog", min_length=3)
        assert run_query(config).to_set() == {"cat", "cot", "dog", "bat"}

    def test_anagrams(self, word_file) -> None:
        """Anagram query."""
        config = Config(word_file=str(word_file), anagrams_of="enlist")
        assert run_query(config).to_set() == {"listen", "silent", "tinsel"}

    def test_palindromes_sorted_by_length_descending(self, word_file) -> None:
        """Palindrome query sorted longest first."""
        config = Config(
            word_file=str(word_file), palindromes=True, sort="length", descending=True
        )
        assert run_query(config).index(0) == "racecar"

    def test_autocomplete(self, word_file) -> None:
        """Autocomplete with a single correction."""
        config = Config(word_file=str(word_file), autocomplete="cas", max_corrections=1)
        assert run_query(config).to_set() == {"cat", "cast", "castle"}

    def test_letter_filters(self, word_file) -> None:
        """with_letters and without_letters combine."""
        config = Config(word_file=str(word_file), with_letters="ae", without_letters="l")
        assert run_query(config).to_set() == {"racecar"}

    def test_repeated_letters(self, word_file) -> None:
        """unique_letters=False keeps words with a repeat."""
        config = Config(word_file=str(word_file), unique_letters=False, ends_with="l")
        assert run_query(config).to_set() == {"level"}

    def test_seeded_random_is_repeatable(self, word_file) -> None:
        """The same seed draws the same words."""
        config = Config(word_file=str(word_file), random=4, seed=7)
        assert run_query(config) == run_query(config)

    def test_writes_output_file(self, word_file, tmp_path) -> None:
        """With output set, saves the result and it loads back."""
        out = tmp_path / "out" / "result.txt"
        config = Config(word_file=str(word_file), starts_with="c", output=str(out))
        run_query(config)
        assert set(WordStore.load(out)) == {"cat", "cot", "cut", "cast", "castle"}

    @patch("wordlib.data.dictionary.top_n_list")
    def test_wordfreq_source(self, mock_top_n: MagicMock) -> None:
        """With the wordfreq source, queries the frequency list."""
        mock_top_n.return_value = ["the", "noon", "level", "and"]
        config = Config(source="wordfreq", top_n=4, palindromes=True)
        assert run_query(config).to_set() == {"noon", "level"}
