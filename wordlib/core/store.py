"""The canonical set of known words.

A ``WordStore`` owns a deduplicated set of words plus an ordered snapshot of
that set used for positional and random access. Queries that need the whole
dictionary live here; everything else is done on the ``WordQuery`` values it
hands out.
"""

from pathlib import Path
from typing import Iterable, Iterator

from loguru import logger

from wordlib.core.letters import (
    can_spell,
    is_palindrome,
    letter_counts,
    positional_mismatches,
    sorted_letters,
)
from wordlib.core.query import WordQuery
from wordlib.data import (
    load_english_words,
    load_wordfreq_words,
    read_word_file,
    write_word_file,
)
from wordlib.data.dictionary import DEFAULT_ENGLISH_SOURCES
from wordlib.utils import RandomSource, get_random_source


class WordStore:
    """Deduplicated dictionary of words.

    The snapshot is the word set in sorted order. It is rebuilt together with
    the set, so it stays stable between mutations.
    """

    def __init__(self, words: Iterable[str] = (), rng: RandomSource | None = None):
        self._rng = rng
        self._set_words(set(words))

    def _set_words(self, words: set[str]) -> None:
        self._words = words
        self._snapshot = tuple(sorted(words))

    @classmethod
    def load(cls, filepath: str | Path, rng: RandomSource | None = None) -> "WordStore":
        """Build a store from a newline-delimited word file.

        Raises:
            FileNotFoundError: If the file does not exist
            PermissionError: If the file cannot be read
        """
        lines = read_word_file(filepath)
        store = cls(lines, rng=rng)
        logger.debug(f"Loaded {len(store)} distinct words from {len(lines)} lines in {filepath}")
        return store

    @classmethod
    def from_words(cls, words: Iterable[str], rng: RandomSource | None = None) -> "WordStore":
        return cls(words, rng=rng)

    @classmethod
    def from_wordfreq(
        cls, lang: str = "en", top_n: int = 10000, rng: RandomSource | None = None
    ) -> "WordStore":
        """Build a store from the ``top_n`` most frequent wordfreq words."""
        store = cls(load_wordfreq_words(lang, top_n), rng=rng)
        logger.debug(f"Loaded {len(store)} words from wordfreq ({lang})")
        return store

    @classmethod
    def from_english_words(
        cls,
        sources: Iterable[str] = DEFAULT_ENGLISH_SOURCES,
        lower: bool = False,
        rng: RandomSource | None = None,
    ) -> "WordStore":
        """Build a store from the english-words package."""
        store = cls(load_english_words(sources, lower=lower), rng=rng)
        logger.debug(f"Loaded {len(store)} words from english-words")
        return store

    def force_lowercase(self) -> None:
        """Lowercase every word in place; words differing only by case collapse."""
        before = len(self._words)
        self._set_words({word.lower() for word in self._words})
        collapsed = before - len(self._words)
        if collapsed:
            logger.debug(f"Lowercasing collapsed {collapsed} words")

    def is_valid(self, word: str) -> bool:
        """Case-sensitive membership test."""
        return word in self._words

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._snapshot)

    def __repr__(self) -> str:
        return f"WordStore({len(self._words)} words)"

    def get_random_words(self, amount: int) -> WordQuery:
        """Draw ``amount`` words uniformly at random, with replacement.

        Raises:
            ValueError: If the store is empty or ``amount`` is negative
        """
        if amount < 0:
            raise ValueError("Amount must not be negative")
        if not self._snapshot:
            logger.error("✗ Cannot draw random words from an empty word store")
            raise ValueError("Cannot draw random words from an empty word store")

        rng = self._rng if self._rng is not None else get_random_source()
        size = len(self._snapshot)
        return WordQuery(tuple(self._snapshot[rng.randrange(size)] for _ in range(amount)))

    def get_words_with_letters(self, letters: Iterable[str]) -> WordQuery:
        """Words that can be spelled from the given pool of letters.

        Each letter in the pool can be used once, e.g. "abctdog" spells
        "cat", "dog" and "bat" but not "cats".
        """
        pool = letter_counts(letters)
        return WordQuery(tuple(word for word in self._snapshot if can_spell(word, pool)))

    def autocomplete(self, invalid_word: str, max_corrections: int) -> WordQuery:
        """Words that ``invalid_word`` can be corrected to.

        A word qualifies when it is at least as long as ``invalid_word`` and
        differs from it in at most ``max_corrections`` of the first
        ``len(invalid_word)`` positions. Characters past that length are not
        compared, so "cas" completes to both "cat" and "castle".
        """
        size = len(invalid_word)
        return WordQuery(
            tuple(
                word
                for word in self._snapshot
                if len(word) >= size
                and positional_mismatches(invalid_word, word) <= max_corrections
            )
        )

    def get_anagrams(self, word: str) -> WordQuery:
        """All stored words made of the same letters, ``word`` included if stored."""
        key = sorted_letters(word)
        return WordQuery(tuple(w for w in self._snapshot if sorted_letters(w) == key))

    def get_palindromes(self) -> WordQuery:
        return WordQuery(tuple(word for word in self._snapshot if is_palindrome(word)))

    def all_words(self) -> WordQuery:
        return WordQuery(self._snapshot)

    def save(self, path: str | Path) -> None:
        """Write every stored word to ``path`` in snapshot order."""
        write_word_file(path, self._snapshot)
