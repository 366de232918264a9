"""Chainable, immutable word collections.

Every method returns a new ``WordQuery``; the receiver is never modified.
Unless stated otherwise, filters keep the receiver's order and duplicates.
"""

from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterator

from loguru import logger

from wordlib.core.letters import has_unique_letters
from wordlib.data import write_word_file
from wordlib.matching import WordPattern, compile_regex
from wordlib.utils import RandomSource, get_random_source


def _check_length(length: int) -> None:
    if length <= 0:
        raise ValueError("Length must be greater than or equal to 1")


@dataclass(frozen=True)
class WordQuery:
    """An ordered sequence of words that may contain duplicates."""

    items: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable but always own an immutable copy
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    def _keep(self, predicate: Callable[[str], bool]) -> "WordQuery":
        return WordQuery(tuple(word for word in self.items if predicate(word)))

    # Sequence access

    @property
    def count(self) -> int:
        """Number of words, duplicates included."""
        return len(self.items)

    def index(self, i: int) -> str:
        """Word at position ``i``.

        Raises:
            IndexError: If ``i`` is outside ``[0, count)``
        """
        if not 0 <= i < len(self.items):
            raise IndexError(f"Index {i} out of range for {len(self.items)} words")
        return self.items[i]

    def __getitem__(self, i: int) -> str:
        return self.index(i)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[str]:
        return iter(self.items)

    # String relations

    def starts_with(self, prefix: str | None) -> "WordQuery":
        if not prefix:
            return self
        return self._keep(lambda word: word.startswith(prefix))

    def ends_with(self, suffix: str | None) -> "WordQuery":
        if not suffix:
            return self
        return self._keep(lambda word: word.endswith(suffix))

    def contains(self, substring: str | None) -> "WordQuery":
        if not substring:
            return self
        return self._keep(lambda word: substring in word)

    # Length filters

    def min_length(self, length: int) -> "WordQuery":
        """Keep words of at least ``length`` characters.

        Raises:
            ValueError: If ``length`` is less than 1
        """
        _check_length(length)
        return self._keep(lambda word: len(word) >= length)

    def max_length(self, length: int) -> "WordQuery":
        """Keep words of at most ``length`` characters.

        Raises:
            ValueError: If ``length`` is less than 1
        """
        _check_length(length)
        return self._keep(lambda word: len(word) <= length)

    def fixed_length(self, length: int) -> "WordQuery":
        """Keep words of exactly ``length`` characters.

        Raises:
            ValueError: If ``length`` is less than 1
        """
        _check_length(length)
        return self._keep(lambda word: len(word) == length)

    def filter_custom(self, predicate: Callable[[str], bool]) -> "WordQuery":
        return self._keep(predicate)

    # Ordering

    def sort_alphabetically(self, ascending: bool = True) -> "WordQuery":
        """Sort by code point; descending is the ascending result reversed."""
        result = sorted(self.items)
        if not ascending:
            result.reverse()
        return WordQuery(tuple(result))

    def sort_by_length(self, ascending: bool = True) -> "WordQuery":
        """Stable sort by length; descending is the ascending result reversed."""
        result = sorted(self.items, key=len)
        if not ascending:
            result.reverse()
        return WordQuery(tuple(result))

    def sort_by_occurrence(self, ascending: bool = True) -> "WordQuery":
        """Stable sort by how many times each word occurs in this query."""
        occurrences = Counter(self.items)
        result = sorted(self.items, key=occurrences.__getitem__)
        if not ascending:
            result.reverse()
        return WordQuery(tuple(result))

    def distinct(self) -> "WordQuery":
        """Drop repeated words, keeping the first occurrence of each."""
        return WordQuery(tuple(dict.fromkeys(self.items)))

    def reverse(self) -> "WordQuery":
        return WordQuery(self.items[::-1])

    # Set algebra

    def intersect(self, other: "WordQuery") -> "WordQuery":
        """Words also present in ``other``, deduplicated.

        e.g. {a, b, c}.intersect({b, c, d}) = {b, c}
        """
        other_set = other.to_set()
        return self._keep(lambda word: word in other_set).distinct()

    def union(self, other: "WordQuery") -> "WordQuery":
        """Words NOT present in ``other``, deduplicated.

        Despite its name this behaves exactly like :meth:`except_`; the
        behavior is kept for compatibility with existing word library
        callers. Use :meth:`merge` for a real set union.

        e.g. {a, b, c}.union({b, c, d}) = {a}
        """
        return self.except_(other)

    def except_(self, other: "WordQuery") -> "WordQuery":
        """Words not present in ``other``, deduplicated.

        e.g. {a, b, c}.except_({b, c, d}) = {a}
        """
        other_set = other.to_set()
        return self._keep(lambda word: word not in other_set).distinct()

    def merge(self, other: "WordQuery") -> "WordQuery":
        """Words present in either query, deduplicated, receiver's words first.

        e.g. {a, b, c}.merge({b, c, d}) = {a, b, c, d}
        """
        return WordQuery(self.items + other.items).distinct()

    # Transforms

    def map(self, fn: Callable[[str], str]) -> "WordQuery":
        return WordQuery(tuple(fn(word) for word in self.items))

    # Letter filters

    def with_letter(self, letter: str) -> "WordQuery":
        return self._keep(lambda word: letter in word)

    def without_letter(self, letter: str) -> "WordQuery":
        return self._keep(lambda word: letter not in word)

    def with_unique_letters(self) -> "WordQuery":
        """Keep words in which no letter repeats."""
        return self._keep(has_unique_letters)

    def without_unique_letters(self) -> "WordQuery":
        """Keep words with at least one repeated letter."""
        return self._keep(lambda word: not has_unique_letters(word))

    # Pattern matching

    def match_pattern(self, pattern: str) -> "WordQuery":
        """Keep words matching a positional pattern of the same length.

        ``*`` is any character, ``?`` a vowel, ``!`` a consonant; other
        characters must match exactly. See :mod:`wordlib.matching`.
        """
        return WordQuery(tuple(WordPattern(pattern).filter(self.items)))

    def match_regex(self, pattern: str) -> "WordQuery":
        """Keep words in which the regular expression finds a match anywhere.

        Raises:
            re.error: If the pattern is not a valid regular expression
        """
        regex = compile_regex(pattern)
        return self._keep(lambda word: regex.search(word) is not None)

    # Sampling

    def random(self, amount: int, rng: RandomSource | None = None) -> "WordQuery":
        """Draw up to ``amount`` distinct words without replacement, in draw order.

        Raises:
            ValueError: If ``amount`` is negative
        """
        if amount < 0:
            raise ValueError("Amount must not be negative")
        if rng is None:
            rng = get_random_source()

        remaining = list(dict.fromkeys(self.items))
        result = []
        while remaining and len(result) < amount:
            result.append(remaining.pop(rng.randrange(len(remaining))))
        return WordQuery(tuple(result))

    # Terminal conversions

    def save(self, path: str | Path) -> None:
        """Write every word (duplicates included) to ``path``, one per line."""
        write_word_file(path, self.items)
        logger.debug(f"Saved {len(self.items)} words to {path}")

    def to_array(self) -> tuple[str, ...]:
        return self.items

    def to_list(self) -> list[str]:
        return list(self.items)

    def to_set(self) -> set[str]:
        return set(self.items)
