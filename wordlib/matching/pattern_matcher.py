"""Positional word patterns and regex matching.

A word pattern is matched one character per position against words of the
same length:

- ``*`` matches any character
- ``?`` matches a vowel (``aeiou``)
- ``!`` matches a consonant
- anything else matches itself exactly

e.g. ``c*t`` matches "cat", "cot" and "cut"; ``c?t`` matches "cat" and "cot".
"""

import functools
import re
from re import Pattern
from typing import Iterable

from wordlib.core.letters import CONSONANTS, VOWELS

ANY_CHAR = "*"
VOWEL_CHAR = "?"
CONSONANT_CHAR = "!"

_PLACEHOLDERS = {
    ANY_CHAR: ".",
    VOWEL_CHAR: f"[{VOWELS}]",
    CONSONANT_CHAR: f"[{CONSONANTS}]",
}


@functools.lru_cache(maxsize=256)
def compile_word_pattern(pattern: str) -> Pattern:
    """Converts a positional word pattern into a compiled, fully anchored regex.

    e.g. 'c*t' -> 'c.t', 'c?t' -> 'c[aeiou]t'
    """
    parts = [_PLACEHOLDERS.get(c) or re.escape(c) for c in pattern]
    # DOTALL so '*' also covers characters such as newlines inside a word
    return re.compile("".join(parts), re.DOTALL)


@functools.lru_cache(maxsize=256)
def compile_regex(pattern: str) -> Pattern:
    """Cached ``re.compile`` for user supplied regular expressions.

    Raises:
        re.error: If the pattern is not a valid regular expression
    """
    return re.compile(pattern)


class WordPattern:
    """Positional pattern compiled once and matched against many words."""

    def __init__(self, pattern: str):
        self.pattern = pattern
        self._regex = compile_word_pattern(pattern)

    def matches(self, word: str) -> bool:
        """Check that ``word`` has the pattern's length and matches every position."""
        if len(word) != len(self.pattern):
            return False
        return self._regex.fullmatch(word) is not None

    def filter(self, words: Iterable[str]) -> list[str]:
        """Return the words matching the pattern, keeping their order."""
        return [word for word in words if self.matches(word)]

    def __repr__(self) -> str:
        return f"WordPattern({self.pattern!r})"
