"""Letter-level checks shared by the store and query types."""

from collections import Counter
from typing import Iterable

VOWELS = "aeiou"
CONSONANTS = "bcdfghjklmnpqrstvwxyz"


def is_vowel(c: str) -> bool:
    """Is the character a (lowercase) vowel?"""
    return len(c) == 1 and c in VOWELS


def is_consonant(c: str) -> bool:
    """Is the character a (lowercase) consonant?"""
    return len(c) == 1 and c in CONSONANTS


def letter_counts(letters: Iterable[str]) -> Counter[str]:
    """Frequency table of the given characters."""
    return Counter(letters)


def can_spell(word: str, pool: Counter[str]) -> bool:
    """Check that ``word`` uses no letter more often than ``pool`` provides it."""
    used: Counter[str] = Counter()
    for c in word:
        used[c] += 1
        if used[c] > pool[c]:
            return False
    return True


def positional_mismatches(prefix: str, word: str) -> int:
    """Count index-aligned differences over the length of ``prefix``.

    ``word`` must be at least as long as ``prefix``; anything past that
    length is ignored.
    """
    return sum(1 for a, b in zip(prefix, word) if a != b)


def sorted_letters(word: str) -> str:
    return "".join(sorted(word))


def is_palindrome(word: str) -> bool:
    left, right = 0, len(word) - 1
    while left < right:
        if word[left] != word[right]:
            return False
        left += 1
        right -= 1
    return True


def has_unique_letters(word: str) -> bool:
    return len(set(word)) == len(word)
