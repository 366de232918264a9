"""Core word store and query types."""

from .letters import is_consonant, is_vowel
from .query import WordQuery
from .store import WordStore
from .config import Config, load_config

__all__ = [
    "Config",
    "WordQuery",
    "WordStore",
    "is_consonant",
    "is_vowel",
    "load_config",
]
