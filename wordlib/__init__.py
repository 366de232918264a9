"""wordlib - In-memory word list queries.

Load a dictionary of words and filter, sort, combine and pattern-match it
through chainable, immutable queries.
"""

from wordlib.core import Config, WordQuery, WordStore, is_consonant, is_vowel, load_config
from wordlib.matching import WordPattern
from wordlib.pipeline import run_query
from wordlib.utils import seed_random_source, setup_logger

__version__ = "0.1.0"
__all__ = [
    "Config",
    "WordPattern",
    "WordQuery",
    "WordStore",
    "is_consonant",
    "is_vowel",
    "load_config",
    "run_query",
    "seed_random_source",
    "setup_logger",
]
