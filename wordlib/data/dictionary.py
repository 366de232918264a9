"""Word list loading and saving."""

import itertools
from pathlib import Path
from typing import Iterable

from english_words import get_english_words_set  # type: ignore[import-untyped]
from loguru import logger
from wordfreq import top_n_list

from wordlib.utils import expand_file_path, write_file_safely

DEFAULT_ENGLISH_SOURCES = ("web2", "gcide")


def read_word_file(filepath: str | Path, verbose: bool = False) -> list[str]:
    """Read a newline-delimited word file.

    Every line is stripped of surrounding whitespace and blank lines are
    dropped. Case and duplicates are left alone; the store decides what to
    do with them.
    """
    path = expand_file_path(filepath) or str(filepath)

    words = []
    try:
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if line:
                    words.append(line)
    except FileNotFoundError:
        logger.error(f"✗ Word list file not found: {path}")
        logger.error("  Please check the file path and try again")
        raise
    except PermissionError:
        logger.error(f"✗ Permission denied reading file: {path}")
        logger.error("  Please check file permissions and try again")
        raise
    except UnicodeDecodeError as e:
        logger.error(f"✗ Encoding error reading {path}: {e}")
        logger.error("  Please ensure the file is UTF-8 encoded")
        raise

    if verbose:
        logger.info(f"Read {len(words)} lines from {path}")

    return words


def write_word_file(filepath: str | Path, words: Iterable[str]) -> None:
    """Write words joined by the platform line separator, replacing the file."""
    path = expand_file_path(filepath) or str(filepath)
    # text mode translates "\n" into the platform line separator
    text = "\n".join(words)

    write_file_safely(path, lambda f: f.write(text), "writing word list")


def load_wordfreq_words(lang: str = "en", top_n: int = 10000) -> list[str]:
    """Get the ``top_n`` most frequent words for a language from wordfreq."""
    try:
        words = top_n_list(lang, top_n)
    except Exception as e:
        logger.error(f"✗ Failed to load words from wordfreq: {e}")
        logger.error("  This may indicate a problem with the 'wordfreq' package")
        raise RuntimeError("Failed to load words from wordfreq") from e

    # wordfreq may hand back tokens with embedded whitespace; those are not words
    valid = (word for word in words if word and not any(c.isspace() for c in word))
    return list(itertools.islice(valid, top_n))


def load_english_words(
    sources: Iterable[str] = DEFAULT_ENGLISH_SOURCES, lower: bool = False
) -> set[str]:
    """Load the english-words dictionary for the given sources."""
    try:
        # type: ignore[no-any-return]
        words: set[str] = get_english_words_set(list(sources), lower=lower)
    except Exception as e:
        logger.error(f"✗ Failed to load English words dictionary: {e}")
        logger.error("  This may indicate a problem with the 'english-words' package")
        logger.error("  Try reinstalling: pip install english-words")
        raise RuntimeError("Failed to load english-words dictionary") from e
    return words
