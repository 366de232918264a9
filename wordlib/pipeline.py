"""Run a configured word query from source to output."""

import time

from loguru import logger

from wordlib.core import Config, WordQuery, WordStore
from wordlib.utils import seed_random_source


def load_store(config: Config) -> WordStore:
    """Build the word store described by the config."""
    if config.source == "wordfreq":
        store = WordStore.from_wordfreq(config.lang, config.top_n or 0)
    elif config.source == "english-words":
        store = WordStore.from_english_words()
    else:
        store = WordStore.load(config.word_file)

    if config.lowercase:
        store.force_lowercase()
    return store


def select_words(store: WordStore, config: Config) -> WordQuery:
    """Pick the entry point of the chain: a store query or every word."""
    if config.letters is not None:
        return store.get_words_with_letters(config.letters)
    if config.anagrams_of is not None:
        return store.get_anagrams(config.anagrams_of)
    if config.palindromes:
        return store.get_palindromes()
    if config.autocomplete is not None:
        return store.autocomplete(config.autocomplete, config.max_corrections)
    return store.all_words()


def apply_filters(query: WordQuery, config: Config) -> WordQuery:
    """Apply every configured filter, sort and sample in a fixed order."""
    query = query.starts_with(config.starts_with).ends_with(config.ends_with)
    query = query.contains(config.contains)

    if config.min_length is not None:
        query = query.min_length(config.min_length)
    if config.max_length is not None:
        query = query.max_length(config.max_length)
    if config.length is not None:
        query = query.fixed_length(config.length)
    if config.pattern:
        query = query.match_pattern(config.pattern)
    if config.regex:
        query = query.match_regex(config.regex)

    for letter in config.with_letters:
        query = query.with_letter(letter)
    for letter in config.without_letters:
        query = query.without_letter(letter)

    if config.unique_letters is True:
        query = query.with_unique_letters()
    elif config.unique_letters is False:
        query = query.without_unique_letters()

    if config.distinct:
        query = query.distinct()

    ascending = not config.descending
    if config.sort == "alpha":
        query = query.sort_alphabetically(ascending)
    elif config.sort == "length":
        query = query.sort_by_length(ascending)
    elif config.sort == "occurrence":
        query = query.sort_by_occurrence(ascending)

    if config.reverse:
        query = query.reverse()
    if config.random is not None:
        query = query.random(config.random)
    return query


def run_query(config: Config) -> WordQuery:
    """Load words, run the configured chain and save the result if requested.

    Args:
        config: Configuration object containing all settings

    Returns:
        The resulting query
    """
    start_time = time.time()

    if config.seed is not None:
        seed_random_source(config.seed)

    store = load_store(config)
    if config.verbose:
        logger.info(f"# Loaded {len(store)} words")

    result = apply_filters(select_words(store, config), config)

    if config.output:
        result.save(config.output)
        if config.verbose:
            logger.info(f"# Wrote {result.count} words to {config.output}")

    if config.verbose:
        logger.info(f"# Finished in {time.time() - start_time:.2f}s")
    return result
