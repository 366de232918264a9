"""Word list sources and sinks."""

from wordlib.data.dictionary import (
    load_english_words,
    load_wordfreq_words,
    read_word_file,
    write_word_file,
)

__all__ = ["load_english_words", "load_wordfreq_words", "read_word_file", "write_word_file"]
