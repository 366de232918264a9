"""Pattern matching for word queries."""

from wordlib.matching.pattern_matcher import WordPattern, compile_regex, compile_word_pattern

__all__ = ["WordPattern", "compile_regex", "compile_word_pattern"]
