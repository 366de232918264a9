"""Utility functions for wordlib."""

from wordlib.utils.helpers import ensure_directory_exists, expand_file_path, write_file_safely
from wordlib.utils.logging import add_log_file_handler, setup_logger
from wordlib.utils.randomness import RandomSource, get_random_source, seed_random_source

__all__ = [
    "RandomSource",
    "add_log_file_handler",
    "ensure_directory_exists",
    "expand_file_path",
    "get_random_source",
    "seed_random_source",
    "setup_logger",
    "write_file_safely",
]
