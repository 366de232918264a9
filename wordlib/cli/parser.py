"""Command-line interface for wordlib."""

import argparse


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="wordlib",
        description="Filter, sort and sample a word list",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Five letter words starting with "st", alphabetically
  %(prog)s words.txt --starts-with st --length 5 --sort alpha

  # Words that can be spelled from a pool of letters, longest first
  %(prog)s words.txt --letters abctdog --sort length --descending

  # c, any vowel, t (cat, cot, cut)
  %(prog)s words.txt --pattern "c?t"

  # Ten random common English words with no repeated letters
  %(prog)s --source wordfreq --top-n 5000 --unique-letters --random 10 --seed 1

  # Using JSON config
  %(prog)s --config query.json -o results.txt

Pattern syntax: * any character, ? vowel, ! consonant, anything else is literal.

Example query.json:
{
  "word_file": "words.txt",
  "lowercase": true,
  "min_length": 4,
  "without_letters": "e",
  "sort": "alpha",
  "output": "results.txt",
  "verbose": true
}
        """,
    )

    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )

    # Word source
    parser.add_argument("word_file", nargs="?", help="Word list, one word per line")
    parser.add_argument(
        "--source",
        type=str,
        choices=["file", "wordfreq", "english-words"],
        default="file",
        help="Where to load words from",
    )
    parser.add_argument("--lang", type=str, default="en", help="Language for wordfreq")
    parser.add_argument("--top-n", type=int, help="Pull top N most common words (wordfreq)")
    parser.add_argument("--lowercase", action="store_true", help="Lowercase every word")

    # Store queries
    queries = parser.add_mutually_exclusive_group()
    queries.add_argument("--letters", type=str, help="Words spelled from these letters")
    queries.add_argument("--anagrams-of", type=str, help="Anagrams of a word")
    queries.add_argument("--palindromes", action="store_true", help="Only palindromes")
    queries.add_argument("--autocomplete", type=str, help="Corrections for a misspelled word")
    parser.add_argument(
        "--max-corrections",
        type=int,
        default=1,
        help="Mismatched positions allowed by --autocomplete",
    )

    # Filters
    parser.add_argument("--starts-with", type=str, help="Keep words with this prefix")
    parser.add_argument("--ends-with", type=str, help="Keep words with this suffix")
    parser.add_argument("--contains", type=str, help="Keep words containing this text")
    parser.add_argument("--min-length", type=int, help="Minimum word length")
    parser.add_argument("--max-length", type=int, help="Maximum word length")
    parser.add_argument("--length", type=int, help="Exact word length")
    parser.add_argument(
        "--pattern", type=str, help="Positional pattern (* any, ? vowel, ! consonant)"
    )
    parser.add_argument("--regex", type=str, help="Regular expression searched in each word")
    parser.add_argument(
        "--with-letters", type=str, default="", help="Letters that must all appear"
    )
    parser.add_argument(
        "--without-letters", type=str, default="", help="Letters that must not appear"
    )
    letters = parser.add_mutually_exclusive_group()
    letters.add_argument(
        "--unique-letters",
        dest="unique_letters",
        action="store_const",
        const=True,
        help="Only words with no repeated letters",
    )
    letters.add_argument(
        "--repeated-letters",
        dest="unique_letters",
        action="store_const",
        const=False,
        help="Only words with at least one repeated letter",
    )

    # Ordering and sampling
    parser.add_argument(
        "--sort", type=str, choices=["alpha", "length", "occurrence"], help="Sort order"
    )
    parser.add_argument("--descending", action="store_true", help="Sort descending")
    parser.add_argument("--distinct", action="store_true", help="Drop repeated words")
    parser.add_argument("--reverse", action="store_true", help="Reverse the result")
    parser.add_argument("--random", type=int, help="Sample this many distinct words")
    parser.add_argument("--seed", type=int, help="Seed for random sampling")

    # Output
    parser.add_argument("-o", "--output", type=str, help="Write the result to this file")
    parser.add_argument("--log-file", type=str, help="Also write log messages to this file")

    # Flags
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")

    return parser
