"""Command-line interface for wordlib."""

from wordlib.cli.parser import create_parser

__all__ = ["create_parser"]
