"""Command line interface for the catalog pipeline."""

from .commands import create_parser, run

__all__ = ["create_parser", "run"]
