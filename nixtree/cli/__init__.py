"""CLI package for the nixtree entrypoints."""

from nixtree.cli.main import main
from nixtree.cli.parser import build_parser

__all__ = ["build_parser", "main"]
