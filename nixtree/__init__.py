"""
nixtree

Parse configuration written in a structural subset of the Nix expression
language into an immutable value tree, and print value trees back as Nix.
"""

from nixtree.exceptions import NixIOError, NixSyntaxError, ParseError
from nixtree.parser import dumps, parse, parse_file, parse_text, write_file

__all__ = [
    "NixIOError",
    "NixSyntaxError",
    "ParseError",
    "dumps",
    "parse",
    "parse_file",
    "parse_text",
    "write_file",
]
