"""
Command-line front end: format or check a Nix file.
"""

import logging
import sys

from nixtree.cli.parser import build_parser
from nixtree.color import colorize_nix
from nixtree.exceptions import ParseError
from nixtree.parser import parse_text


def main(args=None) -> int:
    """Return CLI exit codes so automation can distinguish success from failure."""
    parser = build_parser()
    args = parser.parse_args(args)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    match args.command:
        case "fmt":
            try:
                source = parse_text(args.file.read())
            except ParseError as error:
                print(error, file=sys.stderr)
                return 1
            print(colorize_nix(source.rebuild(), sys.stdout))
            return 0
        case "check":
            try:
                parse_text(args.file.read())
            except ParseError as error:
                print(error, file=sys.stderr)
                return 1
            print("OK")
            return 0
        case _:
            parser.print_help(sys.stderr)
            return 2
