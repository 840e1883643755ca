from __future__ import annotations

import argparse
import sys

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def with_file_argument(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    parser.add_argument(
        "-f",
        "--file",
        type=argparse.FileType("r", encoding="utf-8"),
        default=sys.stdin,
        help="Nix file to read (default: stdin)",
    )
    return parser


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nixtree",
        description="Parse Nix configuration files and print them back.",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Set the logging level (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command")

    with_file_argument(
        subparsers.add_parser("fmt", help="Print the parsed value as formatted Nix")
    )
    with_file_argument(
        subparsers.add_parser("check", help="Report whether the input parses")
    )
    return parser


__all__ = ["build_parser", "with_file_argument"]
