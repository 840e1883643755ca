"""Text helpers shared by the expression rebuilders."""

from __future__ import annotations

import math
import re
from decimal import Decimal

INDENT_STEP = 2

_SEGMENT = r"""(?:[\w'-]+|"(?:[^"\\]|\\.)*")"""
ATTRPATH_PATTERN = re.compile(rf"{_SEGMENT}(?:\.{_SEGMENT})*")
PATH_PATTERN = re.compile(r"(?:/|\.[./])[A-Za-z0-9_./-]*")

# Names that the binding parsers read as keywords when they open a key.
KEY_KEYWORDS = frozenset({"in", "inherit"})


def escape_nix_string(value: str, *, escape_interpolation: bool = False) -> str:
    """Escape string content so rebuilds emit valid Nix.

    When *escape_interpolation* is True, `${` is escaped to keep strings
    literal (useful for attr names).
    """
    escaped: list[str] = []
    index = 0
    while index < len(value):
        ch = value[index]
        if ch == "\\":
            escaped.append("\\\\")
        elif ch == '"':
            escaped.append('\\"')
        elif ch == "\n":
            escaped.append("\\n")
        elif ch == "\r":
            escaped.append("\\r")
        elif ch == "\t":
            escaped.append("\\t")
        elif (
            escape_interpolation
            and ch == "$"
            and index + 1 < len(value)
            and value[index + 1] == "{"
        ):
            escaped.append("\\${")
            index += 2
            continue
        else:
            escaped.append(ch)
        index += 1
    return "".join(escaped)


def quote_nix_string(value: str) -> str:
    return f'"{escape_nix_string(value, escape_interpolation=True)}"'


def format_key(key: str) -> str:
    """Render a binding key, quoting it unless it reads back as the same attrpath."""
    first_segment = key.split(".", 1)[0]
    if (
        ATTRPATH_PATTERN.fullmatch(key)
        and not key.startswith('"')
        and first_segment not in KEY_KEYWORDS
    ):
        return key
    return quote_nix_string(key)


def format_float(value: float) -> str:
    """Render floats positionally and always with a `.` so they parse back as floats."""
    if not math.isfinite(value):
        raise ValueError("Unsupported expression type: float must be finite")
    text = repr(value)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    if "." not in text:
        text += ".0"
    return text


def indentation(indent: int, inline: bool) -> str:
    return "" if inline else " " * indent


__all__ = [
    "ATTRPATH_PATTERN",
    "INDENT_STEP",
    "PATH_PATTERN",
    "escape_nix_string",
    "format_float",
    "format_key",
    "indentation",
    "quote_nix_string",
]
