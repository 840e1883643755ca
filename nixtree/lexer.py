"""Lexical scanners for the supported Nix dialect.

Every scanner reads from a :class:`~nixtree.cursor.Cursor` starting at its
current position and leaves the cursor just after the consumed token. A scanner
that cannot read its token raises :class:`~nixtree.exceptions.NixSyntaxError`.
"""

from __future__ import annotations

from nixtree.cursor import Cursor
from nixtree.format import escape_nix_string

PATH_CHARACTERS = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_./-"
)

ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "\\": "\\",
    '"': '"',
    "'": "'",
}


def is_identifier_char(char: str | None) -> bool:
    return char is not None and (char.isalnum() or char in "_-'")


def skip_trivia(cursor: Cursor) -> None:
    """Skip whitespace, `#` line comments and `/* */` block comments.

    An unterminated block comment runs to the end of input.
    """
    while (char := cursor.current) is not None:
        if char.isspace():
            cursor.advance()
        elif char == "#":
            while (char := cursor.current) is not None:
                cursor.advance()
                if char == "\n":
                    break
        elif cursor.peek_string("/*"):
            cursor.advance(2)
            while not cursor.at_end() and not cursor.peek_string("*/"):
                cursor.advance()
            cursor.advance(2)
        else:
            break


def at_keyword(cursor: Cursor, keyword: str) -> bool:
    """Match *keyword* as a whole word at the cursor."""
    return cursor.peek_string(keyword) and not is_identifier_char(
        cursor.peek(len(keyword))
    )


def scan_identifier(cursor: Cursor) -> str:
    start = cursor.position
    while is_identifier_char(cursor.current):
        cursor.advance()
    if cursor.position == start:
        raise cursor.error("expected identifier")
    return cursor.text[start : cursor.position]


def scan_path(cursor: Cursor) -> str:
    start = cursor.position
    while cursor.current is not None and cursor.current in PATH_CHARACTERS:
        cursor.advance()
    if cursor.position == start:
        raise cursor.error("expected path")
    return cursor.text[start : cursor.position]


def _ends_attribute_path(cursor: Cursor) -> bool:
    """A `.` followed by `/` or `.` starts a path literal, never an attrpath segment."""
    return cursor.current == "." and cursor.peek() in ("/", ".")


def scan_attribute_path(cursor: Cursor) -> str:
    """Read a dotted attribute path such as `fileSystems."/".options`.

    Quoted segments keep their quotes so the flattened key can be re-emitted.
    """
    if _ends_attribute_path(cursor):
        raise cursor.error("path found where identifier expected")

    segments: list[str] = []
    while True:
        if cursor.current == '"':
            segment = scan_string(cursor)
            segments.append(f'"{escape_nix_string(segment, escape_interpolation=True)}"')
        else:
            segments.append(scan_identifier(cursor))

        skip_trivia(cursor)
        if cursor.current != "." or _ends_attribute_path(cursor):
            break
        cursor.advance()
        skip_trivia(cursor)
    return ".".join(segments)


def scan_string(cursor: Cursor) -> str:
    """Read a quoted string.

    `''...''` strings are taken verbatim; `"..."` and `'...'` strings decode
    backslash escapes, passing unknown escapes through as the escaped character.
    """
    quote = cursor.current
    if quote is None:
        raise cursor.error("expected quote")

    if cursor.peek_string("''"):
        cursor.advance(2)
        start = cursor.position
        while not cursor.at_end():
            if cursor.peek_string("''"):
                text = cursor.text[start : cursor.position]
                cursor.advance(2)
                return text
            cursor.advance()
        raise cursor.error("unterminated multi-line string")

    cursor.advance()
    chars: list[str] = []
    while (char := cursor.current) is not None:
        if char == "\\":
            cursor.advance()
            escaped = cursor.current
            if escaped is None:
                break
            chars.append(ESCAPES.get(escaped, escaped))
        elif char == quote:
            cursor.advance()
            return "".join(chars)
        else:
            chars.append(char)
        cursor.advance()
    raise cursor.error("unterminated string")


def scan_number(cursor: Cursor) -> int | float:
    """Read a run of digits, `.` and `-`, then convert it.

    The run is a float when it contains a `.`. A run that does not convert is
    reported at its first character.
    """
    start = cursor.snapshot()
    while (char := cursor.current) is not None and (char.isdigit() or char in ".-"):
        cursor.advance()
    text = cursor.text[start.position : cursor.position]

    try:
        if "." in text:
            return float(text)
        return int(text)
    except ValueError:
        kind = "float" if "." in text else "integer"
        raise cursor.error(f"invalid {kind} {text!r}", state=start) from None


__all__ = [
    "at_keyword",
    "is_identifier_char",
    "scan_attribute_path",
    "scan_identifier",
    "scan_number",
    "scan_path",
    "scan_string",
    "skip_trivia",
]
