"""Recursive-descent parser producing :mod:`nixtree.expressions` value trees."""

from __future__ import annotations

import logging
from pathlib import Path

from nixtree.cursor import Cursor
from nixtree.exceptions import NixIOError, NixSyntaxError
from nixtree.expressions import (
    BooleanPrimitive,
    FloatPrimitive,
    FunctionDefinition,
    Identifier,
    Import,
    IntegerPrimitive,
    LetExpression,
    NixAttributeSet,
    NixExpression,
    NixList,
    NixPath,
    NullPrimitive,
    StringPrimitive,
)
from nixtree.lexer import (
    at_keyword,
    is_identifier_char,
    scan_attribute_path,
    scan_identifier,
    scan_number,
    scan_path,
    scan_string,
    skip_trivia,
)

logger = logging.getLogger(__name__)


class Parser:
    """Parse one Nix value from *source*.

    A parser owns its cursor and is meant to be used for a single parse.
    """

    def __init__(self, source: str):
        self.cursor = Cursor(source)

    def parse(self) -> NixExpression:
        """Parse the whole input as one value; trailing input is an error."""
        try:
            value = self.parse_value()
        except RecursionError:
            raise self.cursor.error("nesting too deep") from None
        skip_trivia(self.cursor)
        if not self.cursor.at_end():
            raise self.cursor.error("unexpected trailing input")
        return value

    def parse_value(self) -> NixExpression:
        cursor = self.cursor
        skip_trivia(cursor)
        char = cursor.current

        if char is None:
            raise cursor.error("unexpected end of input")
        if char == "{":
            return self._parse_brace()
        if char == "[":
            return self._parse_list()
        if char in "\"'":
            return StringPrimitive(value=scan_string(cursor))
        if char.isdigit() or (char == "-" and (cursor.peek() or "").isdigit()):
            return self._parse_number()
        if char == ".":
            if cursor.peek() in ("/", "."):
                return NixPath(path=scan_path(cursor))
            raise cursor.error("unexpected '.', expected a path or attribute access")
        if char == "/":
            return NixPath(path=scan_path(cursor))

        if at_keyword(cursor, "null"):
            cursor.advance(4)
            return NullPrimitive()
        if at_keyword(cursor, "true"):
            cursor.advance(4)
            return BooleanPrimitive(value=True)
        if at_keyword(cursor, "false"):
            cursor.advance(5)
            return BooleanPrimitive(value=False)
        if at_keyword(cursor, "let"):
            return self._parse_let()
        if at_keyword(cursor, "import"):
            return self._parse_import()

        if not is_identifier_char(char):
            raise cursor.error(f"unexpected character {char!r}")
        return self._parse_variable_or_function()

    def _parse_number(self) -> NixExpression:
        number = scan_number(self.cursor)
        if isinstance(number, float):
            return FloatPrimitive(value=number)
        return IntegerPrimitive(value=number)

    def _parse_list(self) -> NixList:
        cursor = self.cursor
        cursor.advance()  # '['
        skip_trivia(cursor)

        items: list[NixExpression] = []
        while cursor.current not in ("]", None):
            items.append(self.parse_value())
            skip_trivia(cursor)

        if cursor.current == "]":
            cursor.advance()
        return NixList(items=items)

    def _parse_brace(self) -> NixExpression:
        """Disambiguate `{ a, b, ... }: body` from an attribute set literal.

        The parameter pattern is tried first; unless it scans cleanly and is
        followed by `:`, the cursor is rolled back to the `{` and the same span
        is parsed as an attribute set.
        """
        cursor = self.cursor
        start = cursor.snapshot()

        try:
            parameters, variadic = self._parse_function_parameters()
        except NixSyntaxError:
            pass
        else:
            skip_trivia(cursor)
            if cursor.current == ":":
                cursor.advance()
                body = self.parse_value()
                return FunctionDefinition(
                    parameters=parameters, body=body, variadic=variadic
                )

        logger.debug(
            f"Not a function pattern at line {start.line}, column {start.column}; "
            "parsing as attribute set"
        )
        cursor.restore(start)
        return self._parse_attribute_set()

    def _parse_function_parameters(self) -> tuple[list[str], bool]:
        cursor = self.cursor
        cursor.advance()  # '{'
        skip_trivia(cursor)

        parameters: list[str] = []
        variadic = False
        while cursor.current != "}":
            if cursor.at_end():
                raise cursor.error("unterminated function pattern")
            if cursor.peek_string("..."):
                cursor.advance(3)
                variadic = True
            else:
                parameters.append(scan_identifier(cursor))
            skip_trivia(cursor)
            if cursor.current == ",":
                cursor.advance()
                skip_trivia(cursor)

        cursor.advance()  # '}'
        return parameters, variadic

    def _parse_attribute_set(self) -> NixAttributeSet:
        cursor = self.cursor
        cursor.advance()  # '{'
        skip_trivia(cursor)

        values: dict[str, NixExpression] = {}
        while cursor.current not in ("}", None):
            self._parse_binding(values)
            skip_trivia(cursor)

        if cursor.current == "}":
            cursor.advance()
        return NixAttributeSet(values=values)

    def _parse_let(self) -> LetExpression:
        cursor = self.cursor
        cursor.advance(3)  # 'let'
        skip_trivia(cursor)

        bindings: dict[str, NixExpression] = {}
        while not at_keyword(cursor, "in"):
            if cursor.at_end():
                raise cursor.error("expected 'in' to close let expression")
            self._parse_binding(bindings)
            skip_trivia(cursor)

        cursor.advance(2)  # 'in'
        body = self.parse_value()
        return LetExpression(bindings=bindings, body=body)

    def _parse_binding(self, bindings: dict[str, NixExpression]) -> None:
        """Read one `key = value;` or `inherit a b;` entry into *bindings*.

        Inherited names are consumed and dropped.
        """
        cursor = self.cursor
        if at_keyword(cursor, "inherit"):
            cursor.advance(7)
            skip_trivia(cursor)
            while cursor.current not in (";", None):
                scan_identifier(cursor)
                skip_trivia(cursor)
            if cursor.current == ";":
                cursor.advance()
            return

        key = self._parse_key()
        skip_trivia(cursor)
        if cursor.current != "=":
            found = "end of input" if cursor.current is None else repr(cursor.current)
            raise cursor.error(f"expected '=' after key {key!r}, found {found}")
        cursor.advance()

        bindings[key] = self.parse_value()
        skip_trivia(cursor)
        if cursor.current == ";":
            cursor.advance()

    def _parse_key(self) -> str:
        """Read a binding key.

        A lone quoted key yields its decoded text; a quoted key continued by
        `.` is read as a whole attribute path instead.
        """
        cursor = self.cursor
        if cursor.current != '"':
            return scan_attribute_path(cursor)

        start = cursor.snapshot()
        key = scan_string(cursor)
        skip_trivia(cursor)
        if cursor.current == "." and cursor.peek() not in ("/", "."):
            cursor.restore(start)
            return scan_attribute_path(cursor)
        return key

    def _parse_import(self) -> Import:
        cursor = self.cursor
        cursor.advance(6)  # 'import'
        skip_trivia(cursor)

        start = cursor.snapshot()
        argument = self.parse_value()
        if isinstance(argument, StringPrimitive):
            return Import(target=argument.value)
        if isinstance(argument, NixPath):
            return Import(target=argument.path)
        raise cursor.error("expected string or path after import", state=start)

    def _parse_variable_or_function(self) -> NixExpression:
        cursor = self.cursor
        name = scan_attribute_path(cursor)
        skip_trivia(cursor)

        if cursor.current == ":":
            cursor.advance()
            body = self.parse_value()
            return FunctionDefinition(parameters=[name], body=body)
        return Identifier(name=name)


def parse_text(source: str) -> NixExpression:
    """Parse Nix source text into a value tree."""
    return Parser(source).parse()


def parse_file(path: str | Path) -> NixExpression:
    """Read and parse a Nix file, wrapping read failures in NixIOError."""
    path = Path(path)
    logger.debug(f"Parsing {path}")
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as error:
        raise NixIOError(
            f"Failed to read file: {error}", context=f"File: {path}"
        ) from error
    return parse_text(source)


def parse(source: bytes | str | Path) -> NixExpression:
    """Parse Nix source given as text, UTF-8 bytes or a file path."""
    if isinstance(source, Path):
        return parse_file(source)
    if isinstance(source, bytes):
        source = source.decode("utf-8")
    return parse_text(source)


def dumps(value: NixExpression) -> str:
    """Render a value tree as Nix source text."""
    return value.rebuild()


def write_file(path: str | Path, value: NixExpression) -> None:
    """Serialize *value* to *path*, wrapping write failures in NixIOError."""
    path = Path(path)
    content = dumps(value) + "\n"
    logger.debug(f"Writing {path}")
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as error:
        raise NixIOError(
            f"Failed to write file: {error}", context=f"File: {path}"
        ) from error


__all__ = ["Parser", "dumps", "parse", "parse_file", "parse_text", "write_file"]
