from __future__ import annotations

from pydantic import StrictBool, StrictInt

from nixtree.expressions.expression import NixExpression
from nixtree.format import format_float, indentation, quote_nix_string


class Primitive(NixExpression):
    """Base class for scalar literals."""

    def _render_value(self) -> str:
        raise NotImplementedError

    def rebuild(self, indent: int = 0, inline: bool = False) -> str:
        return indentation(indent, inline) + self._render_value()


class NullPrimitive(Primitive):
    """Null literal."""

    def _render_value(self) -> str:
        return "null"


class BooleanPrimitive(Primitive):
    value: StrictBool

    def _render_value(self) -> str:
        return "true" if self.value else "false"


class IntegerPrimitive(Primitive):
    value: StrictInt

    def _render_value(self) -> str:
        return f"{self.value}"


class FloatPrimitive(Primitive):
    value: float

    def _render_value(self) -> str:
        return format_float(self.value)


class StringPrimitive(Primitive):
    """String literal, stored with escapes already decoded."""

    value: str

    def _render_value(self) -> str:
        return quote_nix_string(self.value)


__all__ = [
    "BooleanPrimitive",
    "FloatPrimitive",
    "IntegerPrimitive",
    "NullPrimitive",
    "Primitive",
    "StringPrimitive",
]
