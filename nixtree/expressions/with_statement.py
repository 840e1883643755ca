from __future__ import annotations

from typing import Any

from pydantic import field_validator

from nixtree.expressions.expression import NixExpression, coerce_expression
from nixtree.format import indentation

PLACEHOLDER = "/* not implemented */"


class WithStatement(NixExpression):
    """`with <environment>; <body>`.

    Part of the value model only: the parser has no `with` syntax, and the
    node rebuilds to a placeholder comment.
    """

    environment: NixExpression
    body: NixExpression

    @field_validator("environment", "body", mode="before")
    @classmethod
    def _coerce_children(cls, value: Any) -> Any:
        return coerce_expression(value)

    def rebuild(self, indent: int = 0, inline: bool = False) -> str:
        return indentation(indent, inline) + PLACEHOLDER


__all__ = ["PLACEHOLDER", "WithStatement"]
