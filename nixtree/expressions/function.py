"""Function definitions, either `param: body` or `{ a, b, ... }: body`."""

from __future__ import annotations

from typing import Any

from pydantic import field_validator

from nixtree.expressions.expression import NixExpression, coerce_expression
from nixtree.format import indentation


class FunctionDefinition(NixExpression):
    parameters: tuple[str, ...]
    body: NixExpression
    variadic: bool = False

    @field_validator("body", mode="before")
    @classmethod
    def _coerce_body(cls, value: Any) -> Any:
        return coerce_expression(value)

    @property
    def is_pattern(self) -> bool:
        """Whether the parameters need the `{ ... }` pattern form to read back identically."""
        return self.variadic or len(self.parameters) != 1

    def _rebuild_signature(self) -> str:
        if not self.is_pattern:
            return self.parameters[0]
        formals = list(self.parameters)
        if self.variadic:
            formals.append("...")
        if not formals:
            return "{ }"
        return "{ " + ", ".join(formals) + " }"

    def rebuild(self, indent: int = 0, inline: bool = False) -> str:
        body = self.body.rebuild(indent=indent, inline=True)
        return f"{indentation(indent, inline)}{self._rebuild_signature()}: {body}"


__all__ = ["FunctionDefinition"]
