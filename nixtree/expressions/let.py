from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import Field, field_validator

from nixtree.expressions.binding import rebuild_bindings
from nixtree.expressions.expression import (
    NixExpression,
    coerce_bindings,
    coerce_expression,
    freeze_bindings,
)
from nixtree.format import INDENT_STEP, indentation


class LetExpression(NixExpression):
    """`let <bindings> in <body>`."""

    bindings: Mapping[str, NixExpression] = Field(default_factory=dict, validate_default=True)
    body: NixExpression

    @field_validator("bindings", mode="before")
    @classmethod
    def _coerce_bindings(cls, value: Any) -> Any:
        return coerce_bindings(value)

    @field_validator("bindings")
    @classmethod
    def _freeze_bindings(cls, value: Mapping[str, NixExpression]) -> Mapping[str, NixExpression]:
        return freeze_bindings(value)

    @field_validator("body", mode="before")
    @classmethod
    def _coerce_body(cls, value: Any) -> Any:
        return coerce_expression(value)

    def __getitem__(self, key: str) -> NixExpression:
        return self.bindings[key]

    def __contains__(self, key: object) -> bool:
        return key in self.bindings

    def keys(self):
        return self.bindings.keys()

    def rebuild(self, indent: int = 0, inline: bool = False) -> str:
        lines = [f"{indentation(indent, inline)}let"]
        if self.bindings:
            lines.append(rebuild_bindings(self.bindings, indent=indent + INDENT_STEP))
        lines.append(" " * indent + "in")
        lines.append(self.body.rebuild(indent=indent))
        return "\n".join(lines)


__all__ = ["LetExpression"]
