"""Attribute set expressions."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import Field, field_validator

from nixtree.expressions.binding import rebuild_bindings
from nixtree.expressions.expression import (
    NixExpression,
    coerce_bindings,
    freeze_bindings,
)
from nixtree.format import INDENT_STEP, indentation


class NixAttributeSet(NixExpression):
    """Mapping literal `{ key = value; ... }`.

    Keys are flattened attribute paths (`services.udev.extraRules` is one key).
    Keys are unique; the mapping keeps first-insertion order while a later
    binding of the same key replaces the earlier value. The mapping is
    read-only once the node is built.
    """

    values: Mapping[str, NixExpression] = Field(default_factory=dict, validate_default=True)

    @field_validator("values", mode="before")
    @classmethod
    def _coerce_values(cls, value: Any) -> Any:
        return coerce_bindings(value)

    @field_validator("values")
    @classmethod
    def _freeze_values(cls, value: Mapping[str, NixExpression]) -> Mapping[str, NixExpression]:
        return freeze_bindings(value)

    def __getitem__(self, key: str) -> NixExpression:
        return self.values[key]

    def __contains__(self, key: object) -> bool:
        return key in self.values

    def __len__(self) -> int:
        return len(self.values)

    def keys(self):
        return self.values.keys()

    def rebuild(self, indent: int = 0, inline: bool = False) -> str:
        """Reconstruct attribute set."""
        opening = indentation(indent, inline)
        if not self.values:
            return f"{opening}{{ }}"
        bindings_str = rebuild_bindings(self.values, indent=indent + INDENT_STEP)
        return f"{opening}{{\n{bindings_str}\n" + " " * indent + "}"


__all__ = ["NixAttributeSet"]
