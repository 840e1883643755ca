"""List expressions."""

from __future__ import annotations

from typing import Any

from pydantic import field_validator

from nixtree.expressions.expression import NixExpression, coerce_expression
from nixtree.format import INDENT_STEP, indentation


class NixList(NixExpression):
    """Ordered list of values, rendered one element per line."""

    items: tuple[NixExpression, ...] = ()

    @field_validator("items", mode="before")
    @classmethod
    def _coerce_items(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return tuple(coerce_expression(item) for item in value)
        return value

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> NixExpression:
        return self.items[index]

    def rebuild(self, indent: int = 0, inline: bool = False) -> str:
        """Reconstruct list."""
        opening = indentation(indent, inline)
        if not self.items:
            return f"{opening}[ ]"
        items_str = "\n".join(
            item.rebuild(indent=indent + INDENT_STEP) for item in self.items
        )
        return f"{opening}[\n{items_str}\n" + " " * indent + "]"


__all__ = ["NixList"]
