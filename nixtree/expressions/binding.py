"""Rendering shared by attribute sets and let expressions."""

from __future__ import annotations

from collections.abc import Mapping

from nixtree.expressions.expression import NixExpression
from nixtree.format import format_key


def rebuild_bindings(bindings: Mapping[str, NixExpression], indent: int) -> str:
    """Render `key = value;` lines at *indent*, one binding per line."""
    return "\n".join(
        " " * indent
        + f"{format_key(key)} = "
        + value.rebuild(indent=indent, inline=True)
        + ";"
        for key, value in bindings.items()
    )


__all__ = ["rebuild_bindings"]
