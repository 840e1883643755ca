from __future__ import annotations

from nixtree.expressions.expression import NixExpression
from nixtree.format import indentation


class NixPath(NixExpression):
    """Relative (`./x`, `../x`) or absolute (`/x`) path literal, kept verbatim."""

    path: str

    def rebuild(self, indent: int = 0, inline: bool = False) -> str:
        return indentation(indent, inline) + self.path


__all__ = ["NixPath"]
