from __future__ import annotations

from nixtree.expressions.expression import NixExpression
from nixtree.format import indentation


class Identifier(NixExpression):
    """Unresolved variable reference, possibly a dotted attribute path."""

    name: str

    def rebuild(self, indent: int = 0, inline: bool = False) -> str:
        """Reconstruct identifier."""
        return indentation(indent, inline) + self.name


__all__ = ["Identifier"]
