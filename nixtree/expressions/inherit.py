from __future__ import annotations

from nixtree.expressions.expression import NixExpression
from nixtree.expressions.with_statement import PLACEHOLDER
from nixtree.format import indentation


class Inherit(NixExpression):
    """Names brought into scope by `inherit a b;`.

    The parser reads and discards `inherit` statements, so this node only
    appears in hand-built trees; it rebuilds to a placeholder comment.
    """

    names: tuple[str, ...] = ()

    def rebuild(self, indent: int = 0, inline: bool = False) -> str:
        return indentation(indent, inline) + PLACEHOLDER


__all__ = ["Inherit"]
