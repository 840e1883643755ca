"""`import` expressions."""

from __future__ import annotations

from nixtree.expressions.expression import NixExpression
from nixtree.format import PATH_PATTERN, indentation, quote_nix_string


class Import(NixExpression):
    """Represent `import <target>` where the target is raw path or string text.

    The target is not followed or evaluated.
    """

    target: str

    @property
    def is_path(self) -> bool:
        return PATH_PATTERN.fullmatch(self.target) is not None

    def rebuild(self, indent: int = 0, inline: bool = False) -> str:
        """Emit path-shaped targets bare and anything else as a string."""
        target = self.target if self.is_path else quote_nix_string(self.target)
        return f"{indentation(indent, inline)}import {target}"


__all__ = ["Import"]
