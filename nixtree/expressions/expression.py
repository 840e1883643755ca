from __future__ import annotations

import math
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict


class NixExpression(BaseModel):
    """Base class for all Nix values.

    Nodes are immutable once built and own their children exclusively.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    def rebuild(self, indent: int = 0, inline: bool = False) -> str:
        """Reconstruct the Nix source code for this object."""
        raise NotImplementedError

    def __str__(self) -> str:
        return self.rebuild()

    def __hash__(self) -> int:
        return hash(
            (
                type(self),
                tuple(_hashable(getattr(self, name)) for name in type(self).model_fields),
            )
        )


def _hashable(value: Any) -> Any:
    if isinstance(value, Mapping):
        return frozenset(value.items())
    return value


def coerce_expression(value: Any) -> NixExpression:
    """Convert raw Python values into NixExpression instances."""
    if isinstance(value, NixExpression):
        return value
    if value is None:
        from nixtree.expressions.primitive import NullPrimitive

        return NullPrimitive()
    if isinstance(value, bool):
        from nixtree.expressions.primitive import BooleanPrimitive

        return BooleanPrimitive(value=value)
    if isinstance(value, int):
        from nixtree.expressions.primitive import IntegerPrimitive

        return IntegerPrimitive(value=value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError("Unsupported expression type: float must be finite")
        from nixtree.expressions.primitive import FloatPrimitive

        return FloatPrimitive(value=value)
    if isinstance(value, str):
        from nixtree.expressions.primitive import StringPrimitive

        return StringPrimitive(value=value)
    if isinstance(value, (list, tuple)):
        from nixtree.expressions.list import NixList

        return NixList(items=value)
    if isinstance(value, dict):
        from nixtree.expressions.set import NixAttributeSet

        return NixAttributeSet(values=value)
    raise ValueError(f"Unsupported expression type: {type(value)}")


def coerce_bindings(value: Any) -> Any:
    """Coerce the values of a binding mapping, leaving anything else to validation."""
    if isinstance(value, Mapping):
        return {key: coerce_expression(item) for key, item in value.items()}
    return value


def freeze_bindings(value: Mapping[str, NixExpression]) -> Mapping[str, NixExpression]:
    """Expose a binding mapping read-only so built trees cannot change in place."""
    return MappingProxyType(dict(value))


__all__ = ["NixExpression", "coerce_bindings", "coerce_expression", "freeze_bindings"]
