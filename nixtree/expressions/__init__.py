from .expression import NixExpression, coerce_expression
from .function import FunctionDefinition
from .identifier import Identifier
from .import_expression import Import
from .inherit import Inherit
from .let import LetExpression
from .list import NixList
from .path import NixPath
from .primitive import (
    BooleanPrimitive,
    FloatPrimitive,
    IntegerPrimitive,
    NullPrimitive,
    Primitive,
    StringPrimitive,
)
from .set import NixAttributeSet
from .with_statement import WithStatement

__all__ = [
    "BooleanPrimitive",
    "FloatPrimitive",
    "FunctionDefinition",
    "Identifier",
    "Import",
    "Inherit",
    "IntegerPrimitive",
    "LetExpression",
    "NixAttributeSet",
    "NixExpression",
    "NixList",
    "NixPath",
    "NullPrimitive",
    "Primitive",
    "StringPrimitive",
    "WithStatement",
    "coerce_expression",
]
