"""Expression tree model for filterql."""

from filterql.ast.nodes import (
    And,
    CustomNode,
    Equal,
    Expr,
    Field,
    GreaterThan,
    IsEmpty,
    LessThan,
    MacroRef,
    Not,
    NotEmpty,
    NotEqual,
    Or,
    SelectStatement,
    Statement,
    Value,
)
from filterql.ast.parser import parse_expression

__all__ = [
    "And",
    "CustomNode",
    "Equal",
    "Expr",
    "Field",
    "GreaterThan",
    "IsEmpty",
    "LessThan",
    "MacroRef",
    "Not",
    "NotEmpty",
    "NotEqual",
    "Or",
    "SelectStatement",
    "Statement",
    "Value",
    "parse_expression",
]
