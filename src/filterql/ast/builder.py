"""Convenience constructors for building expression trees in code."""

from __future__ import annotations

from filterql.ast.nodes import (
    And,
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
    Value,
)


def field(number: int) -> Field:
    """Create a field reference."""
    return Field(number=number)


def and_(left: Expr, right: Expr, *more: Expr) -> And:
    """Chain conditions with AND (left-nested when more than two are given)."""
    result = And(left=left, right=right)
    for cond in more:
        result = And(left=result, right=cond)
    return result


def or_(left: Expr, right: Expr, *more: Expr) -> Or:
    """Chain conditions with OR (left-nested when more than two are given)."""
    result = Or(left=left, right=right)
    for cond in more:
        result = Or(left=result, right=cond)
    return result


def not_(operand: Expr) -> Not:
    return Not(operand=operand)


def lt(left: Value, right: Value) -> LessThan:
    return LessThan(left=left, right=right)


def gt(left: Value, right: Value) -> GreaterThan:
    return GreaterThan(left=left, right=right)


def eq(operand: Value, *values: Value) -> Equal:
    """Create an equality (one value) or membership (several values) test."""
    return Equal(operand=operand, values=values)


def ne(operand: Value, *values: Value) -> NotEqual:
    """Create an inequality (one value) or exclusion (several values) test."""
    return NotEqual(operand=operand, values=values)


def is_empty(value: Value) -> IsEmpty:
    return IsEmpty(value=value)


def not_empty(value: Value) -> NotEmpty:
    return NotEmpty(value=value)


def macro(name: str) -> MacroRef:
    """Create a reference to a named macro."""
    return MacroRef(name=name)
