"""Formatter bundles and the shared base rendering capabilities.

A :class:`Formatter` is a record of four rendering capabilities. Dialects are
built by copying :data:`DEFAULT_FORMATTER` and overriding only what differs::

    def format_operator(node, ctx):
        if isinstance(node, Like):
            return f"{ctx.formatter.format_value(node.value, ctx)} LIKE ..."
        return render_operator(node, ctx)

    SQLITE = DEFAULT_FORMATTER.override(format_operator=format_operator)

Overrides always receive the active bundle through ``ctx.formatter``, so a
nested node rendered by the base code still reaches the override.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from decimal import Decimal

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
    SelectStatement,
    Statement,
    Value,
)
from filterql.errors import UnknownFieldError, UnsupportedNodeError, UnsupportedValueError
from filterql.render.context import RenderContext
from filterql.render.resolution import render_expression, render_macro

StatementRenderer = Callable[[Statement, RenderContext], str]
ColumnRenderer = Callable[[str], str]
ValueRenderer = Callable[[Value, RenderContext], str]
OperatorRenderer = Callable[[Expr, RenderContext], str]


@dataclass(frozen=True)
class Formatter:
    """The rendering capabilities that make up one SQL dialect."""

    format_statement: StatementRenderer
    format_column: ColumnRenderer
    format_value: ValueRenderer
    format_operator: OperatorRenderer

    def override(
        self,
        *,
        format_statement: StatementRenderer | None = None,
        format_column: ColumnRenderer | None = None,
        format_value: ValueRenderer | None = None,
        format_operator: OperatorRenderer | None = None,
    ) -> Formatter:
        """Return a copy with the given capabilities replaced."""
        changes = {
            name: fn
            for name, fn in (
                ("format_statement", format_statement),
                ("format_column", format_column),
                ("format_value", format_value),
                ("format_operator", format_operator),
            )
            if fn is not None
        }
        return replace(self, **changes)


def render_statement(statement: Statement, ctx: RenderContext) -> str:
    """Compose ``SELECT <list> [FROM t] [WHERE ...] [LIMIT n]``."""
    if not isinstance(statement, SelectStatement):
        raise UnsupportedNodeError(statement)
    parts: list[str] = [statement.verb, statement.list]
    if statement.from_:
        parts.append(f"FROM {statement.from_}")
    if statement.where is not None:
        parts.append(f"WHERE {render_expression(statement.where, ctx)}")
    if statement.limit is not None:
        parts.append(f"LIMIT {statement.limit}")
    return " ".join(parts)


def render_column(name: str) -> str:
    escaped = name.replace('"', '""')
    return f'"{escaped}"'


def render_value(value: Value, ctx: RenderContext) -> str:
    """Render a field reference or literal.

    Raises:
        UnknownFieldError: If a field number is missing from ``ctx.fields``.
        UnsupportedValueError: For literal types the base does not know.
    """
    match value:
        case Field(number=number):
            column = ctx.fields.get(number)
            if not column:
                raise UnknownFieldError(number)
            return ctx.formatter.format_column(column)
        case None:
            return "NULL"
        case bool():
            return "TRUE" if value else "FALSE"
        case str():
            escaped = value.replace("'", "''")
            return f"'{escaped}'"
        case int() | float() | Decimal():
            return str(value)
        case _:
            raise UnsupportedValueError(value)


def render_operator(node: Expr, ctx: RenderContext) -> str:
    """Render a built-in expression node.

    Children go back through :func:`render_expression` so every level is
    cycle-checked and reaches the active bundle's ``format_operator``.

    Raises:
        UnsupportedNodeError: For node classes outside the built-in set.
    """
    value = ctx.formatter.format_value
    match node:
        case And():
            return _render_junction(" AND ", node.left, node.right, ctx)
        case Or():
            return _render_junction(" OR ", node.left, node.right, ctx)
        case Not(operand=operand):
            return f"NOT ({render_expression(operand, ctx)})"
        case LessThan() | GreaterThan():
            return f"{value(node.left, ctx)} {node.tag} {value(node.right, ctx)}"
        case Equal(operand=operand, values=values):
            return _render_equality(operand, values, False, ctx)
        case NotEqual(operand=operand, values=values):
            return _render_equality(operand, values, True, ctx)
        case IsEmpty():
            return f"{value(node.value, ctx)} IS NULL"
        case NotEmpty():
            return f"{value(node.value, ctx)} IS NOT NULL"
        case Field():
            return value(node, ctx)
        case MacroRef():
            return render_macro(node, ctx)
        case _:
            raise UnsupportedNodeError(node)


def _render_junction(keyword: str, left: Expr, right: Expr, ctx: RenderContext) -> str:
    parts: list[str] = []
    for child in (left, right):
        sql = render_expression(child, ctx)
        # Only a direct AND/OR child is grouped; a macro reference never is.
        if isinstance(child, And | Or):
            sql = f"({sql})"
        parts.append(sql)
    return keyword.join(parts)


def _render_equality(
    operand: Value,
    values: tuple[Value, ...],
    negated: bool,
    ctx: RenderContext,
) -> str:
    value = ctx.formatter.format_value
    left = value(operand, ctx)
    if len(values) == 1:
        (only,) = values
        if only is None:
            return f"{left} IS NOT NULL" if negated else f"{left} IS NULL"
        sign = "<>" if negated else "="
        return f"{left} {sign} {value(only, ctx)}"
    items = ", ".join(value(v, ctx) for v in values)
    keyword = "NOT IN" if negated else "IN"
    return f"{left} {keyword} ({items})"


DEFAULT_FORMATTER = Formatter(
    format_statement=render_statement,
    format_column=render_column,
    format_value=render_value,
    format_operator=render_operator,
)
