"""SQL Server formatter: row limit as ``SELECT TOP n`` instead of ``LIMIT``."""

from __future__ import annotations

from filterql.ast.nodes import SelectStatement, Statement
from filterql.dialect.base import DEFAULT_FORMATTER
from filterql.errors import UnsupportedNodeError
from filterql.render.context import RenderContext
from filterql.render.resolution import render_expression


def render_top_statement(statement: Statement, ctx: RenderContext) -> str:
    """Compose ``SELECT [TOP n] <list> [FROM t] [WHERE ...]``."""
    if not isinstance(statement, SelectStatement):
        raise UnsupportedNodeError(statement)
    parts: list[str] = [statement.verb]
    if statement.limit is not None:
        parts.append(f"TOP {statement.limit}")
    parts.append(statement.list)
    if statement.from_:
        parts.append(f"FROM {statement.from_}")
    if statement.where is not None:
        parts.append(f"WHERE {render_expression(statement.where, ctx)}")
    return " ".join(parts)


SQLSERVER = DEFAULT_FORMATTER.override(format_statement=render_top_statement)
