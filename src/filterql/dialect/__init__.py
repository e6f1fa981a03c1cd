"""SQL dialect formatters for filterql."""

from filterql.dialect.base import (
    DEFAULT_FORMATTER,
    Formatter,
    render_column,
    render_operator,
    render_statement,
    render_value,
)
from filterql.dialect.mysql import MYSQL
from filterql.dialect.postgres import POSTGRES
from filterql.dialect.registry import BUILTIN_FORMATTERS, FormatterRegistry
from filterql.dialect.sqlserver import SQLSERVER

__all__ = [
    "BUILTIN_FORMATTERS",
    "DEFAULT_FORMATTER",
    "Formatter",
    "FormatterRegistry",
    "MYSQL",
    "POSTGRES",
    "SQLSERVER",
    "render_column",
    "render_operator",
    "render_statement",
    "render_value",
]
