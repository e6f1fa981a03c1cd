"""MySQL formatter: backtick-quoted identifiers."""

from __future__ import annotations

from filterql.dialect.base import DEFAULT_FORMATTER


def quote_backtick(name: str) -> str:
    escaped = name.replace("`", "``")
    return f"`{escaped}`"


MYSQL = DEFAULT_FORMATTER.override(format_column=quote_backtick)
