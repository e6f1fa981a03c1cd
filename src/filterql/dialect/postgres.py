"""PostgreSQL formatter: the shared base, unmodified."""

from __future__ import annotations

from filterql.dialect.base import DEFAULT_FORMATTER

POSTGRES = DEFAULT_FORMATTER.override()
