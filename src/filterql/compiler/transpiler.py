"""Transpiler façade: dialect name + field map + query → SQL text or failure."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from filterql.ast.nodes import Expr, SelectStatement
from filterql.dialect.base import Formatter
from filterql.dialect.registry import FormatterRegistry
from filterql.errors import FormatterError, TranspileError, UnknownDialectError
from filterql.models.query import Query
from filterql.parser.loader import load_macros
from filterql.render.context import RenderContext

if TYPE_CHECKING:
    from filterql.settings import Settings

logger = logging.getLogger("filterql.transpiler")


@dataclass(frozen=True)
class CompileResult:
    """Outcome of one compile call: either ``data`` or ``error``, never both."""

    success: bool
    data: str | None = None
    error: TranspileError | None = None

    @classmethod
    def ok(cls, sql: str) -> CompileResult:
        return cls(success=True, data=sql)

    @classmethod
    def fail(cls, error: TranspileError) -> CompileResult:
        return cls(success=False, error=error)

    @property
    def message(self) -> str | None:
        """Description of the failure, or ``None`` on success."""
        return str(self.error) if self.error is not None else None

    def unwrap(self) -> str:
        """Return the SQL text, raising the carried error on failure."""
        if self.error is not None:
            raise self.error
        if self.data is None:
            raise ValueError("CompileResult carries neither SQL nor an error")
        return self.data


class Transpiler:
    """Compiles filter expression trees to dialect-specific SELECT statements.

    Configuration is bound once and never mutated, so one instance can serve
    concurrent callers.

    Args:
        table_name: Source table for the ``FROM`` clause; omitted when ``None``.
        macros: Macro name → expression body.
        formatters: Dialect registry, or a plain name → formatter mapping.
            Defaults to the built-in dialects.
    """

    def __init__(
        self,
        table_name: str | None = None,
        macros: Mapping[str, Expr] | None = None,
        formatters: FormatterRegistry | Mapping[str, Formatter] | None = None,
    ) -> None:
        self._table_name = table_name
        self._macros: Mapping[str, Expr] = MappingProxyType(dict(macros or {}))
        if isinstance(formatters, FormatterRegistry):
            self._formatters = formatters
        else:
            self._formatters = FormatterRegistry(formatters)

    @classmethod
    def from_settings(cls, settings: Settings) -> Transpiler:
        """Build a transpiler from environment settings (table, macro file)."""
        macros = load_macros(settings.macros_file) if settings.macros_file else None
        return cls(table_name=settings.table_name, macros=macros)

    @property
    def table_name(self) -> str | None:
        return self._table_name

    @property
    def macros(self) -> Mapping[str, Expr]:
        return self._macros

    @property
    def dialects(self) -> list[str]:
        return self._formatters.available()

    def compile(
        self,
        dialect: str,
        fields: Mapping[int, str],
        query: Query | None = None,
    ) -> CompileResult:
        """Render ``query`` as a ``SELECT`` statement for ``dialect``.

        Never raises for bad input: an unknown dialect, unknown field,
        missing macro, circular reference, or any exception from a formatter
        becomes a failed :class:`CompileResult`.
        """
        if query is None:
            query = Query()
        try:
            formatter = self._formatters.get(dialect)
        except UnknownDialectError as exc:
            return self._failed(dialect, exc)

        statement = SelectStatement(
            list="*",
            from_=self._table_name,
            where=query.where,
            limit=query.limit,
        )
        ctx = RenderContext(
            formatter=formatter,
            fields=MappingProxyType(dict(fields)),
            macros=self._macros,
        )
        try:
            sql = formatter.format_statement(statement, ctx)
        except TranspileError as exc:
            return self._failed(dialect, exc)
        except Exception as exc:  # noqa: BLE001 - extension formatters may raise anything
            error = FormatterError(f"Formatter for dialect '{dialect}' failed: {exc}", cause=exc)
            error.__cause__ = exc
            return self._failed(dialect, error)

        logger.debug("compiled query for dialect=%s: %s", dialect, sql)
        return CompileResult.ok(f"{sql};")

    @staticmethod
    def _failed(dialect: str, error: TranspileError) -> CompileResult:
        logger.warning("compile failed (dialect=%s, code=%s): %s", dialect, error.code, error)
        return CompileResult.fail(error)
