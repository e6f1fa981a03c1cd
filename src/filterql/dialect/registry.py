"""Dialect name → formatter bundle registry."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from filterql.dialect.base import Formatter
from filterql.dialect.mysql import MYSQL
from filterql.dialect.postgres import POSTGRES
from filterql.dialect.sqlserver import SQLSERVER
from filterql.errors import UnknownDialectError

BUILTIN_FORMATTERS: Mapping[str, Formatter] = MappingProxyType(
    {
        "postgres": POSTGRES,
        "mysql": MYSQL,
        "sqlserver": SQLSERVER,
    }
)


class FormatterRegistry:
    """Read-only mapping of dialect names to formatter bundles.

    Built once and handed to a transpiler. Extending it yields a new
    registry; an existing one never changes::

        registry = FormatterRegistry.default().with_formatter(
            "sqlite", POSTGRES.override(format_operator=render_like)
        )
    """

    def __init__(self, formatters: Mapping[str, Formatter] | None = None) -> None:
        source = BUILTIN_FORMATTERS if formatters is None else formatters
        self._formatters: Mapping[str, Formatter] = MappingProxyType(dict(source))

    @classmethod
    def default(cls) -> FormatterRegistry:
        """Registry holding the built-in dialects."""
        return cls()

    def get(self, name: str) -> Formatter:
        """Return the formatter registered as ``name``.

        Raises:
            UnknownDialectError: If no formatter is registered for ``name``.
        """
        formatter = self._formatters.get(name)
        if formatter is None:
            raise UnknownDialectError(name, available=self.available())
        return formatter

    def available(self) -> list[str]:
        """List registered dialect names."""
        return sorted(self._formatters)

    def with_formatter(self, name: str, formatter: Formatter) -> FormatterRegistry:
        """Return a new registry with ``name`` added or replaced."""
        return FormatterRegistry({**self._formatters, name: formatter})

    def __contains__(self, name: object) -> bool:
        return name in self._formatters

    def __iter__(self) -> Iterator[str]:
        return iter(self.available())

    def __len__(self) -> int:
        return len(self._formatters)
