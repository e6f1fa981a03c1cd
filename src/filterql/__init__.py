"""filterql – compile filter expression trees to dialect-specific SQL.

Public API
----------
``Transpiler``
    Binds a table name, a macro table and a dialect registry; ``compile``
    turns a dialect name, a field map and a ``Query`` into a
    ``CompileResult``.

``parse_expression``
    Convert the raw nested-list form (as emitted by query builders) into
    typed expression nodes.

Usage::

    from filterql import Query, Transpiler
    from filterql.ast.builder import and_, eq, field, gt, ne, or_

    transpiler = Transpiler(table_name="data")
    result = transpiler.compile(
        "postgres",
        {1: "id", 2: "name", 3: "date_joined", 4: "age"},
        Query(where=and_(ne(field(3), None), or_(gt(field(4), 25), eq(field(2), "Jerry")))),
    )
    if result.success:
        print(result.data)

Extensibility
-------------
New dialects are formatter bundles derived from a built-in one::

    from filterql.dialect import POSTGRES, FormatterRegistry

    registry = FormatterRegistry.default().with_formatter(
        "sqlite", POSTGRES.override(format_column=lambda n: f"[{n}]")
    )
    transpiler = Transpiler(table_name="data", formatters=registry)
"""

from __future__ import annotations

__version__ = "0.1.0"

from filterql.ast.nodes import (  # noqa: E402
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
)
from filterql.ast.parser import parse_expression  # noqa: E402
from filterql.compiler.transpiler import CompileResult, Transpiler  # noqa: E402
from filterql.dialect.base import DEFAULT_FORMATTER, Formatter  # noqa: E402
from filterql.dialect.registry import BUILTIN_FORMATTERS, FormatterRegistry  # noqa: E402
from filterql.errors import (  # noqa: E402
    CircularDependencyError,
    ExpressionSyntaxError,
    FormatterError,
    MacroFileError,
    MacroNotFoundError,
    TranspileError,
    UnknownDialectError,
    UnknownFieldError,
    UnsupportedNodeError,
    UnsupportedValueError,
)
from filterql.models.query import Query  # noqa: E402
from filterql.parser.loader import load_macros, load_macros_text  # noqa: E402
from filterql.render.context import RenderContext  # noqa: E402

__all__ = [
    "__version__",
    # Core
    "Transpiler",
    "CompileResult",
    "Query",
    "parse_expression",
    "load_macros",
    "load_macros_text",
    # Nodes
    "And",
    "Or",
    "Not",
    "LessThan",
    "GreaterThan",
    "Equal",
    "NotEqual",
    "IsEmpty",
    "NotEmpty",
    "MacroRef",
    "Field",
    "CustomNode",
    "Expr",
    "SelectStatement",
    # Formatting
    "Formatter",
    "FormatterRegistry",
    "DEFAULT_FORMATTER",
    "BUILTIN_FORMATTERS",
    "RenderContext",
    # Errors
    "TranspileError",
    "UnknownDialectError",
    "UnknownFieldError",
    "MacroNotFoundError",
    "CircularDependencyError",
    "FormatterError",
    "UnsupportedNodeError",
    "UnsupportedValueError",
    "ExpressionSyntaxError",
    "MacroFileError",
]
