"""Exception hierarchy for filterql.

All errors raised while compiling an expression tree inherit from
:class:`TranspileError` so the transpiler can normalize them into a single
failure result. Each class carries a machine-readable ``code``.
"""

from __future__ import annotations

from typing import Any


class TranspileError(Exception):
    """Base exception for all filterql errors."""

    code: str = "TRANSPILE_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.details: dict[str, Any] = details or {}

    @property
    def message(self) -> str:
        return str(self)

    def to_error_response(self) -> dict[str, Any]:
        """Return a structured error payload (used by the REST API)."""
        return {"error": self.code, "message": str(self), "details": self.details}


class UnknownDialectError(TranspileError):
    """Raised when a requested dialect is not registered."""

    code = "UNKNOWN_DIALECT"

    def __init__(self, name: str, available: list[str]) -> None:
        self.dialect_name = name
        self.available = available
        super().__init__(
            f"No formatter found for dialect '{name}'. Available: {', '.join(available)}",
            details={"dialect": name, "available": available},
        )


class UnknownFieldError(TranspileError):
    """Raised when a field number is missing from the field map."""

    code = "UNKNOWN_FIELD"

    def __init__(self, number: int) -> None:
        self.number = number
        super().__init__(f"Unknown field number: {number}", details={"field": number})


class MacroNotFoundError(TranspileError):
    """Raised when a macro reference names a macro that is not defined."""

    code = "MACRO_NOT_FOUND"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Macro not found: {name}", details={"macro": name})


class CircularDependencyError(TranspileError):
    """Raised when a node appears among its own ancestors.

    Covers direct self-nesting as well as a chain of macro expansions that
    leads back to a reference already being resolved.
    """

    code = "CIRCULAR_DEPENDENCY"

    def __init__(self, tag: str, macro: str | None = None) -> None:
        self.tag = tag
        self.macro = macro
        super().__init__(
            "Circular dependency detected",
            details={"tag": tag, "macro": macro},
        )


class FormatterError(TranspileError):
    """Wraps any unexpected exception raised while rendering.

    Args:
        message: Human-readable description.
        cause: The original exception, also chained as ``__cause__``.
    """

    code = "FORMATTER_ERROR"

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(
            message,
            details={"cause": type(cause).__name__} if cause is not None else None,
        )
        self.cause = cause


class UnsupportedNodeError(TranspileError):
    """Raised when no formatter capability handles an expression node class."""

    code = "UNSUPPORTED_NODE"

    def __init__(self, node: object) -> None:
        self.node_type = type(node).__name__
        super().__init__(
            f"No operator renderer for node type '{self.node_type}'",
            details={"node_type": self.node_type},
        )


class UnsupportedValueError(TranspileError):
    """Raised when no formatter capability handles a literal value type."""

    code = "UNSUPPORTED_VALUE"

    def __init__(self, value: object) -> None:
        self.value_type = type(value).__name__
        super().__init__(
            f"No value renderer for literal type '{self.value_type}'",
            details={"value_type": self.value_type},
        )


class ExpressionSyntaxError(TranspileError):
    """Raised when a raw (nested-list) expression is malformed.

    Args:
        message: Human-readable description.
        path: Index path to the offending element, e.g. ``"[1][2]"``.
    """

    code = "EXPRESSION_SYNTAX"

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(f"{message} (at {path or 'root'})", details={"path": path})
        self.path = path


class MacroFileError(TranspileError):
    """Raised when a macro definition file cannot be loaded safely."""

    code = "MACRO_FILE"
