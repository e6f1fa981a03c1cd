"""Raw (JSON-compatible) expression form → typed expression nodes.

Query builders and macro files describe filters as nested lists whose first
element is the tag::

    ["and", ["!=", ["field", 3], None], ["or", [">", ["field", 4], 25],
                                               ["=", ["field", 2], "Jerry"]]]

Sub-lists that are the same object become the same node, so sharing in the
raw tree survives parsing. A list that contains itself is rejected.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

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
from filterql.errors import CircularDependencyError, ExpressionSyntaxError

#: ``(args, parse_expression, parse_value) -> node`` for application-defined tags.
CustomParser = Callable[
    [Sequence[Any], Callable[[Any], Expr], Callable[[Any], Value]],
    Expr,
]

_JUNCTIONS: dict[str, type[And] | type[Or]] = {"and": And, "or": Or}
_ORDERINGS: dict[str, type[LessThan] | type[GreaterThan]] = {"<": LessThan, ">": GreaterThan}
_EQUALITIES: dict[str, type[Equal] | type[NotEqual]] = {"=": Equal, "!=": NotEqual}
_NULL_CHECKS: dict[str, type[IsEmpty] | type[NotEmpty]] = {
    "is-empty": IsEmpty,
    "not-empty": NotEmpty,
}

_SCALARS = (str, int, float, bool)


def parse_expression(raw: Any, custom: Mapping[str, CustomParser] | None = None) -> Expr:
    """Parse a raw nested-list expression into typed nodes.

    Args:
        raw: The raw expression (a list whose first element is the tag).
        custom: Optional parsers for application-defined tags.

    Returns:
        The root expression node.

    Raises:
        ExpressionSyntaxError: If the raw form is malformed.
        CircularDependencyError: If a list contains itself.
    """
    return _RawParser(custom or {}).expression(raw, "", ())


class _RawParser:
    """One parse run; memoizes sub-lists by identity."""

    def __init__(self, custom: Mapping[str, CustomParser]) -> None:
        self._custom = custom
        self._nodes: dict[int, Expr] = {}

    def expression(self, raw: Any, path: str, ancestors: tuple[Any, ...]) -> Expr:
        if not isinstance(raw, list | tuple) or not raw:
            raise ExpressionSyntaxError("Expected a non-empty list expression", path)
        tag = raw[0]
        if any(a is raw for a in ancestors):
            raise CircularDependencyError(str(tag))
        cached = self._nodes.get(id(raw))
        if cached is not None:
            return cached

        node = self._build(tag, raw[1:], path, ancestors + (raw,))
        self._nodes[id(raw)] = node
        return node

    def value(self, raw: Any, path: str) -> Value:
        if raw is None or isinstance(raw, _SCALARS):
            return raw
        if isinstance(raw, list | tuple) and raw and raw[0] == "field":
            return self._field(raw[1:], path)
        raise ExpressionSyntaxError(
            f"Expected a literal or field reference, got {type(raw).__name__}", path
        )

    def _build(self, tag: Any, args: Sequence[Any], path: str, ancestors: tuple[Any, ...]) -> Expr:
        def child(i: int) -> Expr:
            return self.expression(args[i], f"{path}[{i + 1}]", ancestors)

        def val(i: int) -> Value:
            return self.value(args[i], f"{path}[{i + 1}]")

        if not isinstance(tag, str):
            raise ExpressionSyntaxError("Expression tag must be a string", path)
        if tag in _JUNCTIONS:
            _expect_arity(tag, args, 2, path)
            return _JUNCTIONS[tag](left=child(0), right=child(1))
        if tag == "not":
            _expect_arity(tag, args, 1, path)
            return Not(operand=child(0))
        if tag in _ORDERINGS:
            _expect_arity(tag, args, 2, path)
            return _ORDERINGS[tag](left=val(0), right=val(1))
        if tag in _EQUALITIES:
            if len(args) < 2:
                raise ExpressionSyntaxError(
                    f"'{tag}' expects a value and at least one comparison value", path
                )
            return _EQUALITIES[tag](
                operand=val(0), values=tuple(val(i) for i in range(1, len(args)))
            )
        if tag in _NULL_CHECKS:
            _expect_arity(tag, args, 1, path)
            return _NULL_CHECKS[tag](value=val(0))
        if tag == "macro":
            _expect_arity(tag, args, 1, path)
            if not isinstance(args[0], str):
                raise ExpressionSyntaxError("Macro name must be a string", path)
            return MacroRef(name=args[0])
        if tag == "field":
            return self._field(args, path)
        if tag in self._custom:
            return self._custom[tag](
                args,
                lambda raw: self.expression(raw, f"{path}[*]", ancestors),
                lambda raw: self.value(raw, f"{path}[*]"),
            )
        raise ExpressionSyntaxError(f"Unknown expression tag: {tag!r}", path)

    @staticmethod
    def _field(args: Sequence[Any], path: str) -> Field:
        _expect_arity("field", args, 1, path)
        number = args[0]
        if isinstance(number, bool) or not isinstance(number, int):
            raise ExpressionSyntaxError("Field number must be an integer", path)
        return Field(number=number)


def _expect_arity(tag: str, args: Sequence[Any], count: int, path: str) -> None:
    if len(args) != count:
        noun = "argument" if count == 1 else "arguments"
        raise ExpressionSyntaxError(
            f"'{tag}' expects {count} {noun}, got {len(args)}", path
        )
