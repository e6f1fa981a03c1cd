"""Immutable expression and statement nodes. All SQL is rendered from these."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar


@dataclass(frozen=True)
class Field:
    """Indirect column reference, resolved through a per-call field map."""

    tag: ClassVar[str] = "field"

    number: int


# Literal scalars understood by the base formatter. Extension formatters may
# accept further types (e.g. datetime) through their own value renderer.
LiteralValue = int | float | Decimal | str | bool | None

Value = Field | LiteralValue


@dataclass(frozen=True)
class And:
    """Conjunction of exactly two child expressions."""

    tag: ClassVar[str] = "and"

    left: Expr
    right: Expr


@dataclass(frozen=True)
class Or:
    """Disjunction of exactly two child expressions."""

    tag: ClassVar[str] = "or"

    left: Expr
    right: Expr


@dataclass(frozen=True)
class Not:
    """Negation: NOT (operand)."""

    tag: ClassVar[str] = "not"

    operand: Expr


@dataclass(frozen=True)
class LessThan:
    tag: ClassVar[str] = "<"

    left: Value
    right: Value


@dataclass(frozen=True)
class GreaterThan:
    tag: ClassVar[str] = ">"

    left: Value
    right: Value


@dataclass(frozen=True)
class _ValueList:
    tag: ClassVar[str]

    operand: Value
    values: tuple[Value, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.values, tuple):
            object.__setattr__(self, "values", tuple(self.values))
        if not self.values:
            raise ValueError(f"'{self.tag}' needs at least one comparison value")


@dataclass(frozen=True)
class Equal(_ValueList):
    """Equality against one value, or membership when several are given.

    ``Equal(f, (None,))`` is a null check, ``Equal(f, (1,))`` a plain
    comparison and ``Equal(f, (1, 2))`` an ``IN`` list.
    """

    tag: ClassVar[str] = "="


@dataclass(frozen=True)
class NotEqual(_ValueList):
    """Negated form of :class:`Equal` (``<>``, ``IS NOT NULL``, ``NOT IN``)."""

    tag: ClassVar[str] = "!="


@dataclass(frozen=True)
class IsEmpty:
    tag: ClassVar[str] = "is-empty"

    value: Value


@dataclass(frozen=True)
class NotEmpty:
    tag: ClassVar[str] = "not-empty"

    value: Value


@dataclass(frozen=True)
class MacroRef:
    """Reference to a named expression in the transpiler's macro table."""

    tag: ClassVar[str] = "macro"

    name: str


@dataclass(frozen=True)
class CustomNode:
    """Base class for application- or dialect-defined expression nodes.

    Subclass it to add a node shape, then give the formatter that should
    render it a ``format_operator`` override handling the subclass.
    """

    tag: ClassVar[str] = "custom"


# The closed set of built-in expression shapes plus the extension slot.
Expr = (
    And
    | Or
    | Not
    | LessThan
    | GreaterThan
    | Equal
    | NotEqual
    | IsEmpty
    | NotEmpty
    | MacroRef
    | Field
    | CustomNode
)


@dataclass(frozen=True)
class SelectStatement:
    """A SELECT statement prior to text rendering."""

    verb: ClassVar[str] = "SELECT"

    list: str = "*"
    from_: str | None = None
    where: Expr | None = None
    limit: int | None = None


# Only SELECT exists today; other statement shapes join this union.
Statement = SelectStatement
