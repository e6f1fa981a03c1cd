"""Query shape accepted by the transpiler."""

from __future__ import annotations

from dataclasses import dataclass

from filterql.ast.nodes import Expr


@dataclass(frozen=True)
class Query:
    """A filter query: optional where-expression and optional row limit."""

    where: Expr | None = None
    limit: int | None = None

    def __post_init__(self) -> None:
        if self.limit is not None:
            if isinstance(self.limit, bool) or not isinstance(self.limit, int):
                raise TypeError(f"limit must be an integer, got {type(self.limit).__name__}")
            if self.limit < 0:
                raise ValueError(f"limit must be non-negative, got {self.limit}")
