"""Per-call render context value object.

Packages the ``(formatter, fields, macros, ancestors)`` data clump threaded
through every formatter capability during one compilation.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from filterql.ast.nodes import Expr
    from filterql.dialect.base import Formatter


@dataclass(frozen=True)
class RenderContext:
    """Immutable context for rendering one branch of an expression tree.

    Attributes:
        formatter: The dialect's formatter bundle.
        fields: Field number → column name for this call.
        macros: Macro name → expression body (the transpiler's table).
        ancestors: Nodes on the path from the root to the node being
            rendered. Compared by identity, never by value.
    """

    formatter: Formatter
    fields: Mapping[int, str]
    macros: Mapping[str, Expr]
    ancestors: tuple[object, ...] = ()

    def descend(self, node: object) -> RenderContext:
        """Return a context for rendering ``node``'s children."""
        return replace(self, ancestors=self.ancestors + (node,))

    def is_ancestor(self, node: object) -> bool:
        return any(a is node for a in self.ancestors)
