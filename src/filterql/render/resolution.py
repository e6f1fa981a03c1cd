"""Node dispatch with cycle detection, and macro resolution."""

from __future__ import annotations

from filterql.ast.nodes import Expr, MacroRef
from filterql.errors import CircularDependencyError, MacroNotFoundError
from filterql.render.context import RenderContext


def render_expression(node: Expr, ctx: RenderContext) -> str:
    """Render ``node`` with the context's formatter.

    The node must not already be on the ancestor path; its children are
    rendered with the path extended by ``node``. Sibling branches share the
    same parent path, so one subtree object may appear twice under a parent.

    Raises:
        CircularDependencyError: If ``node`` is one of its own ancestors.
    """
    if ctx.is_ancestor(node):
        macro = node.name if isinstance(node, MacroRef) else None
        raise CircularDependencyError(getattr(node, "tag", type(node).__name__), macro=macro)
    return ctx.formatter.format_operator(node, ctx.descend(node))


def resolve_macro(ref: MacroRef, ctx: RenderContext) -> Expr:
    """Look up the body of a macro reference.

    Raises:
        MacroNotFoundError: If the macro table has no entry for ``ref.name``.
    """
    body = ctx.macros.get(ref.name)
    if body is None:
        raise MacroNotFoundError(ref.name)
    return body


def render_macro(ref: MacroRef, ctx: RenderContext) -> str:
    """Render the body of ``ref``; ``ctx`` already has ``ref`` on its path."""
    return render_expression(resolve_macro(ref, ctx), ctx)

