"""Recursive expression rendering: context threading, macros, cycle checks."""

from filterql.render.context import RenderContext
from filterql.render.resolution import render_expression, resolve_macro

__all__ = [
    "RenderContext",
    "render_expression",
    "resolve_macro",
]
