"""Macro file loading for filterql."""

from filterql.parser.loader import MacroLoader, load_macros, load_macros_text

__all__ = [
    "MacroLoader",
    "load_macros",
    "load_macros_text",
]
