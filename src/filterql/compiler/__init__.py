"""Compilation entry point for filterql."""

from filterql.compiler.transpiler import CompileResult, Transpiler

__all__ = [
    "CompileResult",
    "Transpiler",
]
