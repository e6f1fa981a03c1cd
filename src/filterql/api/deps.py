"""Dependency injection for FastAPI: Transpiler singleton."""

from __future__ import annotations

from filterql.compiler.transpiler import Transpiler
from filterql.settings import Settings

_transpiler: Transpiler | None = None
_settings: Settings | None = None


def init_transpiler(transpiler: Transpiler, settings: Settings) -> None:
    """Set the global Transpiler (called at app startup)."""
    global _transpiler, _settings  # noqa: PLW0603
    _transpiler = transpiler
    _settings = settings


def get_transpiler() -> Transpiler:
    """FastAPI ``Depends`` provider for the Transpiler."""
    if _transpiler is None:
        raise RuntimeError("Transpiler not initialised; call init_transpiler() first")
    return _transpiler


def get_settings() -> Settings:
    """FastAPI ``Depends`` provider for the active Settings."""
    if _settings is None:
        raise RuntimeError("Settings not initialised; call init_transpiler() first")
    return _settings


def reset_transpiler() -> None:
    """Clear the global Transpiler (for tests)."""
    global _transpiler, _settings  # noqa: PLW0603
    _transpiler = None
    _settings = None
