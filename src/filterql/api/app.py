"""FastAPI application factory for filterql."""

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI

from filterql import __version__
from filterql.api.deps import init_transpiler
from filterql.api.middleware import RequestBodyLimitMiddleware, RequestTimingMiddleware
from filterql.api.routers import dialects, transpile
from filterql.api.schemas import HealthResponse
from filterql.compiler.transpiler import Transpiler
from filterql.settings import Settings


def create_app(settings: Settings | None = None, transpiler: Transpiler | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = Settings()
    if transpiler is None:
        transpiler = Transpiler.from_settings(settings)

    app = FastAPI(
        title="filterql",
        description="Compiles filter expression trees into dialect-specific SQL SELECT statements.",
        version=__version__,
    )
    app.state.settings = settings
    init_transpiler(transpiler, settings)

    # Middleware
    app.add_middleware(RequestBodyLimitMiddleware)
    app.add_middleware(RequestTimingMiddleware)

    app.include_router(transpile.router, prefix="/compile", tags=["compile"])
    app.include_router(dialects.router, prefix="/dialects", tags=["dialects"])

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", version=__version__)

    return app


def main() -> None:
    """Run the REST API server using settings from environment / .env file."""
    settings = Settings()

    logging.basicConfig(level=settings.log_level.upper())
    logger = logging.getLogger("filterql.api")
    logger.info(
        "filterql API server v%s starting (host=%s, port=%d)",
        __version__, settings.api_server_host, settings.effective_port,
    )

    uvicorn.run(
        "filterql.api.app:create_app",
        factory=True,
        host=settings.api_server_host,
        port=settings.effective_port,
        log_level=settings.log_level.lower(),
    )
