"""API request/response Pydantic schemas."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class CompileRequest(BaseModel):
    """Request body for POST /compile."""

    dialect: str = Field(description="Registered dialect name, e.g. 'postgres'")
    fields: dict[int, str] = Field(
        default_factory=dict, description="Field number → column name"
    )
    where: Any = Field(default=None, description="Filter expression in raw nested-list form")
    limit: int | None = Field(default=None, ge=0)
    validate_sql: bool | None = Field(
        default=None, description="Override the server's sqlglot validation setting"
    )


class CompileResponse(BaseModel):
    """Response body for POST /compile."""

    sql: str
    dialect: str
    warnings: list[str] = []
    sql_valid: bool = True


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    details: dict[str, Any] = {}


class DialectInfo(BaseModel):
    """Information about a supported dialect."""

    name: str


class DialectListResponse(BaseModel):
    """Response for GET /dialects."""

    dialects: list[DialectInfo] = []


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "ok"
    version: str = ""
