"""Compilation endpoint: POST /compile."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from filterql.api.deps import get_settings, get_transpiler
from filterql.api.schemas import CompileRequest, CompileResponse, ErrorResponse
from filterql.ast.parser import parse_expression
from filterql.compiler.transpiler import Transpiler
from filterql.compiler.validator import validate_sql
from filterql.errors import TranspileError
from filterql.models.query import Query
from filterql.settings import Settings

logger = logging.getLogger("filterql.api")

router = APIRouter()


def _error(status_code: int, exc: TranspileError) -> JSONResponse:
    body = ErrorResponse(error=exc.code, message=str(exc), details=exc.details)
    return JSONResponse(status_code=status_code, content=body.model_dump())


@router.post(
    "",
    response_model=CompileResponse,
    responses={400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def compile_query(
    body: CompileRequest,
    transpiler: Transpiler = Depends(get_transpiler),  # noqa: B008
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> CompileResponse | JSONResponse:
    """Compile a raw filter expression to SQL for the requested dialect."""
    logger.info("compile called (dialect=%s)", body.dialect)
    try:
        where = parse_expression(body.where) if body.where is not None else None
    except TranspileError as exc:
        return _error(400, exc)

    result = transpiler.compile(body.dialect, body.fields, Query(where=where, limit=body.limit))
    if result.error is not None:
        return _error(422, result.error)

    sql = result.unwrap()
    check = settings.validate_sql if body.validate_sql is None else body.validate_sql
    warnings = validate_sql(sql, body.dialect) if check else []
    return CompileResponse(
        sql=sql,
        dialect=body.dialect,
        warnings=[f"SQL validation: {w}" for w in warnings],
        sql_valid=not warnings,
    )
