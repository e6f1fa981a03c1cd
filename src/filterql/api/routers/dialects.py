"""Dialect listing endpoint: GET /dialects."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from filterql.api.deps import get_transpiler
from filterql.api.schemas import DialectInfo, DialectListResponse
from filterql.compiler.transpiler import Transpiler

router = APIRouter()


@router.get("", response_model=DialectListResponse)
async def list_dialects(
    transpiler: Transpiler = Depends(get_transpiler),  # noqa: B008
) -> DialectListResponse:
    """List the dialects the server can compile to."""
    return DialectListResponse(dialects=[DialectInfo(name=n) for n in transpiler.dialects])
