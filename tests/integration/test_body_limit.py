"""Regression tests for RequestBodyLimitMiddleware."""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from filterql.api.app import create_app
from filterql.api.deps import reset_transpiler
from filterql.compiler.transpiler import Transpiler
from filterql.settings import Settings


@pytest.fixture
def app():
    application = create_app(
        settings=Settings(macros_file=None), transpiler=Transpiler(table_name="data")
    )
    yield application
    reset_transpiler()


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


class TestBodyLimit:
    async def test_oversized_body_rejected(self, client: AsyncClient) -> None:
        payload = b'{"dialect": "postgres", "where": "' + b"x" * (1024 * 1024) + b'"}'
        response = await client.post(
            "/compile", content=payload, headers={"content-type": "application/json"}
        )
        assert response.status_code == 413
        assert "too large" in response.json()["detail"]

    async def test_small_body_passes(self, client: AsyncClient) -> None:
        response = await client.post("/compile", json={"dialect": "postgres"})
        assert response.status_code == 200
        assert response.json()["sql"] == "SELECT * FROM data;"


class TestInvalidContentLength:
    """Non-integer Content-Length must not cause a 500."""

    async def test_non_integer_content_length(self, client: AsyncClient) -> None:
        response = await client.post(
            "/compile",
            content=b'{"dialect": "postgres"}',
            headers={"content-type": "application/json", "content-length": "abc"},
        )
        assert response.status_code != 500
