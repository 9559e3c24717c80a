"""Error Handlers tests — every layer answers with the {"error", "code"} envelope.

Design Decisions:
    - A bare app with register_error_handlers and typed routes, so each layer is
      reachable without the search route's all-string parameters
"""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from usersearch.api.error_handlers import register_error_handlers
from usersearch.core.errors import InvalidOrderError, RecordSourceError


def _build_app() -> FastAPI:
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/typed")
    async def typed(count: int):
        return {"count": count}

    @app.get("/order")
    async def order():
        raise InvalidOrderError(7)

    @app.get("/source")
    async def source():
        raise RecordSourceError("disk on fire", source="dataset.xml")

    @app.get("/boom")
    async def boom():
        raise RuntimeError("secret detail")

    return app


@pytest.fixture
async def bare_client():
    transport = ASGITransport(app=_build_app(), raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


async def test_validation_error_returns_400_envelope(bare_client):
    res = await bare_client.get("/typed", params={"count": "abc"})
    assert res.status_code == 400
    body = res.json()
    assert body["code"] == "VALIDATION_ERROR"
    assert body["error"].startswith("invalid request: query.count:")


async def test_missing_required_param_is_validation_error(bare_client):
    res = await bare_client.get("/typed")
    assert res.status_code == 400
    assert res.json()["code"] == "VALIDATION_ERROR"


async def test_domain_error_uses_its_status(bare_client):
    res = await bare_client.get("/order")
    assert res.status_code == 400
    assert res.json() == {"error": "invalid order: 7", "code": "INVALID_ORDER"}


async def test_record_source_error_hides_cause(bare_client):
    res = await bare_client.get("/source")
    assert res.status_code == 500
    assert res.json() == {"error": "Internal Server Error", "code": "INTERNAL_ERROR"}


async def test_unhandled_exception_hides_detail(bare_client):
    res = await bare_client.get("/boom")
    assert res.status_code == 500
    assert "secret detail" not in res.text
    assert res.json()["code"] == "INTERNAL_ERROR"
