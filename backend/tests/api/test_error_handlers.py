"""Error Handlers — store failures and unexpected exceptions become JSON bodies.

Invariants:
    - DatabaseError -> 503 without driver details
    - Any other exception -> 500 {message, code: INTERNAL_ERROR}
    - Validation still answers 400 when the store is down (gate runs first)
"""

import pytest
from fastapi.exceptions import RequestValidationError
from httpx import ASGITransport, AsyncClient

import product_api.infrastructure.database as db_module
from product_api.api.dependencies import get_product_repository
from product_api.api.error_handlers import build_validation_error_response
from product_api.core.errors import DatabaseError
from product_api.main import app


@pytest.fixture
async def raw_client():
    """Client that turns unhandled exceptions into 500 responses."""
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


class _BrokenRepository:
    async def list_all(self):
        raise DatabaseError("connection reset by peer", "execute")

    async def get(self, product_id):
        raise ValueError("boom")


async def test_database_error_is_503(raw_client):
    app.dependency_overrides[get_product_repository] = _BrokenRepository
    res = await raw_client.get("/api/products")
    assert res.status_code == 503
    assert res.json() == {"message": "database unavailable", "code": "DATABASE_ERROR"}
    assert "peer" not in res.text


async def test_unexpected_error_is_500(raw_client):
    app.dependency_overrides[get_product_repository] = _BrokenRepository
    res = await raw_client.get("/api/products/1")
    assert res.status_code == 500
    assert res.json()["code"] == "INTERNAL_ERROR"
    assert "boom" not in res.text


async def test_uninitialized_store_fails_generically(raw_client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    res = await raw_client.get("/api/products")
    assert res.status_code == 500


async def test_validation_answers_while_store_is_down(raw_client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    res = await raw_client.get("/api/products/not-valid-id")
    assert res.status_code == 400
    assert res.json()["errors"][0]["msg"] == "invalid ID"


def test_pydantic_errors_map_to_errors_shape():
    exc = RequestValidationError([
        {"type": "int_parsing", "loc": ("path", "id"), "msg": "bad int", "input": "x"},
        {"type": "missing", "loc": ("body", "name"), "msg": "Field required", "input": {}},
    ])
    assert build_validation_error_response(exc) == {
        "errors": [
            {"type": "field", "msg": "bad int", "path": "id", "location": "params"},
            {"type": "field", "msg": "Field required", "path": "name", "location": "body"},
        ],
    }
