"""Middleware Stack — origin guard, CORS headers and request logging.

Invariants:
    - A foreign Origin is refused with 403 before any route runs
    - The configured origin gets CORS headers; no Origin header passes untouched
    - Every request produces one access log line
"""

import logging

from starlette.middleware.cors import CORSMiddleware

from product_api.api.middleware import (
    OriginGuardMiddleware, RequestLoggingMiddleware, build_middleware,
)
from product_api.config import Settings

ALLOWED = "http://localhost:5173"


async def test_allowed_origin_gets_cors_headers(client):
    res = await client.get("/api/products", headers={"Origin": ALLOWED})
    assert res.status_code == 200
    assert res.headers["access-control-allow-origin"] == ALLOWED


async def test_foreign_origin_is_rejected(client):
    res = await client.get(
        "/api/products", headers={"Origin": "http://evil.example"},
    )
    assert res.status_code == 403
    assert res.json() == {"message": "CORS error"}


async def test_foreign_origin_preflight_is_rejected(client):
    res = await client.options(
        "/api/products",
        headers={
            "Origin": "http://evil.example",
            "Access-Control-Request-Method": "POST",
        },
    )
    assert res.status_code == 403


async def test_allowed_origin_preflight_succeeds(client):
    res = await client.options(
        "/api/products",
        headers={
            "Origin": ALLOWED,
            "Access-Control-Request-Method": "POST",
        },
    )
    assert res.status_code == 200
    assert res.headers["access-control-allow-origin"] == ALLOWED


async def test_request_without_origin_passes(client):
    res = await client.get("/api/products")
    assert res.status_code == 200
    assert "access-control-allow-origin" not in res.headers


async def test_request_is_logged(client, caplog):
    caplog.set_level(logging.INFO, logger="product_api.api.middleware")
    await client.get("/api/products/2000")
    records = [
        r for r in caplog.records
        if r.name == "product_api.api.middleware" and r.levelno == logging.INFO
    ]
    assert records
    assert records[-1].status_code == 404
    assert records[-1].method == "GET"
    assert records[-1].path == "/api/products/2000"


def test_stack_order_is_guard_cors_logging():
    stack = build_middleware(Settings(frontend_url="http://shop.example"))
    assert [m.cls for m in stack] == [
        OriginGuardMiddleware, CORSMiddleware, RequestLoggingMiddleware,
    ]
    assert stack[0].kwargs["allowed_origin"] == "http://shop.example"
