"""HTTP Surface — /api prefix, CORS, preflight, route misses, 500 boundary.

Invariants:
    - /api/<route> behaves as /<route>
    - OPTIONS on any path -> 200, empty body, CORS headers
    - Unmatched path or method -> 404 "Route not found: METHOD /path"
    - No trailing-slash redirects; "/workers/" is unmatched
    - Unclassified errors -> 500, detail exposed only in development
"""

import pytest
from httpx import ASGITransport, AsyncClient

from certtrack.config import Settings
from certtrack.infrastructure.database import get_db
from certtrack.main import create_app


async def test_api_prefix_is_stripped(client):
    await client.post("/api/courses", json={"name": "Rigging"})
    res = await client.get("/api/courses")
    assert res.status_code == 200
    assert [c["name"] for c in res.json()] == ["Rigging"]


@pytest.mark.parametrize("path", ["/workers", "/api/anything/at/all", "/"])
async def test_options_preflight(client, path):
    res = await client.options(path)
    assert res.status_code == 200
    assert res.content == b""
    assert res.headers["access-control-allow-origin"] == "*"
    assert "OPTIONS" in res.headers["access-control-allow-methods"]
    assert "Content-Type" in res.headers["access-control-allow-headers"]


async def test_cors_headers_on_regular_response(client):
    res = await client.get("/workers")
    assert res.headers["access-control-allow-origin"] == "*"
    assert res.headers["content-type"].startswith("application/json")


async def test_unknown_route_returns_404(client):
    res = await client.get("/api/unknown")
    assert res.status_code == 404
    assert res.json()["message"] == "Route not found: GET /unknown"


@pytest.mark.parametrize("path", ["/api/workers/", "/workers/"])
async def test_trailing_slash_is_route_miss(client, path):
    res = await client.get(path)
    assert res.status_code == 404
    assert "location" not in res.headers
    assert res.json()["message"] == "Route not found: GET /workers/"


async def test_unsupported_method_returns_404(client):
    res = await client.delete("/workers")
    assert res.status_code == 404
    assert res.json()["message"] == "Route not found: DELETE /workers"


async def test_malformed_json_is_validation_error(client):
    res = await client.post(
        "/courses", content=b"{not json",
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["message"] == "Validation error"


async def _failing_db():
    raise RuntimeError("connection refused by db host")


def _app_with_failing_db(environment: str):
    app = create_app(Settings(
        database_url="sqlite+aiosqlite:///:memory:", environment=environment,
    ))
    app.dependency_overrides[get_db] = _failing_db
    return app


async def test_unclassified_error_hides_detail_in_production():
    app = _app_with_failing_db("production")
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        res = await c.get("/workers")
    assert res.status_code == 500
    assert res.json() == {
        "message": "Internal server error", "error": "Something went wrong",
    }
    assert res.headers["access-control-allow-origin"] == "*"


async def test_unclassified_error_exposes_detail_in_development():
    app = _app_with_failing_db("development")
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        res = await c.get("/api/workers")
    assert res.status_code == 500
    assert res.json()["error"] == "connection refused by db host"
