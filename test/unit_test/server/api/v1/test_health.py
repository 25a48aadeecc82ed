import pytest
from httpx import AsyncClient

from tempo_gig_manager.server.core.constant import SCHEMA_VERSION, SERVICE_NAME, VERSION

# Mark all tests in this module as async
pytestmark = pytest.mark.asyncio


async def test_health_check(client: AsyncClient):
    response = await client.get("http://localhost/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["service"] == SERVICE_NAME
    assert "time" in data


async def test_version(client: AsyncClient):
    response = await client.get("http://localhost/version")
    assert response.status_code == 200
    assert response.json() == {"version": VERSION, "schema_version": SCHEMA_VERSION}


async def test_process_time_header(client: AsyncClient):
    response = await client.get("/health")
    assert float(response.headers["X-Process-Time"]) >= 0


async def test_unknown_route_uses_error_body(client: AsyncClient):
    response = await client.get("/api/v1/nope")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}
