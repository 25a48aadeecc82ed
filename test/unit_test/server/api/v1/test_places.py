"""
Unit tests for the Google Maps proxy endpoints.

Upstream calls are served by an ``httpx.MockTransport`` bound to a client
pointed at ``http://mock`` URLs.
"""

import json
from typing import List

import httpx
import pytest
from httpx import AsyncClient

from tempo_gig_manager.server.core.config import settings
from tempo_gig_manager.server.main import app
from tempo_gig_manager.server.services.google_maps import GoogleMapsClient, get_google_maps_client

pytestmark = pytest.mark.asyncio


@pytest.fixture
def upstream_requests() -> List[httpx.Request]:
    return []


@pytest.fixture
def upstream(client: AsyncClient, upstream_requests):
    """Route the places endpoints to a mock Google Maps backend."""
    responses = {
        "/place/autocomplete/json": (200, {"predictions": [{"description": "1 Main St, Austin, TX"}], "status": "OK"}),
        "/place/details/json": (200, {"result": {"formatted_address": "1 Main St"}, "status": "OK"}),
        "/validate": (200, {"result": {"verdict": {"addressComplete": True}}}),
    }

    def handler(request: httpx.Request) -> httpx.Response:
        upstream_requests.append(request)
        status_code, body = responses.get(request.url.path, (404, {"error": "unknown"}))
        return httpx.Response(status_code, json=body)

    async def client_override():
        http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        async with GoogleMapsClient(
            "test-key",
            client=http,
            places_base_url="http://mock/place",
            address_validation_url="http://mock/validate",
        ) as maps:
            yield maps
        await http.aclose()

    app.dependency_overrides[get_google_maps_client] = client_override
    yield responses


class TestAutocomplete:
    async def test_proxies_predictions(self, client: AsyncClient, upstream, upstream_requests):
        response = await client.get(
            "/api/v1/places/autocomplete", params={"input": "1 Main", "session_token": "tok-1", "country": "CA"}
        )
        assert response.status_code == 200
        assert response.json()["predictions"][0]["description"] == "1 Main St, Austin, TX"

        sent = upstream_requests[0].url.params
        assert sent["input"] == "1 Main"
        assert sent["sessiontoken"] == "tok-1"
        assert sent["key"] == "test-key"
        assert sent["components"] == "country:ca"

    async def test_short_input_skips_upstream(self, client: AsyncClient, upstream, upstream_requests):
        response = await client.get("/api/v1/places/autocomplete", params={"input": " ab ", "session_token": "t"})
        assert response.status_code == 200
        assert response.json() == {"predictions": []}
        assert upstream_requests == []

    async def test_session_token_required(self, client: AsyncClient, upstream):
        response = await client.get("/api/v1/places/autocomplete", params={"input": "1 Main"})
        assert response.status_code == 400
        assert response.json() == {"error": "session_token is required"}

    async def test_upstream_status_passes_through(self, client: AsyncClient, upstream):
        upstream["/place/autocomplete/json"] = (403, {"status": "REQUEST_DENIED"})
        response = await client.get("/api/v1/places/autocomplete", params={"input": "1 Main", "session_token": "t"})
        assert response.status_code == 403
        assert response.json() == {"status": "REQUEST_DENIED"}


class TestPlaceDetails:
    async def test_proxies_details(self, client: AsyncClient, upstream, upstream_requests):
        response = await client.get("/api/v1/places/details", params={"place_id": "abc", "session_token": "tok-1"})
        assert response.status_code == 200
        assert response.json()["result"]["formatted_address"] == "1 Main St"
        sent = upstream_requests[0].url.params
        assert sent["place_id"] == "abc"
        assert sent["sessiontoken"] == "tok-1"

    async def test_place_id_required(self, client: AsyncClient, upstream):
        response = await client.get("/api/v1/places/details")
        assert response.status_code == 400
        assert response.json() == {"error": "place_id is required"}


class TestValidateAddress:
    async def test_proxies_validation(self, client: AsyncClient, upstream, upstream_requests):
        response = await client.post(
            "/api/v1/places/validate_address", json={"address_lines": ["1 Main St"], "region_code": "US"}
        )
        assert response.status_code == 200
        assert response.json()["result"]["verdict"]["addressComplete"] is True

        sent = json.loads(upstream_requests[0].content)
        assert sent == {"address": {"regionCode": "US", "addressLines": ["1 Main St"]}}

    @pytest.mark.parametrize(
        "payload", [{}, {"address_lines": [], "region_code": "US"}, {"address_lines": ["1 Main St"]}]
    )
    async def test_missing_fields(self, client: AsyncClient, upstream, payload):
        response = await client.post("/api/v1/places/validate_address", json=payload)
        assert response.status_code == 400
        assert response.json() == {"error": "address_lines (array) and region_code are required"}


class TestUpstreamFailures:
    async def test_unreachable_upstream(self, client: AsyncClient):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async def client_override():
            http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
            yield GoogleMapsClient("test-key", client=http, places_base_url="http://mock/place")
            await http.aclose()

        app.dependency_overrides[get_google_maps_client] = client_override
        response = await client.get("/api/v1/places/details", params={"place_id": "abc"})
        assert response.status_code == 500
        assert response.json() == {"error": "Server error"}

    async def test_missing_api_key(self, client: AsyncClient, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(settings, "google_maps_api_key", None)
        response = await client.get("/api/v1/places/autocomplete", params={"input": "ab"})
        assert response.status_code == 500
        assert response.json() == {"error": "Missing GOOGLE_MAPS_API_KEY"}
