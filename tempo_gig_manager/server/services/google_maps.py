"""Google Maps Places and Address Validation client.

Thin async proxy used by the places endpoints so the API key never reaches
the browser. Upstream status codes and JSON bodies are returned unchanged.

Highlights:
- Reuses one ``httpx.AsyncClient`` per request scope; a client can be injected
  (tests pass one backed by ``httpx.MockTransport``).
- Base URLs are configurable so the client can target a stub server.
- Transport failures and non-JSON bodies surface as ``GoogleMapsError``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, AsyncGenerator, Dict, List, Optional

import httpx
from fastapi import HTTPException, status

from tempo_gig_manager.core.logging_config import get_logger
from tempo_gig_manager.server.core.config import settings

logger = get_logger(__name__)

PLACES_BASE_URL = "https://maps.googleapis.com/maps/api/place"
ADDRESS_VALIDATION_URL = "https://addressvalidation.googleapis.com/v1:validateAddress"

PLACE_DETAILS_FIELDS = "formatted_address,address_component,geometry,name"


class GoogleMapsError(RuntimeError):
    """Raised when the upstream API cannot be reached or returns an unreadable body."""


@dataclass(frozen=True)
class UpstreamResponse:
    status_code: int
    body: Any


class GoogleMapsClient:
    """Async client for the Places Autocomplete, Place Details and Address Validation APIs."""

    def __init__(
        self,
        api_key: str,
        *,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0,
        places_base_url: str = PLACES_BASE_URL,
        address_validation_url: str = ADDRESS_VALIDATION_URL,
    ) -> None:
        self._api_key = api_key
        self._owns_client = client is None
        self._http = client or httpx.AsyncClient(timeout=timeout)
        self._places_base_url = places_base_url.rstrip("/")
        self._address_validation_url = address_validation_url

    async def __aenter__(self) -> "GoogleMapsClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    async def autocomplete(self, text: str, session_token: str, country: str = "us") -> UpstreamResponse:
        """Query Places Autocomplete restricted to one country.

        Args:
            text: Partial address typed by the user
            session_token: Billing session token shared with the details call
            country: ISO country code

        Returns:
            Upstream status and JSON body
        """
        params = {
            "input": text,
            "sessiontoken": session_token,
            "key": self._api_key,
            "components": f"country:{country.lower()}",
        }
        return await self._send("GET", f"{self._places_base_url}/autocomplete/json", params=params)

    async def place_details(self, place_id: str, session_token: Optional[str] = None) -> UpstreamResponse:
        """Fetch address components and geometry of a place.

        Args:
            place_id: Place id from an autocomplete prediction
            session_token: Session token of the autocomplete session, if any

        Returns:
            Upstream status and JSON body
        """
        params = {"place_id": place_id, "key": self._api_key, "fields": PLACE_DETAILS_FIELDS}
        if session_token:
            params["sessiontoken"] = session_token
        return await self._send("GET", f"{self._places_base_url}/details/json", params=params)

    async def validate_address(self, address_lines: List[str], region_code: str) -> UpstreamResponse:
        """Validate a postal address.

        Args:
            address_lines: Street address lines
            region_code: CLDR region code, e.g. ``US``

        Returns:
            Upstream status and JSON body
        """
        payload: Dict[str, Any] = {"address": {"regionCode": region_code, "addressLines": address_lines}}
        return await self._send("POST", self._address_validation_url, params={"key": self._api_key}, json=payload)

    async def _send(self, method: str, url: str, **kwargs: Any) -> UpstreamResponse:
        try:
            resp = await self._http.request(method, url, **kwargs)
            body = resp.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning(f"Google Maps request to {url} failed: {type(exc).__name__}")
            raise GoogleMapsError(str(exc)) from exc
        return UpstreamResponse(status_code=resp.status_code, body=body)


async def get_google_maps_client() -> AsyncGenerator[GoogleMapsClient, None]:
    """FastAPI dependency yielding a client configured from settings.

    Raises:
        HTTPException: 500 when no API key is configured
    """
    config = settings.google_maps
    if not config.api_key:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Missing GOOGLE_MAPS_API_KEY")
    async with GoogleMapsClient(config.api_key, timeout=config.timeout_seconds) as client:
        yield client
