"""
Google Maps proxy endpoints.

Address autocomplete, place details and address validation are proxied so the
Maps API key stays on the server. Upstream status codes and bodies are passed
through.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from tempo_gig_manager.core.logging_config import get_logger
from tempo_gig_manager.core.models.io import AddressValidationRequest
from tempo_gig_manager.server.services.google_maps import (
    GoogleMapsClient,
    GoogleMapsError,
    UpstreamResponse,
    get_google_maps_client,
)

logger = get_logger(__name__)

router = APIRouter(tags=["places"])

# Shorter inputs return no predictions without calling upstream
MIN_AUTOCOMPLETE_LENGTH = 3


def _passthrough(upstream: UpstreamResponse) -> JSONResponse:
    return JSONResponse(status_code=upstream.status_code, content=upstream.body)


def _server_error(exc: GoogleMapsError) -> HTTPException:
    logger.error(f"Google Maps proxy failed: {exc}")
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error")


@router.get(
    "/autocomplete",
    summary="Address Autocomplete",
    description="Proxy to Google Places Autocomplete, restricted to one country.",
    responses={
        200: {"description": "Upstream predictions"},
        400: {"description": "session_token missing"},
        500: {"description": "API key missing or upstream unreachable"},
    },
)
async def autocomplete(
    input: str = "",
    session_token: Optional[str] = None,
    country: str = "us",
    client: GoogleMapsClient = Depends(get_google_maps_client),
) -> JSONResponse:
    """
    Autocomplete a partial address.

    - **input**: Partial address; fewer than 3 characters returns no predictions.
    - **session_token**: Places session token (required).
    - **country**: ISO country code, default `us`.
    """
    text = input.strip()
    if len(text) < MIN_AUTOCOMPLETE_LENGTH:
        return JSONResponse(status_code=status.HTTP_200_OK, content={"predictions": []})
    if not session_token:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="session_token is required")
    try:
        upstream = await client.autocomplete(input, session_token, country)
    except GoogleMapsError as exc:
        raise _server_error(exc) from None
    return _passthrough(upstream)


@router.get(
    "/details",
    summary="Place Details",
    description="Proxy to Google Place Details for address components and geometry.",
    responses={
        200: {"description": "Upstream place details"},
        400: {"description": "place_id missing"},
        500: {"description": "API key missing or upstream unreachable"},
    },
)
async def place_details(
    place_id: Optional[str] = None,
    session_token: Optional[str] = None,
    client: GoogleMapsClient = Depends(get_google_maps_client),
) -> JSONResponse:
    """
    Resolve an autocomplete prediction.

    - **place_id**: Place id (required).
    - **session_token**: Session token of the autocomplete session.
    """
    if not place_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="place_id is required")
    try:
        upstream = await client.place_details(place_id, session_token)
    except GoogleMapsError as exc:
        raise _server_error(exc) from None
    return _passthrough(upstream)


@router.post(
    "/validate_address",
    summary="Validate Address",
    description="Proxy to the Google Address Validation API.",
    responses={
        200: {"description": "Upstream validation result"},
        400: {"description": "address_lines or region_code missing"},
        500: {"description": "API key missing or upstream unreachable"},
    },
)
async def validate_address(
    payload: AddressValidationRequest,
    client: GoogleMapsClient = Depends(get_google_maps_client),
) -> JSONResponse:
    """
    Validate a postal address.

    - **address_lines**: Non-empty list of address lines.
    - **region_code**: Region code, e.g. `US`.
    """
    if not payload.address_lines or not payload.region_code:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="address_lines (array) and region_code are required"
        )
    try:
        upstream = await client.validate_address(payload.address_lines, payload.region_code)
    except GoogleMapsError as exc:
        raise _server_error(exc) from None
    return _passthrough(upstream)
