"""
API endpoints for gig listings.

Gig payloads are camelCase on the wire. Creation accepts either a bare gig
object or one wrapped as ``{"gig": {...}}``, matching how the client posts
drafts from the gig builder.
"""

from __future__ import annotations

import uuid
from typing import Any, Optional, Union

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from tempo_gig_manager.core.database import get_session
from tempo_gig_manager.core.database.entities import Gig
from tempo_gig_manager.core.database.repositories import GigRepository
from tempo_gig_manager.core.database.repositories.gigs import FEED_LIMIT
from tempo_gig_manager.core.logging_config import get_logger
from tempo_gig_manager.core.models.domain import GigStatus
from tempo_gig_manager.core.models.io import (
    GigCreate,
    GigListResponse,
    GigRead,
    GigResponse,
    GigUpdate,
    OkResponse,
)

logger = get_logger(__name__)

router = APIRouter(tags=["gigs"])


@router.get(
    "",
    response_model=Union[GigResponse, GigListResponse],
    summary="Get Gigs",
    description="Retrieve a gig by id, or the most recent gigs with optional venue and status filters.",
    responses={
        200: {"description": "Gig or gig feed"},
        404: {"description": "Gig not found"},
    },
)
async def get_gigs(
    gig_id: Optional[uuid.UUID] = Query(default=None, alias="id"),
    venue_id: Optional[uuid.UUID] = None,
    gig_status: Optional[GigStatus] = Query(default=None, alias="status"),
    limit: int = Query(default=FEED_LIMIT, ge=1),
    session: AsyncSession = Depends(get_session),
) -> Union[GigResponse, GigListResponse]:
    """
    Get one gig or the gig feed.

    - **id**: Gig id; returns `{gig}`.
    - **venue_id**: Only gigs of this venue.
    - **status**: Only gigs in this status.
    - **limit**: Feed size (at most 100).
    """
    repo = GigRepository(session)
    if gig_id is not None:
        gig = await repo.get_by_id(gig_id)
        if gig is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Gig not found")
        return GigResponse(gig=GigRead.model_validate(gig))

    gigs = await repo.list_recent(
        limit=limit,
        venue_id=venue_id,
        status=gig_status.value if gig_status is not None else None,
    )
    return GigListResponse(gigs=[GigRead.model_validate(g) for g in gigs])


def _parse_gig_body(body: Any, model: type) -> Any:
    """Unwrap an optional ``{"gig": ...}`` envelope and validate the payload."""
    data = body.get("gig", body) if isinstance(body, dict) else body
    if not isinstance(data, dict):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid payload")
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors()) from None


@router.post(
    "",
    response_model=GigResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Gig",
    description="Create a gig listing from a bare gig object or a `{gig: {...}}` envelope.",
    responses={
        201: {"description": "Gig created"},
        400: {"description": "A required field is missing or blank"},
    },
)
async def create_gig(body: Any = Body(default=None), session: AsyncSession = Depends(get_session)) -> GigResponse:
    """
    Create a gig listing.

    - **title**, **venue**, **location**, **date**, **time**, **price**, **genre**: Required and non-blank.
    - **paymentType**: Defaults to `tips` for tips-only gigs, `flat_fee` otherwise.
    - **esrbRating**: Defaults to `family`.
    - **status**: Defaults to `draft`.
    """
    payload: GigCreate = _parse_gig_body(body, GigCreate)
    missing = payload.first_missing_field()
    if missing:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"{missing} is required")

    values = payload.model_dump(exclude_none=True)
    values["payment_type"] = payload.resolved_payment_type()
    gig = await GigRepository(session).create(Gig(**values))
    logger.info(f"Created gig {gig.id} ({gig.status})")
    return GigResponse(gig=GigRead.model_validate(gig))


@router.patch(
    "",
    response_model=GigResponse,
    summary="Update Gig",
    description="Partially update a gig. Omitted or null fields keep their current value.",
    responses={
        200: {"description": "Gig updated"},
        400: {"description": "Gig id missing"},
        404: {"description": "Gig not found"},
    },
)
async def update_gig(body: Any = Body(default=None), session: AsyncSession = Depends(get_session)) -> GigResponse:
    """
    Update a gig.

    - **id**: Gig id (required).
    """
    payload: GigUpdate = _parse_gig_body(body, GigUpdate)
    if payload.id is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Gig id required")
    gig = await GigRepository(session).apply_changes(payload.id, payload.model_dump(exclude={"id"}))
    if gig is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Gig not found")
    return GigResponse(gig=GigRead.model_validate(gig))


@router.delete(
    "",
    response_model=OkResponse,
    response_model_exclude_none=True,
    summary="Delete Gig",
    description="Delete a gig and its applications.",
    responses={
        200: {"description": "Gig deleted"},
        400: {"description": "Gig id missing"},
        404: {"description": "Gig not found"},
    },
)
async def delete_gig(
    gig_id: Optional[uuid.UUID] = Query(default=None, alias="id"),
    session: AsyncSession = Depends(get_session),
) -> OkResponse:
    """Delete a gig."""
    if gig_id is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="id parameter required")
    if not await GigRepository(session).delete(gig_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Gig not found")
    return OkResponse()
