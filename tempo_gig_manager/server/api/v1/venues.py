"""
API endpoints for venue profiles.
"""

from __future__ import annotations

import uuid
from typing import Optional, Union

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from tempo_gig_manager.core.database import get_session
from tempo_gig_manager.core.database.entities import Venue
from tempo_gig_manager.core.database.repositories import VenueRepository
from tempo_gig_manager.core.logging_config import get_logger
from tempo_gig_manager.core.models.io import (
    OkResponse,
    VenueCreate,
    VenueListResponse,
    VenueRead,
    VenueResponse,
    VenueUpdate,
)
from tempo_gig_manager.server.exception_handlers import required_fields_message

logger = get_logger(__name__)

router = APIRouter(tags=["venues"])


@router.get(
    "",
    response_model=Union[VenueResponse, VenueListResponse],
    summary="Get Venues",
    description="Retrieve a single venue by id, or all venues owned by a user.",
    responses={
        200: {"description": "Venue or venue list"},
        400: {"description": "Neither id nor user_id given"},
        404: {"description": "Venue not found"},
    },
)
async def get_venues(
    venue_id: Optional[uuid.UUID] = Query(default=None, alias="id"),
    user_id: Optional[uuid.UUID] = None,
    session: AsyncSession = Depends(get_session),
) -> Union[VenueResponse, VenueListResponse]:
    """
    Get one venue or a user's venues.

    - **id**: Venue id; returns `{venue}`.
    - **user_id**: Owner id; returns `{venues}`, newest first.
    """
    repo = VenueRepository(session)
    if venue_id is not None:
        venue = await repo.get_by_id(venue_id)
        if venue is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Venue not found")
        return VenueResponse(venue=VenueRead.model_validate(venue))
    if user_id is not None:
        venues = await repo.list_by_user(user_id)
        return VenueListResponse(venues=[VenueRead.model_validate(v) for v in venues])
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="id or user_id parameter required")


@router.post(
    "",
    response_model=VenueResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Venue",
    description="Create a venue profile for a venue account.",
    responses={
        201: {"description": "Venue created"},
        400: {"description": "Missing required fields"},
    },
)
@required_fields_message("Missing required fields: name, type, esrb_rating, user_id")
async def create_venue(payload: VenueCreate, session: AsyncSession = Depends(get_session)) -> VenueResponse:
    """
    Create a venue profile.

    - **name**, **type**, **esrb_rating**, **user_id**: Required.
    - **typical_genres**, **stage_details**, **equipment_onsite**: Optional profile details.
    """
    venue = await VenueRepository(session).create(Venue(**payload.model_dump()))
    logger.info(f"Created venue {venue.id} for user {venue.user_id}")
    return VenueResponse(venue=VenueRead.model_validate(venue))


@router.patch(
    "",
    response_model=VenueResponse,
    summary="Update Venue",
    description="Partially update a venue profile. Omitted or null fields keep their current value.",
    responses={
        200: {"description": "Venue updated"},
        400: {"description": "Venue id missing"},
        404: {"description": "Venue not found"},
    },
)
async def update_venue(payload: VenueUpdate, session: AsyncSession = Depends(get_session)) -> VenueResponse:
    """
    Update a venue profile.

    - **id**: Venue id (required).
    """
    if payload.id is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Venue id required")
    venue = await VenueRepository(session).apply_changes(payload.id, payload.model_dump(exclude={"id"}))
    if venue is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Venue not found")
    return VenueResponse(venue=VenueRead.model_validate(venue))


@router.delete(
    "",
    response_model=OkResponse,
    response_model_exclude_none=True,
    summary="Delete Venue",
    description="Delete a venue profile and, through cascades, its gigs.",
    responses={
        200: {"description": "Venue deleted"},
        400: {"description": "Venue id missing"},
        404: {"description": "Venue not found"},
    },
)
async def delete_venue(
    venue_id: Optional[uuid.UUID] = Query(default=None, alias="id"),
    session: AsyncSession = Depends(get_session),
) -> OkResponse:
    """
    Delete a venue.

    - **id**: Venue id (required).
    """
    if venue_id is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="id parameter required")
    if not await VenueRepository(session).delete(venue_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Venue not found")
    return OkResponse()
