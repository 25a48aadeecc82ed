"""
API endpoints for band profiles.

A single band is returned with its member roster embedded; listings by owner
return a compact summary per band.
"""

from __future__ import annotations

import uuid
from typing import Optional, Union

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from tempo_gig_manager.core.database import get_session
from tempo_gig_manager.core.database.entities import Band
from tempo_gig_manager.core.database.repositories import BandMemberRepository, BandRepository
from tempo_gig_manager.core.logging_config import get_logger
from tempo_gig_manager.core.models.io import (
    BandCreate,
    BandDetail,
    BandDetailResponse,
    BandListResponse,
    BandMemberRead,
    BandRead,
    BandResponse,
    BandSummary,
    BandUpdate,
    OkResponse,
)
from tempo_gig_manager.server.exception_handlers import required_fields_message

logger = get_logger(__name__)

router = APIRouter(tags=["bands"])


@router.get(
    "",
    response_model=Union[BandDetailResponse, BandListResponse],
    summary="Get Bands",
    description="Retrieve a band with its members by id, or the bands owned by a user.",
    responses={
        200: {"description": "Band or band list"},
        400: {"description": "Neither id nor user_id given"},
        404: {"description": "Band not found"},
    },
)
async def get_bands(
    band_id: Optional[uuid.UUID] = Query(default=None, alias="id"),
    user_id: Optional[uuid.UUID] = None,
    session: AsyncSession = Depends(get_session),
) -> Union[BandDetailResponse, BandListResponse]:
    """
    Get one band or a user's bands.

    - **id**: Band id; returns `{band}` including `members`.
    - **user_id**: Owner id; returns `{bands}` summaries, newest first.
    """
    if band_id is not None:
        band = await BandRepository(session).get_by_id(band_id)
        if band is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Band not found")
        members = await BandMemberRepository(session).list_by_band(band_id)
        detail = BandDetail(
            **BandRead.model_validate(band).model_dump(),
            members=[BandMemberRead.model_validate(m) for m in members],
        )
        return BandDetailResponse(band=detail)
    if user_id is not None:
        bands = await BandRepository(session).list_by_user(user_id)
        return BandListResponse(bands=[BandSummary.model_validate(b) for b in bands])
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="id or user_id parameter required")


@router.post(
    "",
    response_model=BandResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Band",
    responses={
        201: {"description": "Band created"},
        400: {"description": "Missing required fields"},
    },
)
@required_fields_message("Missing required fields")
async def create_band(payload: BandCreate, session: AsyncSession = Depends(get_session)) -> BandResponse:
    """
    Create a band profile.

    - **name**, **phone**, **email**, **genre**, **profile_picture**, **user_id**: Required.
    - **social_links**: Map of network name to profile URL.
    """
    band = await BandRepository(session).create(Band(**payload.model_dump()))
    logger.info(f"Created band {band.id} for user {band.user_id}")
    return BandResponse(band=BandRead.model_validate(band))


@router.patch(
    "",
    response_model=BandResponse,
    summary="Update Band",
    description="Partially update a band profile. Omitted or null fields keep their current value.",
    responses={
        200: {"description": "Band updated"},
        400: {"description": "Band id missing"},
        404: {"description": "Band not found"},
    },
)
async def update_band(payload: BandUpdate, session: AsyncSession = Depends(get_session)) -> BandResponse:
    """Update a band profile."""
    if payload.id is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Band id required")
    band = await BandRepository(session).apply_changes(payload.id, payload.model_dump(exclude={"id"}))
    if band is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Band not found")
    return BandResponse(band=BandRead.model_validate(band))


@router.delete(
    "",
    response_model=OkResponse,
    response_model_exclude_none=True,
    summary="Delete Band",
    description="Delete a band together with its members and gig applications.",
    responses={
        200: {"description": "Band deleted"},
        400: {"description": "Band id missing"},
        404: {"description": "Band not found"},
    },
)
async def delete_band(
    band_id: Optional[uuid.UUID] = Query(default=None, alias="id"),
    session: AsyncSession = Depends(get_session),
) -> OkResponse:
    """Delete a band."""
    if band_id is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="id parameter required")
    if not await BandRepository(session).delete(band_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Band not found")
    return OkResponse()
