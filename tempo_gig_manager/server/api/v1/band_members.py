"""
API endpoints for band member rosters.
"""

from __future__ import annotations

import uuid
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from tempo_gig_manager.core.database import get_session
from tempo_gig_manager.core.database.entities import BandMember
from tempo_gig_manager.core.database.repositories import BandMemberRepository
from tempo_gig_manager.core.models.io import (
    BandMemberCreate,
    BandMemberListResponse,
    BandMemberRead,
    BandMemberResponse,
    OkResponse,
)
from tempo_gig_manager.server.exception_handlers import required_fields_message

router = APIRouter(tags=["band-members"])


@router.get(
    "",
    response_model=BandMemberListResponse,
    summary="List Band Members",
    responses={
        200: {"description": "Members of the band, oldest first"},
        400: {"description": "band_id missing"},
    },
)
async def list_band_members(
    band_id: Optional[uuid.UUID] = None,
    session: AsyncSession = Depends(get_session),
) -> BandMemberListResponse:
    """
    List the members of a band.

    - **band_id**: Band id (required).
    """
    if band_id is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="band_id parameter required")
    members = await BandMemberRepository(session).list_by_band(band_id)
    return BandMemberListResponse(members=[BandMemberRead.model_validate(m) for m in members])


@router.post(
    "",
    response_model=BandMemberResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add Band Member",
    responses={
        201: {"description": "Member added"},
        400: {"description": "Missing required fields"},
    },
)
@required_fields_message("band_id, name, role, and instrument required")
async def create_band_member(
    payload: BandMemberCreate, session: AsyncSession = Depends(get_session)
) -> BandMemberResponse:
    """
    Add a member to a band.

    - **band_id**, **name**, **role**, **instrument**: Required.
    """
    member = await BandMemberRepository(session).create(BandMember(**payload.model_dump()))
    return BandMemberResponse(member=BandMemberRead.model_validate(member))


@router.delete(
    "",
    response_model=OkResponse,
    response_model_exclude_none=True,
    summary="Remove Band Member",
    responses={
        200: {"description": "Member removed"},
        400: {"description": "Member id missing"},
        404: {"description": "Member not found"},
    },
)
async def delete_band_member(
    member_id: Optional[uuid.UUID] = Query(default=None, alias="id"),
    session: AsyncSession = Depends(get_session),
) -> OkResponse:
    """Remove a member from a band."""
    if member_id is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="id parameter required")
    if not await BandMemberRepository(session).delete(member_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Band member not found")
    return OkResponse()
