"""
API endpoints for artist profiles (EPK).

Besides single-profile lookups, a bare GET returns the public directory of
artists currently open to work.
"""

from __future__ import annotations

import uuid
from typing import Optional, Union

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from tempo_gig_manager.core.database import get_session
from tempo_gig_manager.core.database.entities import Artist
from tempo_gig_manager.core.database.repositories import ArtistRepository
from tempo_gig_manager.core.database.repositories.artists import DIRECTORY_LIMIT
from tempo_gig_manager.core.logging_config import get_logger
from tempo_gig_manager.core.models.io import (
    ArtistCreate,
    ArtistListResponse,
    ArtistRead,
    ArtistResponse,
    ArtistUpdate,
    OkResponse,
)
from tempo_gig_manager.server.exception_handlers import required_fields_message

logger = get_logger(__name__)

router = APIRouter(tags=["artists"])


@router.get(
    "",
    response_model=Union[ArtistResponse, ArtistListResponse],
    summary="Get Artists",
    description="Retrieve an artist by id or owner, or list artists that are open to work.",
    responses={
        200: {"description": "Artist or artist directory"},
        404: {"description": "Artist not found"},
    },
)
async def get_artists(
    artist_id: Optional[uuid.UUID] = Query(default=None, alias="id"),
    user_id: Optional[uuid.UUID] = None,
    limit: int = Query(default=DIRECTORY_LIMIT, ge=1),
    session: AsyncSession = Depends(get_session),
) -> Union[ArtistResponse, ArtistListResponse]:
    """
    Get one artist or the artist directory.

    - **id**: Artist id; returns `{artist}`.
    - **user_id**: Owner id; returns that user's `{artist}`.
    - **limit**: Directory size when neither is given (at most 50).
    """
    repo = ArtistRepository(session)
    if artist_id is not None or user_id is not None:
        artist = await repo.get_by_id(artist_id) if artist_id is not None else await repo.get_by_user(user_id)
        if artist is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Artist not found")
        return ArtistResponse(artist=ArtistRead.model_validate(artist))

    artists = await repo.list_open_to_work(limit=limit)
    return ArtistListResponse(artists=[ArtistRead.model_validate(a) for a in artists])


@router.post(
    "",
    response_model=ArtistResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Artist",
    description="Create the artist profile of an artist account.",
    responses={
        201: {"description": "Artist created"},
        400: {"description": "Missing required fields"},
    },
)
@required_fields_message("Missing required fields: name, genre, instruments, user_id")
async def create_artist(payload: ArtistCreate, session: AsyncSession = Depends(get_session)) -> ArtistResponse:
    """
    Create an artist profile.

    - **name**, **genre**, **instruments**, **user_id**: Required.
    - **open_to_work**: Listed in the directory when true (default).
    """
    artist = await ArtistRepository(session).create(Artist(**payload.model_dump()))
    logger.info(f"Created artist {artist.id} for user {artist.user_id}")
    return ArtistResponse(artist=ArtistRead.model_validate(artist))


@router.patch(
    "",
    response_model=ArtistResponse,
    summary="Update Artist",
    description="Partially update an artist profile. Omitted or null fields keep their current value.",
    responses={
        200: {"description": "Artist updated"},
        400: {"description": "Artist id missing"},
        404: {"description": "Artist not found"},
    },
)
async def update_artist(payload: ArtistUpdate, session: AsyncSession = Depends(get_session)) -> ArtistResponse:
    """
    Update an artist profile.

    - **id**: Artist id (required).
    - **face_verified**: Set once the face check succeeds.
    """
    if payload.id is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Artist id required")
    artist = await ArtistRepository(session).apply_changes(payload.id, payload.model_dump(exclude={"id"}))
    if artist is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Artist not found")
    return ArtistResponse(artist=ArtistRead.model_validate(artist))


@router.delete(
    "",
    response_model=OkResponse,
    response_model_exclude_none=True,
    summary="Delete Artist",
    responses={
        200: {"description": "Artist deleted"},
        400: {"description": "Artist id missing"},
        404: {"description": "Artist not found"},
    },
)
async def delete_artist(
    artist_id: Optional[uuid.UUID] = Query(default=None, alias="id"),
    session: AsyncSession = Depends(get_session),
) -> OkResponse:
    """Delete an artist profile."""
    if artist_id is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="id parameter required")
    if not await ArtistRepository(session).delete(artist_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Artist not found")
    return OkResponse()
