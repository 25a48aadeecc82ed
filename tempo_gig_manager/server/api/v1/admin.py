"""
API endpoints for the admin dashboard.

Every endpoint except login requires admin authorization (shared secret or
bearer token). Listings return the 100 newest rows of a table; venue, artist
and band rows carry the email of the owning account.
"""

from __future__ import annotations

import uuid
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from tempo_gig_manager.core.database import get_session
from tempo_gig_manager.core.database.repositories import SqlRepoBundle, build_sql_repos_from_session
from tempo_gig_manager.core.logging_config import get_logger
from tempo_gig_manager.core.models.domain import AdminResource
from tempo_gig_manager.core.models.io import (
    AdminAnalyticsResponse,
    AdminArtistRead,
    AdminBandRead,
    AdminLogin,
    AdminStats,
    AdminStatsResponse,
    AdminToken,
    AdminVenueRead,
    AnalyticsEventRead,
    EventCount,
    GigRead,
    OkResponse,
    UserRead,
)
from tempo_gig_manager.core.security import create_admin_token, verify_password
from tempo_gig_manager.server.core.config import settings
from tempo_gig_manager.server.services.admin_auth import require_admin

logger = get_logger(__name__)

router = APIRouter(tags=["admin"])

LISTING_LIMIT = 100
RECENT_LIMIT = 5
RECENT_EVENTS_LIMIT = 50

INVALID_RESOURCE = "Invalid resource. Use: stats, users, venues, artists, bands, gigs, analytics"

# Deletable resources and the label used in the confirmation message
_DELETABLE = {
    AdminResource.USERS.value: "User",
    AdminResource.VENUES.value: "Venue",
    AdminResource.ARTISTS.value: "Artist",
    AdminResource.BANDS.value: "Band",
    AdminResource.GIGS.value: "Gig",
}


def get_repos(session: AsyncSession = Depends(get_session)) -> SqlRepoBundle:
    return build_sql_repos_from_session(session=session)


async def _stats(repos: SqlRepoBundle) -> Dict[str, Any]:
    response = AdminStatsResponse(
        stats=AdminStats(
            users=await repos.users.count(),
            venues=await repos.venues.count(),
            artists=await repos.artists.count(),
            bands=await repos.bands.count(),
            gigs=await repos.gigs.count(),
        ),
        recentUsers=[UserRead.model_validate(u) for u in await repos.users.list_recent(limit=RECENT_LIMIT)],
        recentGigs=[GigRead.model_validate(g) for g in await repos.gigs.list_recent(limit=RECENT_LIMIT)],
    )
    return response.model_dump(mode="json", by_alias=True)


async def _analytics(repos: SqlRepoBundle) -> Dict[str, Any]:
    counts = await repos.analytics.count_by_event()
    recent = await repos.analytics.list_recent(limit=RECENT_EVENTS_LIMIT)
    response = AdminAnalyticsResponse(
        eventCounts=[EventCount(event=event, count=count) for event, count in counts],
        recentEvents=[AnalyticsEventRead.model_validate(e) for e in recent],
    )
    return response.model_dump(mode="json")


async def _listing(resource: str, repos: SqlRepoBundle) -> Dict[str, Any]:
    if resource == AdminResource.USERS.value:
        rows = [UserRead.model_validate(u) for u in await repos.users.list_recent(limit=LISTING_LIMIT)]
    elif resource == AdminResource.VENUES.value:
        rows = [
            AdminVenueRead.model_validate(venue).model_copy(update={"owner_email": email})
            for venue, email in await repos.venues.list_with_owner(limit=LISTING_LIMIT)
        ]
    elif resource == AdminResource.ARTISTS.value:
        rows = [
            AdminArtistRead.model_validate(artist).model_copy(update={"owner_email": email})
            for artist, email in await repos.artists.list_with_owner(limit=LISTING_LIMIT)
        ]
    elif resource == AdminResource.BANDS.value:
        rows = [
            AdminBandRead.model_validate(band).model_copy(update={"owner_email": email})
            for band, email in await repos.bands.list_with_owner(limit=LISTING_LIMIT)
        ]
    else:
        rows = [GigRead.model_validate(g) for g in await repos.gigs.list_recent(limit=LISTING_LIMIT)]
    return {resource: [row.model_dump(mode="json", by_alias=True) for row in rows]}


@router.get(
    "",
    summary="Get Dashboard Data",
    description="Read dashboard statistics, a table listing or the analytics overview.",
    responses={
        200: {"description": "Requested dashboard data"},
        400: {"description": "Unknown resource"},
        401: {"description": "Missing or invalid admin credentials"},
    },
)
async def get_dashboard(
    resource: Optional[str] = None,
    _admin: str = Depends(require_admin),
    repos: SqlRepoBundle = Depends(get_repos),
) -> Dict[str, Any]:
    """
    Read admin dashboard data.

    - **resource**: One of stats, users, venues, artists, bands, gigs, analytics.
    """
    if resource == AdminResource.STATS.value:
        return await _stats(repos)
    if resource == AdminResource.ANALYTICS.value:
        return await _analytics(repos)
    if resource in _DELETABLE:
        return await _listing(resource, repos)
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_RESOURCE)


@router.delete(
    "",
    response_model=OkResponse,
    summary="Delete Record",
    description="Delete a user, venue, artist, band or gig. Dependent rows are removed by cascade.",
    responses={
        200: {"description": "Record deleted"},
        400: {"description": "Missing id or unknown resource"},
        401: {"description": "Missing or invalid admin credentials"},
        404: {"description": "Record not found"},
    },
)
async def delete_record(
    resource: Optional[str] = None,
    record_id: Optional[uuid.UUID] = Query(default=None, alias="id"),
    admin: str = Depends(require_admin),
    repos: SqlRepoBundle = Depends(get_repos),
) -> OkResponse:
    """
    Delete a record from the dashboard.

    - **resource**: One of users, venues, artists, bands, gigs.
    - **id**: Record id (required).
    """
    if record_id is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="ID required for deletion")
    label = _DELETABLE.get(resource or "")
    if label is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid resource for deletion")

    repo = getattr(repos, resource)
    if not await repo.delete(record_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{label} not found")
    logger.info(f"Admin {admin} deleted {resource} {record_id}")
    return OkResponse(message=f"{label} deleted")


@router.post(
    "/login",
    response_model=AdminToken,
    summary="Admin Login",
    description="Exchange admin credentials for a bearer token.",
    responses={
        200: {"description": "Token issued"},
        401: {"description": "Invalid credentials"},
        500: {"description": "ADMIN_TOKEN_SECRET not set"},
    },
)
async def login(payload: AdminLogin, repos: SqlRepoBundle = Depends(get_repos)) -> AdminToken:
    """
    Sign in to the admin dashboard.

    - **username**, **password**: Admin account credentials.
    """
    account = await repos.admin_users.get_by_username(payload.username)
    if account is None or not verify_password(payload.password, account.password_hash):
        logger.warning(f"Failed admin login for {payload.username}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid username or password")

    config = settings.admin
    if not config.token_secret:
        logger.error("Admin login attempted but ADMIN_TOKEN_SECRET is not set")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Admin login is not configured"
        )

    await repos.admin_users.touch_last_login(account)
    token = create_admin_token(account.username, config.token_secret, config.token_ttl_minutes)
    logger.info(f"Admin {account.username} signed in")
    return AdminToken(token=token, username=account.username)
