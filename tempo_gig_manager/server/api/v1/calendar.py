"""
API endpoints for per-day availability calendars.
"""

from __future__ import annotations

import datetime as dt
import uuid
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from tempo_gig_manager.core.database import get_session
from tempo_gig_manager.core.database.repositories import CalendarRepository
from tempo_gig_manager.core.models.io import (
    AvailabilityListResponse,
    AvailabilityRead,
    AvailabilityResponse,
    AvailabilitySet,
    OkResponse,
)
from tempo_gig_manager.server.exception_handlers import required_fields_message

router = APIRouter(tags=["calendar"])

# Default look-ahead when no end date is given
DEFAULT_RANGE = dt.timedelta(days=90)


@router.get(
    "",
    response_model=AvailabilityListResponse,
    summary="Get Availability",
    description="List a user's availability entries in a date range, by date ascending.",
    responses={
        200: {"description": "Availability entries"},
        400: {"description": "user_id missing"},
    },
)
async def get_availability(
    user_id: Optional[uuid.UUID] = None,
    start_date: Optional[dt.date] = None,
    end_date: Optional[dt.date] = None,
    session: AsyncSession = Depends(get_session),
) -> AvailabilityListResponse:
    """
    Get a user's availability.

    - **user_id**: Owner id (required).
    - **start_date**: First day (defaults to today).
    - **end_date**: Last day (defaults to 90 days after today).
    """
    if user_id is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="user_id parameter required")
    today = dt.date.today()
    start = start_date or today
    end = end_date or today + DEFAULT_RANGE
    entries = await CalendarRepository(session).list_range(user_id, start, end)
    return AvailabilityListResponse(availability=[AvailabilityRead.model_validate(e) for e in entries])


@router.post(
    "",
    response_model=AvailabilityResponse,
    summary="Set Availability",
    description="Mark a day as available or unavailable, creating the entry if needed.",
    responses={
        200: {"description": "Entry created or updated"},
        400: {"description": "Missing required fields"},
    },
)
@required_fields_message("user_id and date required")
async def set_availability(
    payload: AvailabilitySet, session: AsyncSession = Depends(get_session)
) -> AvailabilityResponse:
    """
    Set a day's availability.

    - **user_id**, **date**: Required.
    - **is_available**: Defaults to true.
    """
    entry = await CalendarRepository(session).upsert(
        payload.user_id, payload.date, True if payload.is_available is None else payload.is_available
    )
    return AvailabilityResponse(availability=AvailabilityRead.model_validate(entry))


@router.delete(
    "",
    response_model=OkResponse,
    response_model_exclude_none=True,
    summary="Clear Availability",
    responses={
        200: {"description": "Entry removed (or there was none)"},
        400: {"description": "user_id or date missing"},
    },
)
async def clear_availability(
    user_id: Optional[uuid.UUID] = None,
    date: Optional[dt.date] = None,
    session: AsyncSession = Depends(get_session),
) -> OkResponse:
    """
    Remove a day's availability entry.

    - **user_id**, **date**: Required.
    """
    if user_id is None or date is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="user_id and date parameters required")
    await CalendarRepository(session).delete_for_date(user_id, date)
    return OkResponse()
