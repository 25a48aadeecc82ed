"""
API endpoints for product analytics events.
"""

from __future__ import annotations

import uuid
from typing import Optional, Union

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from tempo_gig_manager.core.database import get_session
from tempo_gig_manager.core.database.entities import AnalyticsEvent
from tempo_gig_manager.core.database.repositories import AnalyticsRepository
from tempo_gig_manager.core.models.io import (
    AnalyticsEventCreate,
    AnalyticsEventListResponse,
    AnalyticsEventRead,
    AnalyticsEventResponse,
    AnalyticsSummaryResponse,
    EventCount,
)

router = APIRouter(tags=["analytics"])


@router.post(
    "",
    response_model=AnalyticsEventResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Track Event",
    responses={
        201: {"description": "Event stored"},
        400: {"description": "Event name missing"},
    },
)
async def track_event(
    payload: AnalyticsEventCreate, session: AsyncSession = Depends(get_session)
) -> AnalyticsEventResponse:
    """
    Store an analytics event.

    - **event**: Event name (required).
    - **properties**: Free-form event properties.
    - **user_id**: Acting user, if signed in.
    """
    if not payload.event or not payload.event.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="event name required")
    event = AnalyticsEvent(event=payload.event.strip(), properties=payload.properties or {}, user_id=payload.user_id)
    event = await AnalyticsRepository(session).create(event)
    return AnalyticsEventResponse(event=AnalyticsEventRead.model_validate(event))


@router.get(
    "",
    response_model=Union[AnalyticsSummaryResponse, AnalyticsEventListResponse],
    summary="Get Events",
    description="List a user's recent events, or summarize event counts over the last 30 days.",
    responses={
        200: {"description": "Events or summary"},
        400: {"description": "Neither user_id nor summary=true given"},
    },
)
async def get_events(
    user_id: Optional[uuid.UUID] = None,
    summary: bool = False,
    session: AsyncSession = Depends(get_session),
) -> Union[AnalyticsSummaryResponse, AnalyticsEventListResponse]:
    """
    Get events.

    - **user_id**: Returns that user's `{events}`, newest first (at most 100). Takes precedence over summary.
    - **summary**: When true, returns `{summary: [{event, count}]}` for the last 30 days.
    """
    repo = AnalyticsRepository(session)
    if user_id is not None:
        events = await repo.list_recent(user_id=user_id)
        return AnalyticsEventListResponse(events=[AnalyticsEventRead.model_validate(e) for e in events])
    if summary:
        counts = await repo.summary()
        return AnalyticsSummaryResponse(summary=[EventCount(event=e, count=c) for e, c in counts])
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="user_id or summary=true parameter required")
