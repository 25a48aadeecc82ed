"""
Analytics event repository.

Stores tracked events and aggregates them for the dashboard summary.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timedelta
from typing import List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..base import utc_now
from ..entities.analytics import AnalyticsEvent
from .base import AsyncBaseRepository

# Window of the event summary
SUMMARY_WINDOW = timedelta(days=30)
EVENTS_LIMIT = 100


class AnalyticsRepository(AsyncBaseRepository[AnalyticsEvent]):
    """Repository for analytics events."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, AnalyticsEvent)

    async def list_recent(self, user_id: Optional[uuid.UUID] = None, limit: int = EVENTS_LIMIT) -> List[AnalyticsEvent]:
        """List events, newest first, optionally only those of one user.

        Args:
            user_id: Only events attributed to this user
            limit: Maximum number of events, capped at EVENTS_LIMIT

        Returns:
            List of AnalyticsEvent instances
        """
        stmt = select(AnalyticsEvent).order_by(AnalyticsEvent.timestamp.desc())
        if user_id is not None:
            stmt = stmt.where(AnalyticsEvent.user_id == user_id)
        stmt = stmt.limit(min(limit, EVENTS_LIMIT))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_by_event(self, since: Optional[datetime] = None) -> List[Tuple[str, int]]:
        """Count events per name, most frequent first.

        Args:
            since: Lower bound (exclusive); all events when None

        Returns:
            List of ``(event, count)`` pairs
        """
        count = func.count(AnalyticsEvent.id).label("count")
        stmt = select(AnalyticsEvent.event, count)
        if since is not None:
            stmt = stmt.where(AnalyticsEvent.timestamp > since)
        stmt = stmt.group_by(AnalyticsEvent.event).order_by(count.desc(), AnalyticsEvent.event)
        result = await self.session.execute(stmt)
        return [(event, int(total)) for event, total in result.all()]

    async def summary(self) -> List[Tuple[str, int]]:
        """Event counts over the last 30 days."""
        return await self.count_by_event(since=utc_now() - SUMMARY_WINDOW)
