"""
Calendar availability repository.
"""

from __future__ import annotations

import datetime as dt
import uuid
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.calendar import CalendarAvailability
from .base import AsyncBaseRepository


class CalendarRepository(AsyncBaseRepository[CalendarAvailability]):
    """Repository for per-day availability entries."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, CalendarAvailability)

    async def list_range(self, user_id: uuid.UUID, start: dt.date, end: dt.date) -> List[CalendarAvailability]:
        """List a user's entries between two dates (inclusive), by date ascending.

        Args:
            user_id: Owning user id
            start: First date of the range
            end: Last date of the range

        Returns:
            List of CalendarAvailability instances
        """
        stmt = (
            select(CalendarAvailability)
            .where(CalendarAvailability.user_id == user_id)
            .where(CalendarAvailability.date >= start)
            .where(CalendarAvailability.date <= end)
            .order_by(CalendarAvailability.date.asc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_for_date(self, user_id: uuid.UUID, day: dt.date):
        stmt = select(CalendarAvailability).where(
            (CalendarAvailability.user_id == user_id) & (CalendarAvailability.date == day)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def upsert(self, user_id: uuid.UUID, day: dt.date, is_available: bool) -> CalendarAvailability:
        """Set availability for a user's day, creating the entry if it does not exist.

        Args:
            user_id: Owning user id
            day: Calendar date
            is_available: New availability flag

        Returns:
            The created or updated entry
        """
        entry = await self.get_for_date(user_id, day)
        if entry is None:
            entry = CalendarAvailability(user_id=user_id, date=day, is_available=is_available)
        else:
            entry.is_available = is_available
        return await self.create(entry)

    async def delete_for_date(self, user_id: uuid.UUID, day: dt.date) -> bool:
        """Remove a user's entry for a day.

        Returns:
            True if an entry was removed, False if there was none
        """
        entry = await self.get_for_date(user_id, day)
        if entry is None:
            return False
        await self.session.delete(entry)
        await self.session.commit()
        return True
