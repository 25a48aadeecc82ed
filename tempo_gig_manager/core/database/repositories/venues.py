"""
Venue repository.

Data access for venue profiles, including the owner-email join used by the
admin dashboard.
"""

from __future__ import annotations

import uuid
from typing import List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.users import User
from ..entities.venues import Venue
from .base import AsyncBaseRepository


class VenueRepository(AsyncBaseRepository[Venue]):
    """Repository for venue data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Venue)

    async def list_by_user(self, user_id: uuid.UUID) -> List[Venue]:
        """List all venues owned by a user, newest first.

        Args:
            user_id: Owning user id

        Returns:
            List of Venue instances
        """
        stmt = select(Venue).where(Venue.user_id == user_id).order_by(Venue.created_at.desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_with_owner(self, limit: int = 100) -> List[Tuple[Venue, Optional[str]]]:
        """List venues with their owner's email, newest first."""
        stmt = (
            select(Venue, User.email)
            .join(User, Venue.user_id == User.id, isouter=True)
            .order_by(Venue.created_at.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [(venue, owner_email) for venue, owner_email in result.all()]
