"""
Band and band member repositories.

This module provides data access for band profiles and their member rosters.
"""

from __future__ import annotations

import uuid
from typing import List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.bands import Band, BandMember
from ..entities.users import User
from .base import AsyncBaseRepository


class BandRepository(AsyncBaseRepository[Band]):
    """Repository for band data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Band)

    async def list_by_user(self, user_id: uuid.UUID) -> List[Band]:
        """List all bands owned by a user, newest first.

        Args:
            user_id: Owning user id

        Returns:
            List of Band instances
        """
        stmt = select(Band).where(Band.user_id == user_id).order_by(Band.created_at.desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_with_owner(self, limit: int = 100) -> List[Tuple[Band, Optional[str]]]:
        """List bands with their owner's email, newest first."""
        stmt = (
            select(Band, User.email)
            .join(User, Band.user_id == User.id, isouter=True)
            .order_by(Band.created_at.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [(band, owner_email) for band, owner_email in result.all()]


class BandMemberRepository(AsyncBaseRepository[BandMember]):
    """Repository for band member data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, BandMember)

    async def list_by_band(self, band_id: uuid.UUID) -> List[BandMember]:
        """List the members of a band in the order they joined.

        Args:
            band_id: Band id

        Returns:
            List of BandMember instances, oldest first
        """
        stmt = select(BandMember).where(BandMember.band_id == band_id).order_by(BandMember.created_at.asc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
