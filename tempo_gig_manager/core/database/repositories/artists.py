"""
Artist repository.
"""

from __future__ import annotations

import uuid
from typing import List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.artists import Artist
from ..entities.users import User
from .base import AsyncBaseRepository

# Size of the public artist directory page
DIRECTORY_LIMIT = 50


class ArtistRepository(AsyncBaseRepository[Artist]):
    """Repository for artist data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Artist)

    async def get_by_user(self, user_id: uuid.UUID) -> Optional[Artist]:
        """Get the artist profile owned by a user.

        Args:
            user_id: Owning user id

        Returns:
            Artist instance or None
        """
        stmt = select(Artist).where(Artist.user_id == user_id).order_by(Artist.created_at.desc())
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def list_open_to_work(self, limit: int = DIRECTORY_LIMIT) -> List[Artist]:
        """List artists currently open to work, newest first.

        Args:
            limit: Maximum number of artists, capped at DIRECTORY_LIMIT

        Returns:
            List of Artist instances
        """
        stmt = (
            select(Artist)
            .where(Artist.open_to_work == True)  # noqa: E712
            .order_by(Artist.created_at.desc())
            .limit(min(limit, DIRECTORY_LIMIT))
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_with_owner(self, limit: int = 100) -> List[Tuple[Artist, Optional[str]]]:
        """List artists with their owner's email, newest first."""
        stmt = (
            select(Artist, User.email)
            .join(User, Artist.user_id == User.id, isouter=True)
            .order_by(Artist.created_at.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [(artist, owner_email) for artist, owner_email in result.all()]
