"""
Gig and gig applicant repositories.

This module provides data access for gig listings and the applications bands
submit to them, including persistence of a venue's ranked booking sequence.
"""

from __future__ import annotations

import uuid
from typing import List, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.gigs import Gig, GigApplicant
from .base import AsyncBaseRepository, QueryBuilder

# Size of the gig feed
FEED_LIMIT = 100


class GigRepository(AsyncBaseRepository[Gig]):
    """Repository for gig data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Gig)

    async def list_recent(
        self,
        limit: int = FEED_LIMIT,
        venue_id: Optional[uuid.UUID] = None,
        status: Optional[str] = None,
    ) -> List[Gig]:
        """List gigs, newest first.

        Args:
            limit: Maximum number of gigs, capped at FEED_LIMIT
            venue_id: Only gigs of this venue
            status: Only gigs in this status

        Returns:
            List of Gig instances
        """
        stmt = select(Gig).order_by(Gig.created_at.desc())
        stmt = QueryBuilder.apply_filters(stmt, Gig, {"venue_id": venue_id, "status": status})
        stmt = stmt.limit(min(limit, FEED_LIMIT))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())


class GigApplicantRepository(AsyncBaseRepository[GigApplicant]):
    """Repository for gig applications and ranking."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, GigApplicant)

    async def list_by_gig(self, gig_id: uuid.UUID) -> List[GigApplicant]:
        """List applicants of a gig in booking order.

        Ranked applicants come first by ascending rank, followed by unranked
        applicants in the order they applied.

        Args:
            gig_id: Gig id

        Returns:
            List of GigApplicant instances
        """
        stmt = (
            select(GigApplicant)
            .where(GigApplicant.gig_id == gig_id)
            .order_by(GigApplicant.rank.is_(None), GigApplicant.rank, GigApplicant.applied_at)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_gig_and_band(self, gig_id: uuid.UUID, band_id: uuid.UUID) -> Optional[GigApplicant]:
        """Get a band's application to a gig, if any."""
        stmt = select(GigApplicant).where((GigApplicant.gig_id == gig_id) & (GigApplicant.band_id == band_id))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_rank(self, gig_id: uuid.UUID, rank: int) -> Optional[GigApplicant]:
        """Get the applicant holding a rank in a gig's booking sequence, if any."""
        stmt = select(GigApplicant).where((GigApplicant.gig_id == gig_id) & (GigApplicant.rank == rank))
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def set_ranking(self, gig_id: uuid.UUID, ordered_ids: Sequence[uuid.UUID]) -> List[GigApplicant]:
        """Replace the ranked booking sequence of a gig.

        Applicants listed in ``ordered_ids`` receive ranks 1..n in order; every
        other applicant of the gig is unranked. The caller validates that the
        ids belong to the gig.

        Args:
            gig_id: Gig id
            ordered_ids: Applicant ids, best first

        Returns:
            Applicants of the gig in the new booking order
        """
        positions = {applicant_id: index + 1 for index, applicant_id in enumerate(ordered_ids)}
        for applicant in await self.list_by_gig(gig_id):
            applicant.rank = positions.get(applicant.id)
            self.session.add(applicant)
        await self.session.commit()
        return await self.list_by_gig(gig_id)
