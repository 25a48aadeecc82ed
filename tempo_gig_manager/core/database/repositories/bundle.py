"""
Repository bundle for dependency injection.

This module provides a convenience bundle of all repository instances sharing
one session, used by the admin dashboard and the account bootstrap script.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from .admin_users import AdminUserRepository
from .analytics import AnalyticsRepository
from .artists import ArtistRepository
from .bands import BandMemberRepository, BandRepository
from .calendar import CalendarRepository
from .gigs import GigApplicantRepository, GigRepository
from .users import UserRepository
from .venues import VenueRepository


@dataclass(frozen=True)
class SqlRepoBundle:
    """Convenience bundle of all SQL repositories for dependency injection."""

    users: UserRepository
    venues: VenueRepository
    artists: ArtistRepository
    bands: BandRepository
    band_members: BandMemberRepository
    gigs: GigRepository
    gig_applicants: GigApplicantRepository
    calendar: CalendarRepository
    analytics: AnalyticsRepository
    admin_users: AdminUserRepository


def build_sql_repos_from_session(*, session: AsyncSession) -> SqlRepoBundle:
    """Build a SqlRepoBundle from an existing session.

    Args:
        session: Existing async session

    Returns:
        Bundle containing all repository instances
    """
    return SqlRepoBundle(
        users=UserRepository(session),
        venues=VenueRepository(session),
        artists=ArtistRepository(session),
        bands=BandRepository(session),
        band_members=BandMemberRepository(session),
        gigs=GigRepository(session),
        gig_applicants=GigApplicantRepository(session),
        calendar=CalendarRepository(session),
        analytics=AnalyticsRepository(session),
        admin_users=AdminUserRepository(session),
    )
