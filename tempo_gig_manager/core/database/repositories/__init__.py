"""
Database repository layer using SQLModel.

This package contains all repository classes organized by table. Each module
provides data access operations for its corresponding SQLModel entity.

Modules:
- base: AsyncBaseRepository and QueryBuilder utilities
- users, venues, artists, bands: Profile repositories
- gigs: Gig listings, applicants and ranking
- calendar: Per-day availability
- analytics: Event tracking and summaries
- admin_users: Admin dashboard accounts
- bundle: All repositories bound to one session
"""

from .admin_users import AdminUserRepository
from .analytics import AnalyticsRepository
from .artists import ArtistRepository
from .bands import BandMemberRepository, BandRepository
from .base import AsyncBaseRepository, QueryBuilder
from .bundle import SqlRepoBundle, build_sql_repos_from_session
from .calendar import CalendarRepository
from .gigs import GigApplicantRepository, GigRepository
from .users import UserRepository
from .venues import VenueRepository

__all__ = [
    "AdminUserRepository",
    "AnalyticsRepository",
    "ArtistRepository",
    "AsyncBaseRepository",
    "BandMemberRepository",
    "BandRepository",
    "CalendarRepository",
    "GigApplicantRepository",
    "GigRepository",
    "QueryBuilder",
    "SqlRepoBundle",
    "UserRepository",
    "VenueRepository",
    "build_sql_repos_from_session",
]
