"""
Database entity models.

This package contains all database entity models organized by table.
Importing it registers every table on the shared SQLModel metadata.

Modules:
- users: Marketplace accounts
- venues: Venue profiles
- artists: Artist profiles (EPK)
- bands: Band profiles and band members
- gigs: Gig listings and gig applicants
- calendar: Per-day availability
- analytics: Tracked product analytics events
- admin_users: Admin dashboard accounts
"""

from .admin_users import AdminUser
from .analytics import AnalyticsEvent
from .artists import Artist
from .bands import Band, BandMember
from .calendar import CalendarAvailability
from .gigs import Gig, GigApplicant
from .users import User
from .venues import Venue

__all__ = [
    "AdminUser",
    "AnalyticsEvent",
    "Artist",
    "Band",
    "BandMember",
    "CalendarAvailability",
    "Gig",
    "GigApplicant",
    "User",
    "Venue",
]
