"""
Admin dashboard I/O models.

Dashboard listings reuse the public read models, extended with the email of
the owning user account where the row belongs to one.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from .analytics import AnalyticsEventRead, EventCount
from .artists import ArtistRead
from .bands import BandRead
from .gigs import GigRead
from .users import UserRead
from .venues import VenueRead


class AdminLogin(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class AdminToken(BaseModel):
    """Bearer token issued to an admin account."""

    token: str
    username: str


class AdminStats(BaseModel):
    users: int
    venues: int
    artists: int
    bands: int
    gigs: int


class AdminStatsResponse(BaseModel):
    stats: AdminStats
    recentUsers: List[UserRead]
    recentGigs: List[GigRead]


class AdminVenueRead(VenueRead):
    owner_email: Optional[str] = None


class AdminArtistRead(ArtistRead):
    owner_email: Optional[str] = None


class AdminBandRead(BandRead):
    owner_email: Optional[str] = None


class AdminAnalyticsResponse(BaseModel):
    eventCounts: List[EventCount]
    recentEvents: List[AnalyticsEventRead]
