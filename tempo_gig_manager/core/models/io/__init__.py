"""
I/O models for API requests and responses.

This package contains Pydantic-based I/O schemas that define the contract
between API endpoints and clients. These models are separate from database
entities to allow independent evolution of API contracts.

Modules:
- common: Acknowledgement and error bodies
- users, venues, artists, bands: Profile I/O models
- gigs: Gig listing, applicant and ranking I/O models
- calendar: Availability I/O models
- analytics: Event tracking I/O models
- admin: Admin dashboard I/O models
- places: Google Maps proxy request bodies
"""

from .admin import (
    AdminAnalyticsResponse,
    AdminArtistRead,
    AdminBandRead,
    AdminLogin,
    AdminStats,
    AdminStatsResponse,
    AdminToken,
    AdminVenueRead,
)
from .analytics import (
    AnalyticsEventCreate,
    AnalyticsEventListResponse,
    AnalyticsEventRead,
    AnalyticsEventResponse,
    AnalyticsSummaryResponse,
    EventCount,
)
from .artists import ArtistCreate, ArtistListResponse, ArtistRead, ArtistResponse, ArtistUpdate
from .bands import (
    BandCreate,
    BandDetail,
    BandDetailResponse,
    BandListResponse,
    BandMemberCreate,
    BandMemberListResponse,
    BandMemberRead,
    BandMemberResponse,
    BandRead,
    BandResponse,
    BandSummary,
    BandUpdate,
)
from .calendar import AvailabilityListResponse, AvailabilityRead, AvailabilityResponse, AvailabilitySet
from .common import ErrorResponse, OkResponse
from .gigs import (
    GIG_REQUIRED_FIELDS,
    GigApplicantCreate,
    GigApplicantListResponse,
    GigApplicantRead,
    GigApplicantResponse,
    GigApplicantUpdate,
    GigCreate,
    GigListResponse,
    GigRankingRequest,
    GigRead,
    GigResponse,
    GigUpdate,
)
from .places import AddressValidationRequest
from .users import UserCreate, UserRead, UserResponse, UserUpdate
from .venues import VenueCreate, VenueListResponse, VenueRead, VenueResponse, VenueUpdate

__all__ = [
    "GIG_REQUIRED_FIELDS",
    "AddressValidationRequest",
    "AdminAnalyticsResponse",
    "AdminArtistRead",
    "AdminBandRead",
    "AdminLogin",
    "AdminStats",
    "AdminStatsResponse",
    "AdminToken",
    "AdminVenueRead",
    "AnalyticsEventCreate",
    "AnalyticsEventListResponse",
    "AnalyticsEventRead",
    "AnalyticsEventResponse",
    "AnalyticsSummaryResponse",
    "ArtistCreate",
    "ArtistListResponse",
    "ArtistRead",
    "ArtistResponse",
    "ArtistUpdate",
    "AvailabilityListResponse",
    "AvailabilityRead",
    "AvailabilityResponse",
    "AvailabilitySet",
    "BandCreate",
    "BandDetail",
    "BandDetailResponse",
    "BandListResponse",
    "BandMemberCreate",
    "BandMemberListResponse",
    "BandMemberRead",
    "BandMemberResponse",
    "BandRead",
    "BandResponse",
    "BandSummary",
    "BandUpdate",
    "ErrorResponse",
    "EventCount",
    "GigApplicantCreate",
    "GigApplicantListResponse",
    "GigApplicantRead",
    "GigApplicantResponse",
    "GigApplicantUpdate",
    "GigCreate",
    "GigListResponse",
    "GigRankingRequest",
    "GigRead",
    "GigResponse",
    "GigUpdate",
    "OkResponse",
    "UserCreate",
    "UserRead",
    "UserResponse",
    "UserUpdate",
    "VenueCreate",
    "VenueListResponse",
    "VenueRead",
    "VenueResponse",
    "VenueUpdate",
]
