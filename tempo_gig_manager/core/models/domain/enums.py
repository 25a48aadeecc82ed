"""
Domain enumerations shared by entities and API schemas.

Values match the CHECK constraints of the database schema.
"""

from __future__ import annotations

from enum import Enum


class UserRole(str, Enum):
    VENUE = "venue"
    ARTIST = "artist"
    BAND = "band"


class VenueType(str, Enum):
    HOTEL = "hotel"
    RESTAURANT = "restaurant"
    BAR = "bar"
    DIVE = "dive"
    CHURCH = "church"


class EsrbRating(str, Enum):
    """Audience rating for venues and gigs."""

    FAMILY = "family"
    ADULTS_ONLY = "21+"
    NSFW = "nsfw"


class GigStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"
    CONFIRMED = "confirmed"
    APPLIED = "applied"
    PENDING = "pending"


class GigFrequency(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class PaymentType(str, Enum):
    TIPS = "tips"
    HOURLY = "hourly"
    FLAT_FEE = "flat_fee"
    IN_KIND = "in_kind"


class ApplicantStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class AdminResource(str, Enum):
    """Resources readable from the admin dashboard."""

    STATS = "stats"
    USERS = "users"
    VENUES = "venues"
    ARTISTS = "artists"
    BANDS = "bands"
    GIGS = "gigs"
    ANALYTICS = "analytics"


# Maximum number of applicants a venue can place in a ranked booking sequence.
MAX_RANKED_APPLICANTS = 5
