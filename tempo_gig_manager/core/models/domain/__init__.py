"""Domain-level types shared across the database and API layers."""

from .enums import (
    MAX_RANKED_APPLICANTS,
    AdminResource,
    ApplicantStatus,
    EsrbRating,
    GigFrequency,
    GigStatus,
    PaymentType,
    UserRole,
    VenueType,
)

__all__ = [
    "MAX_RANKED_APPLICANTS",
    "AdminResource",
    "ApplicantStatus",
    "EsrbRating",
    "GigFrequency",
    "GigStatus",
    "PaymentType",
    "UserRole",
    "VenueType",
]
