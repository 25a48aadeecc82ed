"""
Gig and gig applicant I/O models for API requests and responses.

Gig payloads use camelCase keys on the wire (``isTipsOnly``, ``venueId``,
``paymentType``, ...) to match the client. Snake_case keys are accepted on
input as well. Applicant payloads are snake_case like every other resource.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ..domain import MAX_RANKED_APPLICANTS, ApplicantStatus, EsrbRating, GigFrequency, GigStatus, PaymentType

# Fields a gig cannot be created without, in the order they are checked.
GIG_REQUIRED_FIELDS = ("title", "venue", "location", "date", "time", "price", "genre")


class GigModel(BaseModel):
    """Base for camelCase gig payloads."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        use_enum_values=True,
        coerce_numbers_to_str=True,
    )


class GigRead(GigModel):
    """Schema for reading a gig listing from API."""

    id: uuid.UUID
    title: str
    venue_id: Optional[uuid.UUID] = None
    venue: str
    location: str
    date: str
    time: str
    price: str
    genre: List[str]
    is_verified: bool
    image: Optional[str] = None
    stage: Optional[str] = None
    is_recurring: bool
    frequency: Optional[str] = None
    status: str
    is_tips_only: bool
    payment_type: str
    esrb_rating: str
    equipment_provided: List[str] = Field(default_factory=list)
    posting_schedule: Optional[Dict[str, Any]] = None
    created_at: datetime
    updated_at: datetime


class _GigFields(GigModel):
    """Writable gig fields shared by create and update."""

    title: Optional[str] = None
    venue_id: Optional[uuid.UUID] = None
    venue: Optional[str] = Field(default=None, description="Venue display name")
    location: Optional[str] = None
    date: Optional[str] = Field(default=None, description="Display date as entered by the venue")
    time: Optional[str] = Field(default=None, description="Display time as entered by the venue")
    price: Optional[str] = Field(default=None, description="Display price, e.g. '$200' or 'Tips'")
    genre: Optional[List[str]] = None
    image: Optional[str] = None
    stage: Optional[str] = None
    frequency: Optional[GigFrequency] = None
    payment_type: Optional[PaymentType] = None
    equipment_provided: Optional[List[str]] = None
    posting_schedule: Optional[Dict[str, Any]] = Field(
        default=None, description="When the listing goes live, e.g. {'publishAt': ..., 'timezone': ...}"
    )

    @field_validator("genre", "equipment_provided", mode="before")
    @classmethod
    def _single_value_as_list(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value


class GigCreate(_GigFields):
    """Schema for creating a gig via API."""

    model_config = ConfigDict(validate_default=True)

    is_verified: bool = False
    is_recurring: bool = False
    status: GigStatus = GigStatus.DRAFT
    is_tips_only: bool = False
    esrb_rating: EsrbRating = EsrbRating.FAMILY

    def first_missing_field(self) -> Optional[str]:
        """Name of the first required field that is absent or blank, if any."""
        for name in GIG_REQUIRED_FIELDS:
            value = getattr(self, name)
            if value is None:
                return name
            if isinstance(value, str) and not value.strip():
                return name
            if isinstance(value, list) and not any(str(item).strip() for item in value):
                return name
        return None

    def resolved_payment_type(self) -> str:
        """Payment type, defaulting from the tips-only flag when not given."""
        if self.payment_type is not None:
            return self.payment_type
        return PaymentType.TIPS.value if self.is_tips_only else PaymentType.FLAT_FEE.value


class GigUpdate(_GigFields):
    """Schema for updating a gig via API."""

    id: Optional[uuid.UUID] = None
    is_verified: Optional[bool] = None
    is_recurring: Optional[bool] = None
    status: Optional[GigStatus] = None
    is_tips_only: Optional[bool] = None
    esrb_rating: Optional[EsrbRating] = None


class GigResponse(BaseModel):
    gig: GigRead


class GigListResponse(BaseModel):
    gigs: List[GigRead]


class GigApplicantRead(BaseModel):
    """Schema for reading a band's application to a gig."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    gig_id: uuid.UUID
    band_id: uuid.UUID
    band_name: str
    applied_at: datetime
    status: str
    rank: Optional[int] = Field(default=None, description="Position in the booking sequence, 1 is offered first")


class GigApplicantCreate(BaseModel):
    """Schema for applying a band to a gig via API."""

    gig_id: uuid.UUID
    band_id: uuid.UUID
    band_name: Optional[str] = Field(default=None, description="Defaults to the band's profile name")


class GigApplicantUpdate(BaseModel):
    """Schema for updating an application via API."""

    model_config = ConfigDict(use_enum_values=True)

    id: Optional[uuid.UUID] = None
    status: Optional[ApplicantStatus] = None
    rank: Optional[int] = Field(default=None, ge=1, le=MAX_RANKED_APPLICANTS)


class GigRankingRequest(BaseModel):
    """Ranked shortlist of applicants for a gig, best first."""

    gig_id: uuid.UUID
    applicant_ids: List[uuid.UUID]


class GigApplicantResponse(BaseModel):
    applicant: GigApplicantRead


class GigApplicantListResponse(BaseModel):
    applicants: List[GigApplicantRead]
