"""
Gig entity models.

This module contains the gig listing table and the applications bands make to
gigs. An application may carry a rank, which places it in the venue's ranked
booking sequence (rank 1 is offered the gig first).
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import JSON, CheckConstraint, UniqueConstraint
from sqlmodel import Field

from ..base import Base, UTCDateTime, utc_now


class Gig(Base, table=True):
    """Entity for bookable performance listings.

    ``date``, ``time`` and ``price`` are free-form display strings as entered
    by the venue.

    Table: gigs
    """

    __tablename__ = "gigs"
    __table_args__ = (
        CheckConstraint("frequency IN ('daily', 'weekly', 'monthly')", name="ck_gigs_frequency"),
        CheckConstraint(
            "status IN ('draft', 'published', 'confirmed', 'applied', 'pending')",
            name="ck_gigs_status",
        ),
        CheckConstraint("payment_type IN ('tips', 'hourly', 'flat_fee', 'in_kind')", name="ck_gigs_payment_type"),
        CheckConstraint("esrb_rating IN ('family', '21+', 'nsfw')", name="ck_gigs_esrb_rating"),
    )

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    title: str
    venue_id: Optional[uuid.UUID] = Field(default=None, foreign_key="venues.id", ondelete="CASCADE", index=True)
    venue: str
    location: str
    date: str = Field(index=True)
    time: str
    price: str
    genre: List[str] = Field(sa_type=JSON)

    is_verified: bool = Field(default=False)
    image: Optional[str] = Field(default=None)
    stage: Optional[str] = Field(default=None)
    is_recurring: bool = Field(default=False)
    frequency: Optional[str] = Field(default=None, max_length=16)
    status: str = Field(default="draft", max_length=16, index=True)
    is_tips_only: bool = Field(default=False)
    payment_type: str = Field(default="flat_fee", max_length=16)
    esrb_rating: str = Field(default="family", max_length=16)
    equipment_provided: List[str] = Field(default_factory=list, sa_type=JSON)
    posting_schedule: Optional[Dict[str, Any]] = Field(default=None, sa_type=JSON)

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime())
    updated_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime())

    def __repr__(self) -> str:
        return f"Gig(id={self.id}, title={self.title}, status={self.status})"


class GigApplicant(Base, table=True):
    """Entity for a band's application to a gig.

    A band can apply to a given gig only once.

    Table: gig_applicants
    """

    __tablename__ = "gig_applicants"
    __table_args__ = (
        UniqueConstraint("gig_id", "band_id", name="uq_gig_applicants_gig_band"),
        CheckConstraint("status IN ('pending', 'accepted', 'rejected')", name="ck_gig_applicants_status"),
    )

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    gig_id: uuid.UUID = Field(foreign_key="gigs.id", ondelete="CASCADE", index=True)
    band_id: uuid.UUID = Field(foreign_key="bands.id", ondelete="CASCADE")
    band_name: str
    applied_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime())
    status: str = Field(default="pending", max_length=16)
    rank: Optional[int] = Field(default=None)

    def __repr__(self) -> str:
        return f"GigApplicant(id={self.id}, gig_id={self.gig_id}, band_id={self.band_id}, rank={self.rank})"
