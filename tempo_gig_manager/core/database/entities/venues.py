"""
Venue entity models.

A venue is a place that hosts live performances and posts gigs. A user may
own several venues.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import JSON, CheckConstraint
from sqlmodel import Field

from ..base import Base, UTCDateTime, utc_now


class Venue(Base, table=True):
    """Entity for venue profiles.

    Table: venues
    """

    __tablename__ = "venues"
    __table_args__ = (
        CheckConstraint("type IN ('hotel', 'restaurant', 'bar', 'dive', 'church')", name="ck_venues_type"),
        CheckConstraint("esrb_rating IN ('family', '21+', 'nsfw')", name="ck_venues_esrb_rating"),
    )

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    name: str
    email: Optional[str] = Field(default=None)
    phone: Optional[str] = Field(default=None)
    address: Optional[str] = Field(default=None)
    type: str = Field(max_length=32)
    esrb_rating: str = Field(max_length=16)

    # Stage and equipment
    typical_genres: List[str] = Field(default_factory=list, sa_type=JSON)
    stage_details: Dict[str, Any] = Field(default_factory=dict, sa_type=JSON)
    equipment_onsite: List[str] = Field(default_factory=list, sa_type=JSON)
    special_instructions: Optional[str] = Field(default=None)

    user_id: uuid.UUID = Field(foreign_key="users.id", ondelete="CASCADE", index=True)

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime())
    updated_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime())

    def __repr__(self) -> str:
        return f"Venue(id={self.id}, name={self.name})"
