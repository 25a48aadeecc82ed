"""
Band entity models.

This module contains the band profile table and its member roster.
Members are removed together with their band.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Dict, List, Optional

from sqlalchemy import JSON
from sqlmodel import Field

from ..base import Base, UTCDateTime, utc_now


class Band(Base, table=True):
    """Entity for band profiles.

    Table: bands
    """

    __tablename__ = "bands"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    name: str
    image: Optional[str] = Field(default=None)
    phone: str
    email: str
    genre: str
    equipment: List[str] = Field(default_factory=list, sa_type=JSON)
    profile_picture: str
    social_links: Dict[str, str] = Field(default_factory=dict, sa_type=JSON)

    user_id: uuid.UUID = Field(foreign_key="users.id", ondelete="CASCADE", index=True)

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime())
    updated_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime())

    def __repr__(self) -> str:
        return f"Band(id={self.id}, name={self.name})"


class BandMember(Base, table=True):
    """Entity for a single member of a band roster.

    Table: band_members
    """

    __tablename__ = "band_members"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    name: str
    role: str
    instrument: str
    email: Optional[str] = Field(default=None)
    phone: Optional[str] = Field(default=None)

    band_id: uuid.UUID = Field(foreign_key="bands.id", ondelete="CASCADE", index=True)

    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime())

    def __repr__(self) -> str:
        return f"BandMember(id={self.id}, name={self.name}, band_id={self.band_id})"
