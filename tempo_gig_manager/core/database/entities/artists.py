"""
Artist entity models.

An artist is a solo performer profile (the EPK). Each user owns at most one
artist profile.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import List, Optional

from sqlalchemy import JSON
from sqlmodel import Field

from ..base import Base, UTCDateTime, utc_now


class Artist(Base, table=True):
    """Entity for artist profiles.

    Table: artists
    """

    __tablename__ = "artists"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    name: str
    genre: List[str] = Field(sa_type=JSON)
    instruments: List[str] = Field(sa_type=JSON)
    zip_code: Optional[str] = Field(default=None)
    gender: Optional[str] = Field(default=None)
    email_or_phone: Optional[str] = Field(default=None)
    preview_song: Optional[str] = Field(default=None)
    profile_picture: Optional[str] = Field(default=None)
    city_of_origin: Optional[str] = Field(default=None)
    open_to_work: bool = Field(default=True, index=True)
    bio: Optional[str] = Field(default=None)
    face_verified: bool = Field(default=False)

    user_id: uuid.UUID = Field(foreign_key="users.id", ondelete="CASCADE", index=True)

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime())
    updated_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime())

    def __repr__(self) -> str:
        return f"Artist(id={self.id}, name={self.name})"
