"""
User entity models.

Users are the login accounts of the marketplace. Every venue, artist and band
profile is owned by exactly one user.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import CheckConstraint
from sqlmodel import Field

from ..base import Base, UTCDateTime, utc_now


class User(Base, table=True):
    """Entity for marketplace accounts.

    ``email`` and ``phone`` are each unique; at least one of them is set by
    the API layer. ``password_hash`` is optional because social sign-ups do
    not carry a password.

    Table: users
    """

    __tablename__ = "users"
    __table_args__ = (CheckConstraint("role IN ('venue', 'artist', 'band')", name="ck_users_role"),)

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    email: Optional[str] = Field(default=None, unique=True)
    phone: Optional[str] = Field(default=None, unique=True)
    password_hash: Optional[str] = Field(default=None)
    role: str = Field(max_length=16)

    # Onboarding flags
    two_factor_enabled: bool = Field(default=False)
    face_verified: bool = Field(default=False)
    profile_completed: bool = Field(default=False)

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime())
    updated_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime())

    def __repr__(self) -> str:
        return f"User(id={self.id}, role={self.role})"
