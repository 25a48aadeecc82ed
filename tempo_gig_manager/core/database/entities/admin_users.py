"""
Admin account entity models.

Admin accounts are separate from marketplace users and are only used to sign
in to the admin dashboard.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base, UTCDateTime, utc_now


class AdminUser(Base, table=True):
    """Entity for admin dashboard accounts.

    Table: admin_users
    """

    __tablename__ = "admin_users"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    username: str = Field(unique=True)
    password_hash: str
    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime())
    last_login: Optional[datetime] = Field(default=None, sa_type=UTCDateTime())

    def __repr__(self) -> str:
        return f"AdminUser(username={self.username})"
