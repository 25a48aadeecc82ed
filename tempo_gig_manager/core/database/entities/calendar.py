"""
Calendar availability entity models.

One row per user and day marks whether the user is available to perform (or,
for venues, to host) on that date.
"""

from __future__ import annotations

import datetime as dt
import uuid

from sqlalchemy import Date, UniqueConstraint
from sqlmodel import Field

from ..base import Base, UTCDateTime, utc_now


class CalendarAvailability(Base, table=True):
    """Entity for per-day availability.

    Table: calendar_availability
    """

    __tablename__ = "calendar_availability"
    __table_args__ = (UniqueConstraint("user_id", "date", name="uq_calendar_availability_user_date"),)

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    user_id: uuid.UUID = Field(foreign_key="users.id", ondelete="CASCADE", index=True)
    date: dt.date = Field(sa_type=Date)
    is_available: bool = Field(default=True)
    created_at: dt.datetime = Field(default_factory=utc_now, sa_type=UTCDateTime())

    def __repr__(self) -> str:
        return f"CalendarAvailability(user_id={self.user_id}, date={self.date}, is_available={self.is_available})"
