"""
Analytics event entity models.

Product analytics events sent by the client (screen views, sign-ups, gig
creation, ...). Events outlive the user that produced them.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any, Dict, Optional

from sqlalchemy import JSON
from sqlmodel import Field

from ..base import Base, UTCDateTime, utc_now


class AnalyticsEvent(Base, table=True):
    """Entity for a tracked analytics event.

    Table: analytics_events
    """

    __tablename__ = "analytics_events"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    event: str = Field(index=True)
    properties: Dict[str, Any] = Field(default_factory=dict, sa_type=JSON)
    timestamp: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime(), index=True)
    user_id: Optional[uuid.UUID] = Field(default=None, foreign_key="users.id", ondelete="SET NULL", index=True)

    def __repr__(self) -> str:
        return f"AnalyticsEvent(id={self.id}, event={self.event})"
