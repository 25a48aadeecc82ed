"""
Analytics I/O models for API requests and responses.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class AnalyticsEventRead(BaseModel):
    """Schema for reading a tracked event from API."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    event: str
    properties: Dict[str, Any] = Field(default_factory=dict)
    timestamp: datetime
    user_id: Optional[uuid.UUID] = None


class AnalyticsEventCreate(BaseModel):
    """Schema for tracking an event via API."""

    event: Optional[str] = Field(default=None, description="Event name, e.g. 'gig_created'")
    properties: Optional[Dict[str, Any]] = Field(default=None, description="Event properties; null means none")
    user_id: Optional[uuid.UUID] = None


class EventCount(BaseModel):
    event: str
    count: int


class AnalyticsEventResponse(BaseModel):
    event: AnalyticsEventRead


class AnalyticsEventListResponse(BaseModel):
    events: List[AnalyticsEventRead]


class AnalyticsSummaryResponse(BaseModel):
    summary: List[EventCount]
