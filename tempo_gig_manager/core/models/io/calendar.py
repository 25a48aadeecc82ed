"""
Calendar availability I/O models for API requests and responses.
"""

from __future__ import annotations

import datetime as dt
import uuid
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class AvailabilityRead(BaseModel):
    """Schema for reading a day's availability from API."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    user_id: uuid.UUID
    date: dt.date
    is_available: bool
    created_at: dt.datetime


class AvailabilitySet(BaseModel):
    """Schema for setting a day's availability via API."""

    user_id: uuid.UUID
    date: dt.date
    is_available: Optional[bool] = Field(default=None, description="Defaults to true when omitted or null")


class AvailabilityResponse(BaseModel):
    availability: AvailabilityRead


class AvailabilityListResponse(BaseModel):
    availability: List[AvailabilityRead]
