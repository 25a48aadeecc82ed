"""
Venue I/O models for API requests and responses.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..domain import EsrbRating, VenueType


class VenueRead(BaseModel):
    """Schema for reading a venue profile from API."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    type: str
    esrb_rating: str
    typical_genres: List[str] = Field(default_factory=list)
    stage_details: Dict[str, Any] = Field(default_factory=dict)
    equipment_onsite: List[str] = Field(default_factory=list)
    special_instructions: Optional[str] = None
    user_id: uuid.UUID
    created_at: datetime
    updated_at: datetime


class VenueCreate(BaseModel):
    """Schema for creating a venue profile via API."""

    model_config = ConfigDict(use_enum_values=True)

    name: str = Field(min_length=1, description="Venue name")
    type: VenueType = Field(description="Venue type (hotel, restaurant, bar, dive, church)")
    esrb_rating: EsrbRating = Field(description="Audience rating (family, 21+, nsfw)")
    user_id: uuid.UUID = Field(description="Owning user account")
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    typical_genres: List[str] = Field(default_factory=list)
    stage_details: Dict[str, Any] = Field(default_factory=dict, description="Stage size, power, lighting, ...")
    equipment_onsite: List[str] = Field(default_factory=list)
    special_instructions: Optional[str] = None


class VenueUpdate(BaseModel):
    """Schema for updating a venue profile via API."""

    model_config = ConfigDict(use_enum_values=True)

    id: Optional[uuid.UUID] = None
    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    type: Optional[VenueType] = None
    esrb_rating: Optional[EsrbRating] = None
    typical_genres: Optional[List[str]] = None
    stage_details: Optional[Dict[str, Any]] = None
    equipment_onsite: Optional[List[str]] = None
    special_instructions: Optional[str] = None


class VenueResponse(BaseModel):
    venue: VenueRead


class VenueListResponse(BaseModel):
    venues: List[VenueRead]
