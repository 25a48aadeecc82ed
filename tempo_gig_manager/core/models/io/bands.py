"""
Band and band member I/O models for API requests and responses.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class BandMemberRead(BaseModel):
    """Schema for reading a band member from API."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    role: str
    instrument: str
    email: Optional[str] = None
    phone: Optional[str] = None
    band_id: uuid.UUID
    created_at: datetime


class BandMemberCreate(BaseModel):
    """Schema for adding a member to a band via API."""

    band_id: uuid.UUID
    name: str = Field(min_length=1)
    role: str = Field(min_length=1, description="Role in the band (e.g. 'lead vocals')")
    instrument: str = Field(min_length=1)
    email: Optional[str] = None
    phone: Optional[str] = None


class BandRead(BaseModel):
    """Schema for reading a band profile from API."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    image: Optional[str] = None
    phone: str
    email: str
    genre: str
    equipment: List[str] = Field(default_factory=list)
    profile_picture: str
    social_links: Dict[str, str] = Field(default_factory=dict)
    user_id: uuid.UUID
    created_at: datetime
    updated_at: datetime


class BandDetail(BandRead):
    """Band profile with its member roster embedded."""

    members: List[BandMemberRead] = Field(default_factory=list)


class BandSummary(BaseModel):
    """Compact band listing entry."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    image: Optional[str] = None
    genre: str
    profile_picture: str
    created_at: datetime


class BandCreate(BaseModel):
    """Schema for creating a band profile via API."""

    name: str = Field(min_length=1)
    phone: str = Field(min_length=1)
    email: str = Field(min_length=1)
    genre: str = Field(min_length=1)
    profile_picture: str = Field(min_length=1)
    user_id: uuid.UUID
    image: Optional[str] = None
    equipment: List[str] = Field(default_factory=list)
    social_links: Dict[str, str] = Field(default_factory=dict, description="Network name to profile URL")


class BandUpdate(BaseModel):
    """Schema for updating a band profile via API."""

    id: Optional[uuid.UUID] = None
    name: Optional[str] = Field(default=None, min_length=1)
    image: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    genre: Optional[str] = None
    equipment: Optional[List[str]] = None
    profile_picture: Optional[str] = None
    social_links: Optional[Dict[str, str]] = None


class BandResponse(BaseModel):
    band: BandRead


class BandDetailResponse(BaseModel):
    band: BandDetail


class BandListResponse(BaseModel):
    bands: List[BandSummary]


class BandMemberResponse(BaseModel):
    member: BandMemberRead


class BandMemberListResponse(BaseModel):
    members: List[BandMemberRead]
