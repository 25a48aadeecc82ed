"""
Artist I/O models for API requests and responses.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ArtistRead(BaseModel):
    """Schema for reading an artist profile (EPK) from API."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    genre: List[str]
    instruments: List[str]
    zip_code: Optional[str] = None
    gender: Optional[str] = None
    email_or_phone: Optional[str] = None
    preview_song: Optional[str] = None
    profile_picture: Optional[str] = None
    city_of_origin: Optional[str] = None
    open_to_work: bool
    bio: Optional[str] = None
    face_verified: bool
    user_id: uuid.UUID
    created_at: datetime
    updated_at: datetime


class ArtistCreate(BaseModel):
    """Schema for creating an artist profile via API."""

    name: str = Field(min_length=1, description="Stage name")
    genre: List[str] = Field(description="Genres performed")
    instruments: List[str] = Field(description="Instruments played")
    user_id: uuid.UUID = Field(description="Owning user account")
    zip_code: Optional[str] = None
    gender: Optional[str] = None
    email_or_phone: Optional[str] = None
    preview_song: Optional[str] = Field(default=None, description="URL of a preview track")
    profile_picture: Optional[str] = None
    city_of_origin: Optional[str] = None
    open_to_work: bool = True
    bio: Optional[str] = None


class ArtistUpdate(BaseModel):
    """Schema for updating an artist profile via API."""

    id: Optional[uuid.UUID] = None
    name: Optional[str] = Field(default=None, min_length=1)
    genre: Optional[List[str]] = None
    instruments: Optional[List[str]] = None
    zip_code: Optional[str] = None
    gender: Optional[str] = None
    email_or_phone: Optional[str] = None
    preview_song: Optional[str] = None
    profile_picture: Optional[str] = None
    city_of_origin: Optional[str] = None
    open_to_work: Optional[bool] = None
    bio: Optional[str] = None
    face_verified: Optional[bool] = None


class ArtistResponse(BaseModel):
    artist: ArtistRead


class ArtistListResponse(BaseModel):
    artists: List[ArtistRead]
