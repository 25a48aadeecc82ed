"""
User I/O models for API requests and responses.

Passwords are accepted on create only and never serialized back; the stored
hash is not part of any read model.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UserRead(BaseModel):
    """Schema for reading a user account from API."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    email: Optional[str] = None
    phone: Optional[str] = None
    role: str = Field(description="Account role (venue, artist, band)")
    two_factor_enabled: bool
    face_verified: bool
    profile_completed: bool
    created_at: datetime
    updated_at: datetime


class UserCreate(BaseModel):
    """Schema for creating a user account via API.

    ``role`` is validated by the endpoint so an invalid value produces the
    same message as a missing one.
    """

    email: Optional[str] = Field(default=None, description="Login email; email or phone is required")
    phone: Optional[str] = Field(default=None, description="Login phone number")
    password: Optional[str] = Field(default=None, description="Plain-text password, stored hashed")
    role: Optional[str] = Field(default=None, description="Account role (venue, artist, band)")


class UserUpdate(BaseModel):
    """Schema for updating account flags via API."""

    id: Optional[uuid.UUID] = None
    two_factor_enabled: Optional[bool] = None
    face_verified: Optional[bool] = None
    profile_completed: Optional[bool] = None


class UserResponse(BaseModel):
    user: UserRead
