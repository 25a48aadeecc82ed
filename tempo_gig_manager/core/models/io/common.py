"""
Shared I/O models for API responses.
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, Field


class OkResponse(BaseModel):
    """Acknowledgement returned by delete endpoints."""

    ok: bool = True
    message: Optional[str] = Field(default=None, description="Human-readable outcome")


class ErrorResponse(BaseModel):
    """Body of every non-2xx response."""

    error: str = Field(description="Error message")
    details: Optional[List[Any]] = Field(default=None, description="Validation failure details")
    error_id: Optional[str] = Field(default=None, description="Reference for server-side logs")
