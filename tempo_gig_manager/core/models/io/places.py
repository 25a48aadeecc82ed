"""
Google Maps proxy I/O models.

Upstream responses are passed through untouched, so only the address
validation request body is modeled.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class AddressValidationRequest(BaseModel):
    address_lines: Optional[List[str]] = Field(default=None, description="Street address lines")
    region_code: Optional[str] = Field(default=None, description="CLDR region code, e.g. 'US'")
