"""
Board Gateway - Registered Email Request/Response Schemas
==========================================================
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class RegisteredEmailCreate(BaseModel):
    """Body of POST /v1/registered-emails/register."""
    email: Optional[str] = Field(default=None, max_length=255)

    model_config = {"extra": "forbid"}


class RegisteredEmailUpdate(RegisteredEmailCreate):
    """Body of PUT /v1/registered-emails/update-registered-email."""
    id: Optional[int] = None


class RegisteredEmailResponse(BaseModel):
    id: int
    email: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
