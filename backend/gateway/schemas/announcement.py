"""
Board Gateway - Announcement Request/Response Schemas
======================================================

What:  API contract for the /v1/announcements routes.

Expired flag:
    AnnouncementResponse carries `expired` as the string literal "true" or
    "false" (not a JSON boolean). Frontends compare against those strings.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field


class AnnouncementCreate(BaseModel):
    """Body of POST /v1/announcements/create-announcement."""
    content_post_id: Optional[int] = None
    title: Optional[str] = Field(default=None, max_length=255)
    content: Optional[str] = None
    creator_id: Optional[int] = None
    creator_name: Optional[str] = Field(default=None, max_length=255)

    model_config = {"extra": "forbid"}


class AnnouncementUpdate(AnnouncementCreate):
    """Body of PUT /v1/announcements/update-announcement."""
    id: Optional[int] = Field(default=None, description="ID of the announcement to update")
    updated_at: Optional[datetime] = None


class AnnouncementRow(BaseModel):
    """Announcement as stored, returned by write endpoints."""
    id: int
    content_post_id: Optional[int] = None
    title: Optional[str] = None
    content: Optional[str] = None
    creator_id: Optional[int] = None
    creator_name: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class AnnouncementResponse(AnnouncementRow):
    """Announcement as read, with the derived expired flag."""
    expired: Literal["true", "false"] = Field(
        description='"true" when more than 15 whole days have passed since created_at'
    )
