"""
Board Gateway - Content Post Request/Response Schemas
======================================================

What:  API contract for the /v1/content routes.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ContentPostCreate(BaseModel):
    """Body of POST /v1/content/create-post."""
    title: Optional[str] = Field(default=None, max_length=255)
    description: Optional[str] = None
    content: Optional[str] = None

    model_config = {"extra": "forbid"}


class ContentPostUpdate(ContentPostCreate):
    """Body of PUT /v1/content/update-post."""
    id: Optional[int] = Field(default=None, description="ID of the content post to update")
    updated_at: Optional[datetime] = Field(
        default=None,
        description="Defaults to the time of the update when omitted",
    )


class ContentPostResponse(BaseModel):
    id: int
    title: Optional[str] = None
    description: Optional[str] = None
    content: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
