"""
Board Gateway - User Request/Response Schemas
==============================================

What:  API contract for the /v1/users routes.

Security:
    UserResponse deliberately has no `password` field, so the stored bcrypt
    hash can never be serialized into a response.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """
    What:  Body of POST /v1/users/create-user (and each item of create-users).

    `password` is optional here so UserService can reply with
    "Password is required." instead of a generic schema error.
    """
    username: Optional[str] = Field(default=None, max_length=100)
    email: Optional[str] = Field(default=None, max_length=255)
    password: Optional[str] = Field(default=None, max_length=255)
    first_name: Optional[str] = Field(default=None, max_length=100)
    middle_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)
    suffix: Optional[str] = Field(default=None, max_length=20)

    model_config = {"extra": "forbid"}


class UserUpdate(UserCreate):
    """
    What:  Body of PUT /v1/users/update-user. `id` selects the row; every
           other supplied field is written. A supplied password is re-hashed.
    """
    id: Optional[int] = Field(default=None, description="ID of the user to update")


class UserResponse(BaseModel):
    """Full user row minus the password hash."""
    id: int
    username: Optional[str] = None
    email: str
    first_name: Optional[str] = None
    middle_name: Optional[str] = None
    last_name: Optional[str] = None
    suffix: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
