"""
Board Gateway - Auth Request/Response Schemas
==============================================

What:  API contract for POST /v1/auth/login.
"""

from typing import Optional

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Both fields are checked by AuthService so a missing one yields a 400."""
    email: Optional[str] = Field(default=None, description="User email")
    password: Optional[str] = Field(default=None, description="User password")


class UserProjection(BaseModel):
    """
    What:  Reduced user record returned after a successful login.
    Why:   Only identity and name fields leave the service; the hash never does.
    """
    id: int
    email: str
    first_name: Optional[str] = None
    middle_name: Optional[str] = None
    last_name: Optional[str] = None
    suffix: Optional[str] = None

    model_config = {"from_attributes": True}


class LoginResponse(BaseModel):
    message: str = Field(default="Login successful")
    userData: UserProjection
