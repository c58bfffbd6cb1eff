"""
Board Gateway - Auth Route Handlers
====================================

What:  POST /v1/auth/login.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from gateway.database import get_db_session
from gateway.schemas.auth import LoginRequest, LoginResponse
from gateway.schemas.common import ErrorResponse
from gateway.services.auth_service import auth_service

router = APIRouter(prefix="/v1/auth", tags=["Auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        400: {"description": "Missing email or password", "model": ErrorResponse},
        401: {"description": "Invalid email or password", "model": ErrorResponse},
    },
    summary="Login a user",
)
async def login(
    payload: LoginRequest,
    db: AsyncSession = Depends(get_db_session),
) -> LoginResponse:
    """
    Check an email/password pair against the stored bcrypt hash.

    Returns the user's id, email and name fields on success. No token is
    issued.
    """
    return await auth_service.login(db, payload.email, payload.password)
