"""
Board Gateway - User Route Handlers
====================================

What:  /v1/users endpoints: list, get, create (one or many), update, delete
       (one or many).
How:   Extracts path/body data, delegates to UserService, returns JSON.
       Errors raised by the service are formatted by the global handlers.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from gateway.database import get_db_session
from gateway.schemas.common import ErrorResponse, IdsPayload
from gateway.schemas.user import UserCreate, UserResponse, UserUpdate
from gateway.services.user_service import user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/users", tags=["Users"])


@router.get(
    "/get-all-users",
    response_model=List[UserResponse],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="Get all users",
)
async def get_all_users(db: AsyncSession = Depends(get_db_session)) -> List[UserResponse]:
    return await user_service.list_all(db)


@router.get(
    "/get-user/{user_id}",
    response_model=UserResponse,
    responses={404: {"description": "User not found", "model": ErrorResponse}},
    summary="Get a single user by ID",
)
async def get_user(user_id: int, db: AsyncSession = Depends(get_db_session)) -> UserResponse:
    return await user_service.get(db, user_id)


@router.post(
    "/create-user",
    response_model=List[UserResponse],
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Validation error or user limit reached", "model": ErrorResponse}},
    summary="Create a new user (max 10 total)",
)
async def create_user(
    payload: UserCreate,
    db: AsyncSession = Depends(get_db_session),
) -> List[UserResponse]:
    """The password is hashed with bcrypt before the row is written."""
    return await user_service.create_user(db, payload.model_dump(exclude_unset=True))


@router.post(
    "/create-users",
    response_model=List[UserResponse],
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Validation error or user limit exceeded", "model": ErrorResponse}},
    summary="Create multiple users (max 10 total)",
)
async def create_users(
    payload: List[UserCreate],
    db: AsyncSession = Depends(get_db_session),
) -> List[UserResponse]:
    """
    Body is a JSON array of users. The batch is rejected as a whole when it
    would push the table past 10 users.
    """
    items = [user.model_dump(exclude_unset=True) for user in payload]
    return await user_service.create_users(db, items)


@router.put(
    "/update-user",
    response_model=List[UserResponse],
    responses={400: {"description": "Error updating", "model": ErrorResponse}},
    summary="Update a user (hash password if provided)",
)
async def update_user(
    payload: UserUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> List[UserResponse]:
    changes = payload.model_dump(exclude_unset=True)
    user_id = changes.pop("id", None)
    return await user_service.update(db, user_id, changes)


@router.delete(
    "/delete-user/{user_id}",
    response_model=List[UserResponse],
    responses={400: {"description": "Error deleting", "model": ErrorResponse}},
    summary="Delete a user by ID",
)
async def delete_user(user_id: int, db: AsyncSession = Depends(get_db_session)) -> List[UserResponse]:
    return await user_service.delete(db, user_id)


@router.delete(
    "/delete-users",
    response_model=List[UserResponse],
    responses={400: {"description": "Error deleting", "model": ErrorResponse}},
    summary="Delete multiple users by IDs",
)
async def delete_users(
    payload: IdsPayload,
    db: AsyncSession = Depends(get_db_session),
) -> List[UserResponse]:
    return await user_service.delete_many(db, payload.ids)
