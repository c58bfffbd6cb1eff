"""
Board Gateway - Registered Email Route Handlers
================================================

What:  /v1/registered-emails endpoints (mailing list sign-ups).
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from gateway.database import get_db_session
from gateway.schemas.common import ErrorResponse, IdsPayload
from gateway.schemas.registered_email import (
    RegisteredEmailCreate,
    RegisteredEmailResponse,
    RegisteredEmailUpdate,
)
from gateway.services.registered_email_service import registered_email_service

router = APIRouter(prefix="/v1/registered-emails", tags=["RegisteredEmails"])


@router.get(
    "/get-all-registered-emails",
    response_model=List[RegisteredEmailResponse],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="Get all registered emails",
)
async def get_all_registered_emails(
    db: AsyncSession = Depends(get_db_session),
) -> List[RegisteredEmailResponse]:
    return await registered_email_service.list_all(db)


@router.get(
    "/get-registered-email/{email_id}",
    response_model=RegisteredEmailResponse,
    responses={404: {"description": "Registered email not found", "model": ErrorResponse}},
    summary="Get a registered email by ID",
)
async def get_registered_email(
    email_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> RegisteredEmailResponse:
    return await registered_email_service.get(db, email_id)


@router.post(
    "/register",
    response_model=List[RegisteredEmailResponse],
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Email missing or limit reached", "model": ErrorResponse}},
    summary="Register an email (max 60 total)",
)
async def register_email(
    payload: RegisteredEmailCreate,
    db: AsyncSession = Depends(get_db_session),
) -> List[RegisteredEmailResponse]:
    return await registered_email_service.register(db, payload.email)


@router.put(
    "/update-registered-email",
    response_model=List[RegisteredEmailResponse],
    responses={400: {"description": "Error updating", "model": ErrorResponse}},
    summary="Update a registered email",
)
async def update_registered_email(
    payload: RegisteredEmailUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> List[RegisteredEmailResponse]:
    changes = payload.model_dump(exclude_unset=True)
    email_id = changes.pop("id", None)
    return await registered_email_service.update(db, email_id, changes)


@router.delete(
    "/delete-email/{email_id}",
    response_model=List[RegisteredEmailResponse],
    responses={400: {"description": "Error deleting", "model": ErrorResponse}},
    summary="Delete a registered email by ID",
)
async def delete_email(
    email_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> List[RegisteredEmailResponse]:
    return await registered_email_service.delete(db, email_id)


@router.delete(
    "/delete-emails",
    response_model=List[RegisteredEmailResponse],
    responses={400: {"description": "Error deleting", "model": ErrorResponse}},
    summary="Delete multiple registered emails",
)
async def delete_emails(
    payload: IdsPayload,
    db: AsyncSession = Depends(get_db_session),
) -> List[RegisteredEmailResponse]:
    return await registered_email_service.delete_many(db, payload.ids)
