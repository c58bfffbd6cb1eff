"""
Board Gateway - Announcement Route Handlers
============================================

What:  /v1/announcements endpoints.

Read endpoints return AnnouncementResponse (with the "true"/"false" expired
flag); write endpoints return the stored rows as AnnouncementRow.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from gateway.database import get_db_session
from gateway.schemas.announcement import (
    AnnouncementCreate,
    AnnouncementResponse,
    AnnouncementRow,
    AnnouncementUpdate,
)
from gateway.schemas.common import ErrorResponse, IdsPayload
from gateway.services.announcement_service import announcement_service

router = APIRouter(prefix="/v1/announcements", tags=["Announcements"])


@router.get(
    "/get-all-announcements",
    response_model=List[AnnouncementResponse],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="Get all announcements",
    description="List of announcements, each flagged expired when older than 15 days.",
)
async def get_all_announcements(
    db: AsyncSession = Depends(get_db_session),
) -> List[AnnouncementResponse]:
    return await announcement_service.list_all(db)


@router.get(
    "/get-announcement/{announcement_id}",
    response_model=AnnouncementResponse,
    responses={404: {"description": "Announcement not found", "model": ErrorResponse}},
    summary="Get a single announcement by ID",
)
async def get_announcement(
    announcement_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> AnnouncementResponse:
    return await announcement_service.get(db, announcement_id)


@router.post(
    "/create-announcement",
    response_model=List[AnnouncementRow],
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Validation error or limit reached", "model": ErrorResponse}},
    summary="Create a new announcement (max 5 total allowed)",
)
async def create_announcement(
    payload: AnnouncementCreate,
    db: AsyncSession = Depends(get_db_session),
) -> List[AnnouncementRow]:
    return await announcement_service.create(db, [payload.model_dump(exclude_unset=True)])


@router.put(
    "/update-announcement",
    response_model=List[AnnouncementRow],
    responses={400: {"description": "Error updating", "model": ErrorResponse}},
    summary="Update an announcement",
)
async def update_announcement(
    payload: AnnouncementUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> List[AnnouncementRow]:
    changes = payload.model_dump(exclude_unset=True)
    announcement_id = changes.pop("id", None)
    return await announcement_service.update(db, announcement_id, changes)


@router.delete(
    "/delete-announcement/{announcement_id}",
    response_model=List[AnnouncementRow],
    responses={400: {"description": "Error deleting", "model": ErrorResponse}},
    summary="Delete an announcement by ID",
)
async def delete_announcement(
    announcement_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> List[AnnouncementRow]:
    return await announcement_service.delete(db, announcement_id)


@router.delete(
    "/delete-announcements",
    response_model=List[AnnouncementRow],
    responses={400: {"description": "Error deleting", "model": ErrorResponse}},
    summary="Delete multiple announcements",
)
async def delete_announcements(
    payload: IdsPayload,
    db: AsyncSession = Depends(get_db_session),
) -> List[AnnouncementRow]:
    return await announcement_service.delete_many(db, payload.ids)
