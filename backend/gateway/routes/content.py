"""
Board Gateway - Content Post Route Handlers
============================================

What:  /v1/content endpoints over the `content_posts` table.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from gateway.database import get_db_session
from gateway.schemas.common import ErrorResponse, IdsPayload
from gateway.schemas.content import ContentPostCreate, ContentPostResponse, ContentPostUpdate
from gateway.services.content_service import content_service

router = APIRouter(prefix="/v1/content", tags=["ContentPosts"])


@router.get(
    "/get-all-contents",
    response_model=List[ContentPostResponse],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="Get all content posts",
)
async def get_all_contents(db: AsyncSession = Depends(get_db_session)) -> List[ContentPostResponse]:
    return await content_service.list_all(db)


@router.get(
    "/get-content/{post_id}",
    response_model=ContentPostResponse,
    responses={404: {"description": "Content post not found", "model": ErrorResponse}},
    summary="Get a single content post by ID",
)
async def get_content(post_id: int, db: AsyncSession = Depends(get_db_session)) -> ContentPostResponse:
    return await content_service.get(db, post_id)


@router.post(
    "/create-post",
    response_model=List[ContentPostResponse],
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Validation error or limit reached", "model": ErrorResponse}},
    summary="Create a new content post (max 5 allowed)",
)
async def create_post(
    payload: ContentPostCreate,
    db: AsyncSession = Depends(get_db_session),
) -> List[ContentPostResponse]:
    return await content_service.create(db, [payload.model_dump(exclude_unset=True)])


@router.put(
    "/update-post",
    response_model=List[ContentPostResponse],
    responses={400: {"description": "Error updating", "model": ErrorResponse}},
    summary="Update a content post",
)
async def update_post(
    payload: ContentPostUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> List[ContentPostResponse]:
    changes = payload.model_dump(exclude_unset=True)
    post_id = changes.pop("id", None)
    return await content_service.update(db, post_id, changes)


@router.delete(
    "/delete-post/{post_id}",
    response_model=List[ContentPostResponse],
    responses={400: {"description": "Error deleting", "model": ErrorResponse}},
    summary="Delete a content post by ID",
)
async def delete_post(post_id: int, db: AsyncSession = Depends(get_db_session)) -> List[ContentPostResponse]:
    return await content_service.delete(db, post_id)


@router.delete(
    "/delete-posts",
    response_model=List[ContentPostResponse],
    responses={400: {"description": "Error deleting", "model": ErrorResponse}},
    summary="Delete multiple content posts",
)
async def delete_posts(
    payload: IdsPayload,
    db: AsyncSession = Depends(get_db_session),
) -> List[ContentPostResponse]:
    return await content_service.delete_many(db, payload.ids)
