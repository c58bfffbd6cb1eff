"""
Board Gateway - User Service
=============================

What:  ResourceService for the `users` table, adding password handling.
How:   Passwords are required on create and hashed with bcrypt before any
       row is written; a password supplied on update is re-hashed.
       bcrypt is CPU-bound, so hashing runs in Starlette's threadpool to keep
       the event loop responsive.

Row-count ceiling: 10 users.
"""

import logging
from typing import Any, Dict, List

from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from gateway.exceptions import ValidationError
from gateway.models.user import User
from gateway.schemas.user import UserResponse
from gateway.security import hash_password
from gateway.services.resource_service import ResourceService

logger = logging.getLogger(__name__)

USER_LIMIT = 10


class UserService(ResourceService):
    """CRUD for users with bcrypt password hashing."""

    def __init__(self):
        super().__init__(
            model=User,
            response_model=UserResponse,
            label="user",
            limit=USER_LIMIT,
            limit_message=f"Total users cannot exceed {USER_LIMIT}.",
        )

    async def _prepare_insert(self, values: Dict[str, Any]) -> Dict[str, Any]:
        values["password"] = await run_in_threadpool(hash_password, values["password"])
        return values

    async def _prepare_update(self, changes: Dict[str, Any]) -> Dict[str, Any]:
        if changes.get("password"):
            changes["password"] = await run_in_threadpool(hash_password, changes["password"])
        else:
            # An empty or null password never overwrites the stored hash
            changes.pop("password", None)
        if not changes:
            raise ValidationError(message="No fields to update were provided.")
        return changes

    async def create_user(self, db: AsyncSession, values: Dict[str, Any]) -> List[UserResponse]:
        """
        Create one user.

        Raises:
            ValidationError:   Password missing (→ 400)
            LimitReachedError: 10 users already stored (→ 400)
        """
        if not values.get("password"):
            raise ValidationError(message="Password is required.", field="password")
        return await self.create(db, [values])

    async def create_users(
        self, db: AsyncSession, items: List[Dict[str, Any]]
    ) -> List[UserResponse]:
        """
        Create several users at once; the ceiling is checked against the
        whole batch so either all of them are inserted or none.
        """
        if not items:
            raise ValidationError(message="Request body must be a non-empty array of users.")
        if any(not item.get("password") for item in items):
            raise ValidationError(
                message="Password is required for all users.",
                field="password",
            )
        return await self.create(db, items)


user_service = UserService()
