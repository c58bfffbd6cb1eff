"""
Board Gateway - Auth Service
=============================

What:  Password login against the `users` table.
How:   Look up the user by email, compare the submitted password with the
       stored bcrypt hash, and return the reduced user projection.
Who:   Called by POST /v1/auth/login.

Login Flow:
    ┌──────────────┐    ┌──────────────┐    ┌──────────────────┐
    │ SELECT user  │───▶│ bcrypt check │───▶│ id/email/names   │
    │ by email     │    │              │    │ (no hash)        │
    └──────────────┘    └──────────────┘    └──────────────────┘
          │ none or several      │ mismatch
          ▼                      ▼
      401 Invalid email or password.

No token or session is issued; the caller keeps the returned projection.
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from gateway.exceptions import AuthenticationError, ValidationError
from gateway.models.user import User
from gateway.schemas.auth import LoginResponse, UserProjection
from gateway.security import verify_password

logger = logging.getLogger(__name__)


class AuthService:
    """Stateless login checks."""

    async def login(
        self,
        db: AsyncSession,
        email: Optional[str],
        password: Optional[str],
    ) -> LoginResponse:
        """
        Authenticate a user by email and password.

        Raises:
            ValidationError:     Email or password missing (→ 400)
            AuthenticationError: Unknown email, ambiguous email, lookup
                                 failure, or wrong password (→ 401)
        """
        if not email or not password:
            raise ValidationError(message="Email and password are required.")

        try:
            result = await db.execute(select(User).where(User.email == email).limit(2))
            users = list(result.scalars().all())
        except Exception as e:
            logger.error("Database error looking up user for login: %s", str(e))
            raise AuthenticationError(context={"error_type": type(e).__name__})

        if len(users) != 1:
            logger.info("Login failed: %d users match the submitted email", len(users))
            raise AuthenticationError()

        user = users[0]
        valid = await run_in_threadpool(verify_password, password, user.password)
        if not valid:
            logger.info("Login failed: password mismatch for user %s", user.id)
            raise AuthenticationError()

        logger.info("User %s logged in", user.id)
        return LoginResponse(
            message="Login successful",
            userData=UserProjection.model_validate(user),
        )


auth_service = AuthService()
