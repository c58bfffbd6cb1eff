"""
Board Gateway - Registered Email Service
=========================================

What:  ResourceService for the `registered_emails` table (mailing list).
How:   Registration inserts only the email address; nothing else from the
       request body reaches the table.

Row-count ceiling: 60 registered emails.
"""

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from gateway.exceptions import ValidationError
from gateway.models.registered_email import RegisteredEmail
from gateway.schemas.registered_email import RegisteredEmailResponse
from gateway.services.resource_service import ResourceService

REGISTERED_EMAIL_LIMIT = 60


class RegisteredEmailService(ResourceService):

    def __init__(self):
        super().__init__(
            model=RegisteredEmail,
            response_model=RegisteredEmailResponse,
            label="registered email",
            limit=REGISTERED_EMAIL_LIMIT,
            limit_message="Total registered emails already reached its limit.",
        )

    async def register(
        self, db: AsyncSession, email: Optional[str]
    ) -> List[RegisteredEmailResponse]:
        """
        Add an email to the list.

        Raises:
            ValidationError:   Email missing (→ 400)
            LimitReachedError: 60 emails already registered (→ 400)
        """
        if not email:
            raise ValidationError(message="Email is required", field="email")
        return await self.create(db, [{"email": email}])


registered_email_service = RegisteredEmailService()
