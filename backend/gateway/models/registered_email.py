"""
Board Gateway - Registered Email SQLAlchemy Model
==================================================

What:  ORM model representing the `registered_emails` table (mailing list sign-ups).
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, String, text
from sqlalchemy.dialects.postgresql import TIMESTAMP
from sqlalchemy.orm import Mapped, mapped_column

from gateway.database import Base


class RegisteredEmail(Base):
    __tablename__ = "registered_emails"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    def __repr__(self) -> str:
        return f"<RegisteredEmail(id={self.id}, email='{self.email}')>"
