"""
Board Gateway - Announcement SQLAlchemy Model
==============================================

What:  ORM model representing the `announcements` table.
Who:   Used by AnnouncementService and by Alembic.

Table Notes:
    - created_at drives the derived `expired` flag (computed at read time,
      never stored)
    - content_post_id optionally links the announcement to a content post
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Integer, String, Text, text
from sqlalchemy.dialects.postgresql import TIMESTAMP
from sqlalchemy.orm import Mapped, mapped_column

from gateway.database import Base


class Announcement(Base):
    """A time-limited notice shown on the board."""

    __tablename__ = "announcements"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    content_post_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    title: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    content: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    creator_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    creator_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
        comment="Age of the announcement is measured from this timestamp",
    )

    updated_at: Mapped[Optional[datetime]] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<Announcement(id={self.id}, title='{self.title}', created_at='{self.created_at}')>"
