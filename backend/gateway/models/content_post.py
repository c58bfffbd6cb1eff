"""
Board Gateway - Content Post SQLAlchemy Model
==============================================

What:  ORM model representing the `content_posts` table.
Who:   Used by the content ResourceService and by Alembic.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Integer, String, Text, text
from sqlalchemy.dialects.postgresql import TIMESTAMP
from sqlalchemy.orm import Mapped, mapped_column

from gateway.database import Base


class ContentPost(Base):
    """A piece of content published on the board."""

    __tablename__ = "content_posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    title: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    content: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    # Set by the service on every update unless the client supplies it
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<ContentPost(id={self.id}, title='{self.title}')>"
