"""
Board Gateway - Announcement Service
=====================================

What:  ResourceService for the `announcements` table with the derived
       `expired` flag on reads.

Expired Flag:
    age_days = whole days elapsed between created_at and now (floored)
    expired  = "true" if age_days > 15 else "false"

    So an announcement created exactly 15 days and 23 hours ago is still
    "false"; it flips to "true" once 16 whole days have passed. Timestamps
    without timezone information are treated as UTC.

Row-count ceiling: 5 announcements.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from gateway.models.announcement import Announcement
from gateway.schemas.announcement import AnnouncementResponse, AnnouncementRow
from gateway.services.resource_service import ResourceService

ANNOUNCEMENT_LIMIT = 5
EXPIRY_DAYS = 15


def compute_expired(created_at: Optional[datetime], now: Optional[datetime] = None) -> str:
    """
    Return "true" when more than EXPIRY_DAYS whole days separate created_at
    from now, else "false". A missing created_at is never expired.
    """
    if created_at is None:
        return "false"
    now = now or datetime.now(timezone.utc)
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    # timedelta.days floors, matching whole elapsed days
    age_days = (now - created_at).days
    return "true" if age_days > EXPIRY_DAYS else "false"


class AnnouncementService(ResourceService):
    """CRUD for announcements; reads carry the expired flag."""

    def __init__(self):
        super().__init__(
            model=Announcement,
            response_model=AnnouncementRow,
            label="announcement",
            limit=ANNOUNCEMENT_LIMIT,
            limit_message="Total announcements already reached its limit.",
        )

    def _to_read_response(self, row: Any) -> AnnouncementResponse:
        data = AnnouncementRow.model_validate(row).model_dump()
        return AnnouncementResponse(**data, expired=compute_expired(row.created_at))


announcement_service = AnnouncementService()
