"""
Board Gateway - Announcement Service Unit Tests
================================================

What:  Tests for the expired flag and announcement reads/writes.
"""

from datetime import datetime, timedelta, timezone

import pytest

from gateway.exceptions import LimitReachedError
from gateway.models.announcement import Announcement
from gateway.services.announcement_service import (
    ANNOUNCEMENT_LIMIT,
    announcement_service,
    compute_expired,
)

NOW = datetime(2025, 6, 30, 12, 0, tzinfo=timezone.utc)


def make_announcement(announcement_id: int, created_at: datetime) -> Announcement:
    return Announcement(
        id=announcement_id,
        title=f"Notice {announcement_id}",
        content="Board meeting moved",
        creator_id=1,
        creator_name="Admin",
        created_at=created_at,
    )


class TestComputeExpired:

    def test_fresh_announcement(self):
        assert compute_expired(NOW - timedelta(hours=1), now=NOW) == "false"

    def test_exactly_fifteen_days(self):
        assert compute_expired(NOW - timedelta(days=15), now=NOW) == "false"

    def test_fifteen_days_and_23_hours_is_not_expired(self):
        assert compute_expired(NOW - timedelta(days=15, hours=23), now=NOW) == "false"

    def test_sixteen_days_is_expired(self):
        assert compute_expired(NOW - timedelta(days=16), now=NOW) == "true"

    def test_naive_timestamp_treated_as_utc(self):
        naive = (NOW - timedelta(days=20)).replace(tzinfo=None)
        assert compute_expired(naive, now=NOW) == "true"

    def test_missing_created_at(self):
        assert compute_expired(None, now=NOW) == "false"

    def test_uses_current_time_by_default(self):
        old = datetime.now(timezone.utc) - timedelta(days=30)
        assert compute_expired(old) == "true"


class TestAnnouncementReads:

    @pytest.mark.asyncio
    async def test_list_marks_expired(self, mock_db_session, make_result):
        now = datetime.now(timezone.utc)
        mock_db_session.execute.return_value = make_result(rows=[
            make_announcement(1, now - timedelta(days=30)),
            make_announcement(2, now - timedelta(days=2)),
        ])

        result = await announcement_service.list_all(mock_db_session)

        assert [(a.id, a.expired) for a in result] == [(1, "true"), (2, "false")]

    @pytest.mark.asyncio
    async def test_get_carries_expired(self, mock_db_session, make_result):
        created = datetime.now(timezone.utc) - timedelta(days=1)
        mock_db_session.execute.return_value = make_result(one=make_announcement(4, created))

        result = await announcement_service.get(mock_db_session, 4)

        assert result.expired == "false"
        assert result.creator_name == "Admin"


class TestAnnouncementWrites:

    @pytest.mark.asyncio
    async def test_create_response_has_no_expired_flag(self, assign_ids_on_flush, make_result):
        session = assign_ids_on_flush
        session.execute.return_value = make_result(scalar=0)

        (created,) = await announcement_service.create(
            session, [{"title": "Holiday", "content": "Office closed"}]
        )

        assert created.title == "Holiday"
        assert "expired" not in created.model_dump()

    @pytest.mark.asyncio
    async def test_limit_reached(self, mock_db_session, make_result):
        mock_db_session.execute.return_value = make_result(scalar=ANNOUNCEMENT_LIMIT)

        with pytest.raises(LimitReachedError, match="Total announcements already reached its limit."):
            await announcement_service.create(mock_db_session, [{"title": "Sixth"}])
