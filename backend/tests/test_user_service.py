"""
Board Gateway - User Service Unit Tests
========================================

What:  Tests for user creation, password hashing and the 10-user ceiling.
How:   Mock DB session; bcrypt runs for real at the minimum cost factor.
"""

import pytest
from sqlalchemy.dialects import postgresql

from gateway.exceptions import LimitReachedError, ValidationError
from gateway.security import verify_password
from gateway.services.user_service import USER_LIMIT, user_service


def inserted_rows(session):
    """Objects handed to session.add_all() by the service."""
    return [obj for call in session.add_all.call_args_list for obj in call.args[0]]


class TestCreateUser:

    @pytest.mark.asyncio
    async def test_password_required(self, mock_db_session):
        with pytest.raises(ValidationError, match="Password is required."):
            await user_service.create_user(mock_db_session, {"email": "a@example.com"})
        mock_db_session.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_empty_password_rejected(self, mock_db_session):
        with pytest.raises(ValidationError):
            await user_service.create_user(
                mock_db_session, {"email": "a@example.com", "password": ""}
            )

    @pytest.mark.asyncio
    async def test_password_is_hashed_before_insert(self, assign_ids_on_flush, make_result):
        session = assign_ids_on_flush
        session.execute.return_value = make_result(scalar=0)

        await user_service.create_user(
            session, {"email": "a@example.com", "password": "s3cret", "first_name": "Ada"}
        )

        (row,) = inserted_rows(session)
        assert row.password != "s3cret"
        assert row.password.startswith("$2")
        assert verify_password("s3cret", row.password)

    @pytest.mark.asyncio
    async def test_response_has_no_password(self, assign_ids_on_flush, make_result):
        session = assign_ids_on_flush
        session.execute.return_value = make_result(scalar=3)

        (created,) = await user_service.create_user(
            session, {"email": "a@example.com", "password": "s3cret"}
        )

        assert created.id == 1
        assert created.email == "a@example.com"
        assert "password" not in created.model_dump()

    @pytest.mark.asyncio
    async def test_limit_reached(self, mock_db_session, make_result):
        mock_db_session.execute.return_value = make_result(scalar=USER_LIMIT)

        with pytest.raises(LimitReachedError, match="Total users cannot exceed 10."):
            await user_service.create_user(
                mock_db_session, {"email": "a@example.com", "password": "s3cret"}
            )
        mock_db_session.add_all.assert_not_called()


class TestCreateUsers:

    @pytest.mark.asyncio
    async def test_empty_batch_rejected(self, mock_db_session):
        with pytest.raises(ValidationError, match="non-empty array"):
            await user_service.create_users(mock_db_session, [])

    @pytest.mark.asyncio
    async def test_every_user_needs_a_password(self, mock_db_session):
        items = [
            {"email": "a@example.com", "password": "one"},
            {"email": "b@example.com"},
        ]
        with pytest.raises(ValidationError, match="Password is required for all users."):
            await user_service.create_users(mock_db_session, items)

    @pytest.mark.asyncio
    async def test_batch_checked_against_ceiling_as_a_whole(self, mock_db_session, make_result):
        # 8 stored + 3 requested > 10, so nothing is inserted
        mock_db_session.execute.return_value = make_result(scalar=8)
        items = [{"email": f"u{i}@example.com", "password": "pw"} for i in range(3)]

        with pytest.raises(LimitReachedError) as exc_info:
            await user_service.create_users(mock_db_session, items)

        assert exc_info.value.context["requested"] == 3
        mock_db_session.add_all.assert_not_called()

    @pytest.mark.asyncio
    async def test_batch_filling_the_table_exactly(self, assign_ids_on_flush, make_result):
        session = assign_ids_on_flush
        session.execute.return_value = make_result(scalar=8)
        items = [{"email": f"u{i}@example.com", "password": "pw"} for i in range(2)]

        result = await user_service.create_users(session, items)

        assert [u.email for u in result] == ["u0@example.com", "u1@example.com"]
        assert all(verify_password("pw", row.password) for row in inserted_rows(session))


class TestUpdateUser:

    @pytest.mark.asyncio
    async def test_password_is_rehashed(self, mock_db_session, make_result):
        mock_db_session.execute.return_value = make_result(rows=[])

        await user_service.update(mock_db_session, 1, {"password": "new-pass"})

        stmt = mock_db_session.execute.await_args.args[0]
        stored = stmt.compile(dialect=postgresql.dialect()).params["password"]
        assert stored != "new-pass"
        assert verify_password("new-pass", stored)

    @pytest.mark.asyncio
    async def test_null_password_is_ignored(self, mock_db_session, make_result):
        mock_db_session.execute.return_value = make_result(rows=[])

        await user_service.update(mock_db_session, 1, {"first_name": "Grace", "password": None})

        stmt = mock_db_session.execute.await_args.args[0]
        params = stmt.compile(dialect=postgresql.dialect()).params
        assert params["first_name"] == "Grace"
        assert "password" not in params

    @pytest.mark.asyncio
    async def test_only_empty_password_is_rejected(self, mock_db_session):
        with pytest.raises(ValidationError, match="No fields to update"):
            await user_service.update(mock_db_session, 1, {"password": ""})
        mock_db_session.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_id(self, mock_db_session):
        with pytest.raises(ValidationError, match="User ID is required in the request body."):
            await user_service.update(mock_db_session, None, {"first_name": "Grace"})
