"""
Board Gateway - Auth Service Unit Tests
========================================

What:  Tests for email/password login.
"""

import pytest
from sqlalchemy.exc import OperationalError

from gateway.exceptions import AuthenticationError, ValidationError
from gateway.models.user import User
from gateway.security import hash_password
from gateway.services.auth_service import auth_service


@pytest.fixture
def stored_user():
    return User(
        id=3,
        username="ada",
        email="ada@example.com",
        password=hash_password("correct horse"),
        first_name="Ada",
        middle_name=None,
        last_name="Lovelace",
        suffix=None,
    )


class TestLogin:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("email,password", [
        (None, "pw"),
        ("ada@example.com", None),
        ("", ""),
    ])
    async def test_missing_credentials(self, mock_db_session, email, password):
        with pytest.raises(ValidationError, match="Email and password are required."):
            await auth_service.login(mock_db_session, email, password)
        mock_db_session.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_email(self, mock_db_session, make_result):
        mock_db_session.execute.return_value = make_result(rows=[])

        with pytest.raises(AuthenticationError) as exc_info:
            await auth_service.login(mock_db_session, "nobody@example.com", "pw")
        assert exc_info.value.status_code == 401
        assert exc_info.value.message == "Invalid email or password."

    @pytest.mark.asyncio
    async def test_ambiguous_email(self, mock_db_session, make_result, stored_user):
        mock_db_session.execute.return_value = make_result(rows=[stored_user, stored_user])

        with pytest.raises(AuthenticationError):
            await auth_service.login(mock_db_session, "ada@example.com", "correct horse")

    @pytest.mark.asyncio
    async def test_wrong_password(self, mock_db_session, make_result, stored_user):
        mock_db_session.execute.return_value = make_result(rows=[stored_user])

        with pytest.raises(AuthenticationError):
            await auth_service.login(mock_db_session, "ada@example.com", "wrong")

    @pytest.mark.asyncio
    async def test_lookup_failure_is_authentication_error(self, mock_db_session):
        mock_db_session.execute.side_effect = OperationalError("SELECT", {}, Exception("down"))

        with pytest.raises(AuthenticationError):
            await auth_service.login(mock_db_session, "ada@example.com", "pw")

    @pytest.mark.asyncio
    async def test_success_returns_projection(self, mock_db_session, make_result, stored_user):
        mock_db_session.execute.return_value = make_result(rows=[stored_user])

        result = await auth_service.login(mock_db_session, "ada@example.com", "correct horse")

        assert result.message == "Login successful"
        assert result.userData.model_dump() == {
            "id": 3,
            "email": "ada@example.com",
            "first_name": "Ada",
            "middle_name": None,
            "last_name": "Lovelace",
            "suffix": None,
        }
