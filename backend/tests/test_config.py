"""
Board Gateway - Settings Tests
===============================
"""

import logging

import pytest
from pydantic import ValidationError as PydanticValidationError

from gateway.config import DEFAULT_DATABASE_URL, Settings
from gateway.middleware.logging import level_for_status


class TestSettings:

    def test_defaults(self, monkeypatch):
        for name in ("DATABASE_URL", "ENVIRONMENT", "LOG_LEVEL", "BCRYPT_ROUNDS"):
            monkeypatch.delenv(name, raising=False)

        s = Settings(_env_file=None)

        assert s.database_url == DEFAULT_DATABASE_URL
        assert s.backend_port == 3000
        assert s.bcrypt_rounds == 10
        assert s.docs_url == "/api-docs"
        assert s.cors_origins_list == ["*"]

    def test_log_level_normalized(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, log_level="LOUD")

    def test_invalid_environment(self):
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, environment="staging")

    def test_bcrypt_rounds_bounds(self):
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, bcrypt_rounds=3)

    def test_cors_origins_split(self):
        s = Settings(_env_file=None, cors_origins="https://a.example, https://b.example,")
        assert s.cors_origins_list == ["https://a.example", "https://b.example"]


class TestProductionValidation:

    def test_development_defaults_pass(self):
        Settings(_env_file=None, environment="development").validate_required_for_production()

    def test_production_rejects_default_url_and_wildcard_cors(self):
        s = Settings(_env_file=None, environment="production", database_url=DEFAULT_DATABASE_URL)

        with pytest.raises(ValueError) as exc_info:
            s.validate_required_for_production()

        message = str(exc_info.value)
        assert "local default" in message
        assert "CORS_ORIGINS" in message

    def test_sync_driver_rejected(self):
        s = Settings(_env_file=None, database_url="postgresql://u:p@db.example:5432/postgres")

        with pytest.raises(ValueError, match="asyncpg"):
            s.validate_required_for_production()

    def test_production_configured(self):
        Settings(
            _env_file=None,
            environment="production",
            database_url="postgresql+asyncpg://u:p@db.example:6543/postgres",
            cors_origins="https://board.example",
        ).validate_required_for_production()


@pytest.mark.parametrize("status,level", [
    (200, logging.INFO),
    (201, logging.INFO),
    (404, logging.WARNING),
    (400, logging.WARNING),
    (500, logging.ERROR),
    (503, logging.ERROR),
])
def test_access_log_level_for_status(status, level):
    assert level_for_status(status) == level
