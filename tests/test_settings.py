"""
Tests for environment-driven settings.
"""

import pytest
from pydantic import ValidationError

from catalog.settings import Settings


def _settings(**overrides):
    return Settings(DB_USER="library", DB_PASSWORD="s3cret", **overrides)


class TestSettings:
    def test_database_url(self):
        settings = _settings(DB_HOST="db", DB_PORT=6543, DB_NAME="books")

        assert (
            settings.DATABASE_URL
            == "postgresql+asyncpg://library:s3cret@db:6543/books"
        )

    def test_password_is_not_shown(self):
        assert "s3cret" not in repr(_settings())

    def test_log_level_is_uppercased(self):
        assert _settings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"

    def test_unknown_log_level(self):
        with pytest.raises(ValidationError):
            _settings(LOG_LEVEL="verbose")

    @pytest.mark.parametrize(
        "environment,expected",
        [("development", True), ("production", False), ("testing", False)],
    )
    def test_show_error_details(self, environment, expected):
        assert _settings(ENVIRONMENT=environment).show_error_details is expected

    def test_default_environment_hides_error_details(self, monkeypatch):
        """Test that error details stay hidden unless development is chosen."""
        monkeypatch.delenv("ENVIRONMENT", raising=False)

        settings = _settings()

        assert settings.ENVIRONMENT == "production"
        assert settings.show_error_details is False
