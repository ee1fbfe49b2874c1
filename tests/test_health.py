"""
Tests for the health check endpoint and database start-up wait.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from catalog.storage import db


def _engine(connection_error=None):
    engine = MagicMock()
    if connection_error is not None:
        engine.connect.side_effect = connection_error
    else:
        engine.connect.return_value.__aenter__.return_value = AsyncMock()
    return engine


class TestHealthEndpoint:
    """Tests for GET /health."""

    def test_healthy(self, client, monkeypatch):
        monkeypatch.setattr("catalog.api.http.health.engine", _engine())

        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "database": "healthy"}

    def test_database_unreachable(self, client, monkeypatch):
        """Test that an unreachable database is reported as 503."""
        monkeypatch.setattr(
            "catalog.api.http.health.engine",
            _engine(OSError("connection refused")),
        )

        response = client.get("/health")

        assert response.status_code == 503
        assert response.json() == {
            "status": "unhealthy",
            "database": "unhealthy",
        }


class TestWaitAndInitDb:
    """Tests for wait_and_init_db."""

    @pytest.mark.asyncio
    async def test_database_ready(self, monkeypatch):
        monkeypatch.setattr(db, "engine", _engine())

        await db.wait_and_init_db(retry_interval=0, max_retries=1)

    @pytest.mark.asyncio
    async def test_gives_up_after_max_retries(self, monkeypatch):
        engine = _engine(OperationalError("SELECT 1", {}, Exception("down")))
        monkeypatch.setattr(db, "engine", engine)
        with pytest.raises(RuntimeError):
            await db.wait_and_init_db(retry_interval=0, max_retries=3)

        assert engine.connect.call_count == 3
