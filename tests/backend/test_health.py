"""
Tests for health check endpoints.

These tests verify:
- Basic health endpoint returns 200
- Readiness check pings the configured profiles database
- Health degrades gracefully when MongoDB is down
"""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch


class TestHealthEndpoint:
    """Tests for GET /health endpoint."""

    @pytest.mark.asyncio
    async def test_health_endpoint_returns_200_when_api_running(self, async_client):
        """Basic health check should return 200 if API is up."""
        response = await async_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestReadinessEndpoint:
    """Tests for GET /health/ready endpoint."""

    @pytest.mark.asyncio
    async def test_readiness_pings_configured_database(self, async_client, monkeypatch):
        import app.database.connections as conn_module

        mock_client = MagicMock()
        mock_client.__getitem__.return_value.command = AsyncMock(return_value={"ok": 1})
        monkeypatch.setattr(conn_module, "_mongo_client", mock_client)

        response = await async_client.get("/health/ready")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["database"] == "profiles_db"
        assert data["checks"] == {"api": "healthy", "mongodb": "healthy"}
        mock_client.__getitem__.assert_called_with("profiles_db")
        mock_client.__getitem__.return_value.command.assert_awaited_once_with("ping")

    @pytest.mark.asyncio
    async def test_readiness_reports_mongodb_unhealthy_when_connection_fails(self, async_client):
        """Readiness should report MongoDB unhealthy when it fails."""
        with patch(
            "app.routers.health.ping_database",
            new=AsyncMock(side_effect=ConnectionError("Connection refused")),
        ):
            response = await async_client.get("/health/ready")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "degraded"
        assert data["checks"]["mongodb"] == "unhealthy: ConnectionError"

    @pytest.mark.asyncio
    async def test_readiness_reports_failed_ping(self, async_client):
        with patch("app.routers.health.ping_database", new=AsyncMock(side_effect=TimeoutError())):
            response = await async_client.get("/health/ready")

        data = response.json()
        assert data["status"] == "degraded"
        assert "unhealthy" in data["checks"]["mongodb"]
