"""
Tests for application wiring: lifespan, root endpoint and error handlers.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from fastapi.testclient import TestClient
from httpx import AsyncClient, ASGITransport

import app.main as main_module
from app.core.errors import InternalError


class TestLifespan:
    """Startup and shutdown hooks."""

    def test_startup_creates_indexes_and_shutdown_closes(self, app):
        client = MagicMock()
        with patch("app.main.get_mongo_client", new=AsyncMock(return_value=client)), \
             patch("app.main.create_indexes", new=AsyncMock()) as create_indexes, \
             patch("app.main.close_connections", new=AsyncMock()) as close_connections:

            with TestClient(app) as test_client:
                assert test_client.get("/health").status_code == 200
                create_indexes.assert_awaited_once_with(client)
                close_connections.assert_not_awaited()

        close_connections.assert_awaited_once()

    def test_startup_survives_database_failure(self, app):
        with patch("app.main.get_mongo_client", new=AsyncMock(side_effect=ConnectionError("down"))), \
             patch("app.main.create_indexes", new=AsyncMock()) as create_indexes, \
             patch("app.main.close_connections", new=AsyncMock()):

            with TestClient(app) as test_client:
                assert test_client.get("/").status_code == 200

        create_indexes.assert_not_awaited()


class TestRootEndpoint:

    @pytest.mark.asyncio
    async def test_root_describes_api(self, async_client):
        response = await async_client.get("/")

        assert response.status_code == 200
        assert response.json()["name"] == "Profile Registry API"


class TestErrorHandlers:
    """Internal failures never leak details outside development."""

    @pytest.fixture
    def failing_service_app(self, app):
        from app.dependencies.auth import get_profile_service

        def _override(exc):
            service = MagicMock()
            service.login = AsyncMock(side_effect=exc)
            app.dependency_overrides[get_profile_service] = lambda: service
            return app

        yield _override
        app.dependency_overrides.clear()

    @pytest.mark.asyncio
    async def test_internal_error_is_generic_500(self, failing_service_app, assert_error_response):
        app = failing_service_app(InternalError("mongo exploded"))

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            response = await client.post("/api/auth/login", json={"documentId": "CC12345"})

        data = assert_error_response(response, 500, "internal server error")
        assert "error" not in data
        assert "mongo" not in response.text

    @pytest.mark.asyncio
    async def test_internal_error_detail_in_development(
        self, failing_service_app, assert_error_response
    ):
        app = failing_service_app(InternalError("mongo exploded"))

        with patch.object(main_module.settings, "environment", "development"):
            async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
                response = await client.post("/api/auth/login", json={"documentId": "CC12345"})

        data = assert_error_response(response, 500)
        assert data["error"] == "mongo exploded"

    @pytest.mark.asyncio
    async def test_unhandled_exception_is_generic_500(
        self, failing_service_app, assert_error_response
    ):
        app = failing_service_app(RuntimeError("boom"))

        transport = ASGITransport(app=app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.post("/api/auth/login", json={"documentId": "CC12345"})

        data = assert_error_response(response, 500, "internal server error")
        assert "error" not in data
