"""
Global test fixtures for the Profile Registry.

This module provides shared fixtures for all tests including:
- Required environment (JWT secret) set before the app is imported
- Mock MongoDB (mongomock-motor) with the real indexes
- Registration payload factories
- FastAPI async test client wired to the mock database
"""

import os
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest
import pytest_asyncio

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

# Settings refuse to load without a secret
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("MONGO_DB_NAME", "profiles_db")
os.environ.setdefault("ENVIRONMENT", "test")


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.
    """
    try:
        from mongomock_motor import AsyncMongoMockClient
        client = AsyncMongoMockClient()
        yield client
        client.close()
    except ImportError:
        pytest.skip("mongomock-motor not installed")


@pytest_asyncio.fixture
async def mock_profiles_db(mock_async_mongo_client):
    """Provide mock profiles database with the same indexes as the app."""
    from app.database.databases.profiles_db import create_profile_indexes

    db = mock_async_mongo_client["profiles_db"]
    await create_profile_indexes(db)
    yield db


# =============================================================================
# Profile Fixtures
# =============================================================================

@pytest.fixture
def registration_payload() -> dict:
    """A valid registration body as the form submits it."""
    return {
        "fullName": "  ana maria lopez ",
        "documentId": "CC12345",
        "phone": "3001234567",
        "email": "ANA@X.com",
        "profession": "ingeniera",
        "city": "bogota",
        "department": "CUNDINAMARCA",
        "academicLevel": "Pregrado",
        "consentGiven": True,
    }


@pytest.fixture
def make_registration_payload(registration_payload):
    """Factory for registration bodies with overridden fields."""
    def _make(**overrides) -> dict:
        payload = dict(registration_payload)
        payload.update(overrides)
        return payload
    return _make


@pytest.fixture
def stored_profile_document() -> dict:
    """A profile document as stored in MongoDB (before insert)."""
    now = datetime.now(timezone.utc)
    return {
        "full_name": "Ana Maria Lopez",
        "document_id": "CC12345",
        "phone": "3001234567",
        "email": "ana@x.com",
        "profession": "Ingeniera",
        "city": "Bogota",
        "department": "CUNDINAMARCA",
        "academic_level": "Pregrado",
        "consent_given": True,
        "registered_at": now,
        "last_seen_at": now,
        "is_active": True,
    }


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app():
    """
    FastAPI app for testing.

    Note: This imports the actual app; use with the mocked service below.
    """
    from app.main import app
    return app


@pytest_asyncio.fixture
async def async_client(app, mock_profiles_db):
    """
    Async test client whose ProfileService uses the mock database.

    ASGITransport does not run the lifespan, so no real MongoDB is touched.
    """
    from httpx import AsyncClient, ASGITransport

    from app.dependencies.auth import get_profile_service
    from app.services.profile_service import ProfileService

    async def _service():
        return ProfileService(mock_profiles_db)

    app.dependency_overrides[get_profile_service] = _service
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


def bearer(token: str) -> dict:
    """Authorization header for a token."""
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_header():
    return bearer
