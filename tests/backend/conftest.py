"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with backend-specific helpers
for testing the store, the service and the FastAPI routes.
"""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))


# =============================================================================
# Store / Service Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def profile_store(mock_profiles_db):
    """ProfileStore over the mock database."""
    from app.database.profile_store import ProfileStore
    return ProfileStore(mock_profiles_db)


@pytest_asyncio.fixture
async def profile_service(mock_profiles_db):
    """ProfileService over the mock database."""
    from app.services.profile_service import ProfileService
    return ProfileService(mock_profiles_db)


@pytest_asyncio.fixture
async def registered(profile_service, registration_payload):
    """A profile registered through the service, as an AuthResult."""
    return await profile_service.register(registration_payload)


@pytest.fixture
def mock_profile_store():
    """
    Create a fully mocked ProfileStore.

    All methods are AsyncMock, allowing you to configure return values:

        mock_profile_store.count_active.return_value = 3
    """
    store = MagicMock()
    store.find_by_id = AsyncMock(return_value=None)
    store.find_by_document_id = AsyncMock(return_value=None)
    store.find_by_email = AsyncMock(return_value=None)
    store.find_active_by_document_id = AsyncMock(return_value=None)
    store.insert = AsyncMock()
    store.update_by_id = AsyncMock()
    store.count_active = AsyncMock(return_value=0)
    store.count_created_since = AsyncMock(return_value=0)
    return store


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert error response structure."""
    def _assert(response, status_code: int, message_contains: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert data["success"] is False
        assert "message" in data
        if message_contains:
            assert message_contains.lower() in data["message"].lower()
        return data
    return _assert
