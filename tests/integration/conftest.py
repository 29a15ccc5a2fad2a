"""
Integration test fixtures.

These tests require a running backend and MongoDB.
Mark with @pytest.mark.integration to skip in normal test runs.
"""
import os
import time

import pytest


@pytest.fixture
def live_backend_url():
    """Get base URL for live backend tests (if running)."""
    return os.getenv("BACKEND_URL", "http://localhost:8000")


@pytest.fixture
def test_timeout():
    """Timeout for network requests in integration tests."""
    return 30


@pytest.fixture
def unique_registration():
    """A valid registration body with a document id and email unused so far."""
    stamp = str(int(time.time() * 1000))[-12:]
    return {
        "fullName": "integration tester",
        "documentId": f"IT{stamp}",
        "phone": "3001234567",
        "email": f"integration_{stamp}@test.com",
        "profession": "tester",
        "city": "medellin",
        "department": "ANTIOQUIA",
        "academicLevel": "Profesional",
        "consentGiven": True,
    }
