"""Fixtures for HTTP API tests."""

from __future__ import annotations

import pytest
from starlette.testclient import TestClient

from phantommask.server.app import create_app


@pytest.fixture
def client():
    """TestClient for a fresh app instance."""
    with TestClient(create_app()) as test_client:
        yield test_client
