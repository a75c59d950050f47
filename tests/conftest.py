"""
Pytest configuration and shared fixtures.
"""

import pytest
from fastapi.testclient import TestClient

from calcbox.api.catalog import get_favorites_store
from calcbox.favorites import InMemoryFavoritesStore
from calcbox.main import app


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow")
    config.addinivalue_line("markers", "integration: marks integration tests")


@pytest.fixture
def favorites_store():
    """Fresh favorites store per test."""
    return InMemoryFavoritesStore()


@pytest.fixture(autouse=True)
def override_favorites(favorites_store):
    """Route the API's favorites dependency to the per-test store."""
    app.dependency_overrides[get_favorites_store] = lambda: favorites_store
    yield
    app.dependency_overrides.pop(get_favorites_store, None)


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)
