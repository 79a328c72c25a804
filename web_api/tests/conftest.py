# web_api/tests/conftest.py
"""Pytest fixtures for web API tests.

Routes are exercised through FastAPI's TestClient with authentication
overridden and database access patched, so no database or identity
provider is needed.
"""

import sys
from contextlib import ExitStack, asynccontextmanager
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

# Ensure we import from root main.py
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from main import app
from web_api.auth import get_current_user
from web_api.rate_limit import notifications_limiter

TEST_USER_ID = "8d3c1d7e-2f4b-4c7a-9b61-0f5e6d4c3b2a"


@pytest.fixture(autouse=True)
def _jwt_secret():
    """Ensure a JWT secret is set so tokens can be created and verified."""
    with patch("web_api.auth.JWT_SECRET", "test-secret"):
        yield


@pytest.fixture(autouse=True)
def _reset_rate_limits():
    notifications_limiter.reset()
    yield
    notifications_limiter.reset()


@pytest.fixture
def auth_user():
    """Decoded token payload for the mocked authenticated user."""
    return {"sub": TEST_USER_ID, "email": "pat@example.com", "aud": "authenticated"}


@pytest.fixture
def client(auth_user):
    """Create a test client with auth overridden."""

    async def override_get_current_user():
        return auth_user

    app.dependency_overrides[get_current_user] = override_get_current_user
    yield TestClient(app)
    app.dependency_overrides.pop(get_current_user, None)


@pytest.fixture
def anon_client():
    """Test client with real authentication."""
    return TestClient(app)


@pytest.fixture
def mock_conn():
    """A fake AsyncConnection handed out by get_connection/get_transaction."""
    return AsyncMock()


@pytest.fixture
def use_db(mock_conn):
    """
    Patch get_connection and get_transaction in a route module.

    Usage:
        conn = use_db("web_api.routes.appointments")
    """

    @asynccontextmanager
    async def fake_connect():
        yield mock_conn

    with ExitStack() as stack:

        def _use(module: str):
            stack.enter_context(patch(f"{module}.get_connection", fake_connect))
            stack.enter_context(patch(f"{module}.get_transaction", fake_connect))
            return mock_conn

        yield _use
