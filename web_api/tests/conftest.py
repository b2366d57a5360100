# web_api/tests/conftest.py
"""Pytest fixtures for web API tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from main import app
from web_api.auth import get_optional_user

TEST_USER = {"sub": "4f0c7a52-6a8e-4a63-9c7e-1f2b3c4d5e6f", "role": "authenticated"}


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def mock_auth():
    """Requests are made as a signed-in user."""
    app.dependency_overrides[get_optional_user] = lambda: TEST_USER
    yield TEST_USER
    app.dependency_overrides.clear()


@pytest.fixture
def mock_auth_anonymous():
    app.dependency_overrides[get_optional_user] = lambda: None
    yield None
    app.dependency_overrides.clear()


@pytest.fixture
def mock_conn():
    """A connection usable as `async with get_transaction() as conn`."""
    conn = MagicMock()
    conn.__aenter__ = AsyncMock(return_value=conn)
    conn.__aexit__ = AsyncMock(return_value=None)
    return conn
