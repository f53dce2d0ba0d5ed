# tests/conftest.py

"""
Pytest configuration and shared fixtures for testing.
"""

import pytest
from fastapi.testclient import TestClient
from unittest.mock import Mock
from typing import Generator

from main import create_app
from dependencies.auth import CurrentUser, get_current_user
from models.enums import UserRole
from models.unit import UnitRead


@pytest.fixture(autouse=True)
def configured_backend(monkeypatch):
    """Pretend Supabase credentials are set so the config gate stays open."""
    from core.config import settings
    monkeypatch.setattr(settings, "SUPABASE_URL", "https://test.supabase.co")
    monkeypatch.setattr(settings, "SUPABASE_SERVICE_ROLE_KEY", "service-role-key")


@pytest.fixture(autouse=True)
def reset_state():
    """Reset cache and rate limits before each test."""
    from core.cache import cache_clear
    from core.rate_limiter import reset_rate_limits
    cache_clear()
    reset_rate_limits()
    yield
    cache_clear()
    reset_rate_limits()


@pytest.fixture(scope="function")
def app():
    """Create a test FastAPI application instance."""
    return create_app()


@pytest.fixture(scope="function")
def client(app) -> Generator[TestClient, None, None]:
    """Create a test client for the FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client


def make_unit(flat_number: str = "A-101", **extra) -> UnitRead:
    return UnitRead(id=f"unit-{flat_number}", flat_number=flat_number, **extra)


def make_user(
    role: UserRole,
    units=None,
    community_id="community-1",
    user_id="user-1",
    session_id=None,
) -> CurrentUser:
    """
    Actor with the given role. Units default to one assigned unit.
    Without a session_id, navigation state is keyed by user_id.
    """
    if units is None:
        units = [make_unit()]
    return CurrentUser(
        id=user_id,
        auth_user_id=user_id,
        email=f"{role.name}@example.com",
        role=role,
        name=f"Test {role.value}",
        community_id=None if role == UserRole.super_admin else community_id,
        units=units,
        session_id=session_id,
    )


@pytest.fixture
def login_as(app):
    """
    Override authentication with a fixed actor.

    Usage:
        login_as(make_user(UserRole.resident))
    """
    def _login(user: CurrentUser) -> CurrentUser:
        app.dependency_overrides[get_current_user] = lambda: user
        return user

    yield _login
    app.dependency_overrides = {}


@pytest.fixture
def mock_supabase_client():
    """Create a mock Supabase client."""
    mock_client = Mock()
    mock_table = Mock()
    mock_client.table.return_value = mock_table
    return mock_client
