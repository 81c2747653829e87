"""Fixtures for HTTP route tests."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from tour.config import Settings
from tour.interface.api.app import create_app
from tour.util.jwt import create_token
from tests.di import build_test_container


@pytest.fixture
def client():
    """Test client over an app wired with mocks.

    A fresh app per test gives every test its own rate limiter.
    """
    with TestClient(create_app(build_test_container())) as test_client:
        yield test_client


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def session_cookie(client, settings) -> str:
    """Sign the client in as an account that has no stored user."""
    token = create_token(str(uuid4()), "guest@example.com", settings.auth)
    client.cookies.set(settings.auth.cookie_name, token)
    return token


@pytest.fixture
def csrf_headers(client, settings) -> dict[str, str]:
    """Fetch a CSRF token and return the header that must echo it."""
    token = client.get("/api/csrf-token").json()["csrf_token"]
    client.cookies.set(settings.csrf.cookie_name, token)
    return {settings.csrf.header_name: token}


@pytest.fixture
def seed(client):
    """Run an async seeding helper against the app's in-memory repositories.

    Usage:
        owner, tour = seed(seed_tour)
        member = seed(save_user, "member@example.com")
    """
    container = client.app.state.dishka_container

    def run(helper, *args):
        return client.portal.call(helper, container, *args)

    return run


@pytest.fixture
def sign_in(client, settings):
    """Give the client a session for a stored user."""

    def set_session(user) -> None:
        token = create_token(str(user.id), user.email.root, settings.auth)
        client.cookies.set(settings.auth.cookie_name, token)

    return set_session
