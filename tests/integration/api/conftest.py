"""Pytest fixtures for API integration tests.

The app runs its real lifespan and dependency wiring against an
in-memory SQLite database, so every client starts from empty tables.
"""

import pytest
from fastapi.testclient import TestClient

from piiguard.presentation.api.app import API_V1_PREFIX, create_app
from piiguard.presentation.api.dependencies import get_engine, get_session_maker


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def app(test_settings):
    return create_app(test_settings)


@pytest.fixture
def test_client(app):
    """Client with the app lifespan running (tables created on startup)."""
    get_engine.cache_clear()
    get_session_maker.cache_clear()

    with TestClient(app) as client:
        yield client

    get_engine.cache_clear()
    get_session_maker.cache_clear()


@pytest.fixture
def registered_user_data() -> dict:
    return {"email": "a@b.com", "password": "secret1", "name": "Al"}


@pytest.fixture
def registered_user(test_client, api_v1_prefix, registered_user_data) -> dict:
    response = test_client.post(f"{api_v1_prefix}/users", json=registered_user_data)
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def auth_headers(test_client, api_v1_prefix, registered_user, registered_user_data):
    response = test_client.post(
        f"{api_v1_prefix}/auth/login",
        json={
            "email": registered_user_data["email"],
            "password": registered_user_data["password"],
        },
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['access_token']}"}
