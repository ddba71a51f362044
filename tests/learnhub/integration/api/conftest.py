"""Pytest fixtures for API tests.

The app runs in-process through httpx's ASGITransport. Every request gets a
session on the in-memory SQLite database from ``session_maker``, so tests
never touch a configured database.
"""

import pytest
from httpx import ASGITransport, AsyncClient

from learnhub.presentation.api.app import API_V1_PREFIX, create_app
from learnhub.presentation.api.dependencies import get_db_session
from learnhub_config.settings import Settings


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def api_settings() -> Settings:
    """Test API settings with debug enabled."""
    return Settings(
        database_type="sqlite",
        api_host="127.0.0.1",
        api_port=8000,
        api_debug=True,
        api_cors_origins="http://localhost:3000",
    )


@pytest.fixture
def test_app(api_settings, session_maker):
    """FastAPI app whose sessions come from the test database."""
    app = create_app(api_settings)

    async def override_get_db_session():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def client(test_app):
    """Async HTTP client bound to the test app."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def user_payload() -> dict:
    return {
        "first_name": "Ann",
        "last_name": "Lee",
        "email": "ann@x.com",
        "age": 30,
    }


@pytest.fixture
async def created_user(client, api_v1_prefix, user_payload) -> dict:
    response = await client.post(f"{api_v1_prefix}/users", json=user_payload)
    assert response.status_code == 201
    return response.json()


@pytest.fixture
async def created_category(client, api_v1_prefix) -> dict:
    response = await client.post(
        f"{api_v1_prefix}/categories",
        json={"name": "Python", "description": "The language"},
    )
    assert response.status_code == 201
    return response.json()
