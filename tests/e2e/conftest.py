"""Shared fixtures for end-to-end API tests."""

from fastapi.testclient import TestClient
import pytest

from quiz.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Test client backed by a fresh in-memory container."""
    app = create_app(container=build_test_container())
    with TestClient(app) as test_client:
        yield test_client


def signup(client: TestClient, email: str = "ada@example.com") -> dict:
    """Create an account and return the response body."""
    response = client.post(
        "/api/auth/signup",
        json={"email": email, "fullName": "Ada Lovelace", "password": "pw123"},
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
def auth_headers(client: TestClient) -> dict[str, str]:
    """Authorization header for a freshly signed-up user."""
    token = signup(client)["token"]
    return {"Authorization": f"Bearer {token}"}
