"""End-to-end tests for registration, login and the access gate."""

import pytest
from fastapi.testclient import TestClient

from linkup.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client backed by a fresh mock container."""
    return TestClient(create_app(build_test_container()))


def register(client, username="alice", email="a@x.com", password="pw1"):
    return client.post(
        "/api/register",
        json={"username": username, "email": email, "password": password},
    )


def login(client, email="a@x.com", password="pw1") -> str:
    response = client.post("/api/login", json={"email": email, "password": password})
    assert response.status_code == 200
    return response.json()["token"]


class TestAuthFlow:
    """End-to-end tests for local and external sign-in."""

    def test_health_is_not_prefixed(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_register_then_login(self, client):
        # Act
        registered = register(client)
        response = client.post(
            "/api/login", json={"email": "a@x.com", "password": "pw1"}
        )

        # Assert
        assert registered.status_code == 200
        assert registered.json()["message"] == "Registered"
        assert response.status_code == 200
        body = response.json()
        assert body["token"]
        assert body["user"]["handle"] == "alice"
        assert "password_hash" not in body["user"]

    def test_duplicate_registration_is_rejected(self, client):
        # Arrange
        register(client)

        # Act
        response = register(client, username="alice2")

        # Assert
        assert response.status_code == 400
        assert response.json()["error"] == "DuplicateIdentity"

    def test_bad_password_is_rejected(self, client):
        # Arrange
        register(client)

        # Act
        response = client.post(
            "/api/login", json={"email": "a@x.com", "password": "nope"}
        )

        # Assert
        assert response.status_code == 400
        assert response.json()["error"] == "InvalidCredentials"

    def test_me_requires_credential(self, client):
        response = client.get("/api/me")

        assert response.status_code == 401
        assert response.json()["error"] == "Unauthenticated"
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_me_rejects_garbage_token(self, client):
        response = client.get(
            "/api/me", headers={"Authorization": "Bearer not-a-token"}
        )

        assert response.status_code == 401

    def test_me_returns_user_and_posts(self, client):
        # Arrange
        register(client)
        token = login(client)
        headers = {"Authorization": f"Bearer {token}"}
        client.post("/api/posts", data={"content": "hello"}, headers=headers)

        # Act
        response = client.get("/api/me", headers=headers)

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["user"]["email"] == "a@x.com"
        assert [p["content"] for p in body["posts"]] == ["hello"]

    def test_external_login_creates_account(self, client):
        # Act
        response = client.post(
            "/api/login/external", json={"token": "mock-erin@example.com"}
        )

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["user"]["email"] == "erin@example.com"
        me = client.get(
            "/api/me", headers={"Authorization": f"Bearer {body['token']}"}
        )
        assert me.status_code == 200

    def test_external_login_rejects_bad_token(self, client):
        response = client.post("/api/login/external", json={"token": "forged"})

        assert response.status_code == 401
        assert response.json()["error"] == "InvalidToken"
