"""
Integration tests for auth API endpoints.
Uses TestClient with mocked use cases (no real DB).
Note: Runs full app lifespan (slower). Use: pytest tests/unit/ for fast unit-only runs.
"""
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

pytestmark = pytest.mark.integration
from fastapi.testclient import TestClient

from app.api.v1.dependencies import get_current_user
from app.application.dto.auth_dto import TokenResponse
from app.application.dto.user_dto import UserResponse
from app.application.use_cases.auth.login_user import LoginUserUseCase
from app.application.use_cases.auth.register_user import RegisterUserUseCase
from app.domain.exceptions import EmailTakenError


@pytest.fixture
def mock_register_use_case():
    return AsyncMock(spec=RegisterUserUseCase)


@pytest.fixture
def mock_login_use_case():
    return AsyncMock(spec=LoginUserUseCase)


@pytest.fixture
def mock_container(mock_register_use_case, mock_login_use_case):
    container = MagicMock()
    container.get.side_effect = lambda cls: {
        RegisterUserUseCase: mock_register_use_case,
        LoginUserUseCase: mock_login_use_case,
    }.get(cls, None)
    return container


@pytest.fixture
def client(mock_container):
    """Create test client with mocked container."""
    from app.main import app

    with patch("app.api.v1.auth_controller.get_container", return_value=mock_container):
        with TestClient(app) as c:
            yield c
    app.dependency_overrides.clear()


class TestAuthAPI:
    """Tests for /api/v1/auth endpoints"""

    def test_register_success(self, client, mock_register_use_case):
        mock_register_use_case.execute.return_value = UserResponse(
            id="usr-1",
            name="Test User",
            email="test@example.com",
            avatar="https://www.gravatar.com/avatar/abc?s=200&r=pg&d=mm",
        )
        response = client.post(
            "/api/v1/auth/register",
            json={
                "name": "Test User",
                "email": "test@example.com",
                "password": "password123",
            },
        )
        assert response.status_code == 201
        data = response.json()
        assert data["email"] == "test@example.com"
        assert data["name"] == "Test User"
        assert data["avatar"].startswith("https://www.gravatar.com/avatar/")
        assert "hashed_password" not in data

    def test_register_duplicate_returns_400(self, client, mock_register_use_case):
        mock_register_use_case.execute.side_effect = EmailTakenError("existing@example.com")
        response = client.post(
            "/api/v1/auth/register",
            json={
                "name": "Test",
                "email": "existing@example.com",
                "password": "password123",
            },
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "User with this email already exists"

    def test_register_short_password_returns_400(self, client, mock_register_use_case):
        response = client.post(
            "/api/v1/auth/register",
            json={"name": "Test", "email": "test@example.com", "password": "123"},
        )
        assert response.status_code == 400
        mock_register_use_case.execute.assert_not_called()

    def test_login_success(self, client, mock_login_use_case):
        mock_login_use_case.execute.return_value = TokenResponse(
            access_token="jwt.token.here"
        )
        response = client.post(
            "/api/v1/auth/login",
            json={"email": "test@example.com", "password": "validpass123"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["access_token"] == "jwt.token.here"
        assert data["token_type"] == "bearer"

    def test_login_invalid_returns_401(self, client, mock_login_use_case):
        mock_login_use_case.execute.return_value = None
        response = client.post(
            "/api/v1/auth/login",
            json={"email": "test@example.com", "password": "wrongpass123"},
        )
        assert response.status_code == 401

    def test_me_returns_current_user(self, client):
        from app.main import app

        app.dependency_overrides[get_current_user] = lambda: UserResponse(
            id="usr-1", name="Test User", email="test@example.com"
        )
        response = client.get("/api/v1/auth/me")
        assert response.status_code == 200
        assert response.json()["id"] == "usr-1"

    def test_me_without_token_is_rejected(self, client):
        response = client.get("/api/v1/auth/me")
        assert response.status_code in (401, 403)
