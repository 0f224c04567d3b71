"""
Integration tests for profile API endpoints.
Uses TestClient with mocked use cases and an overridden auth dependency.
"""
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

pytestmark = pytest.mark.integration
from fastapi.testclient import TestClient

from app.api.v1.dependencies import get_current_user
from app.application.dto.profile_dto import ProfileOwnerResponse, ProfileResponse
from app.application.dto.user_dto import UserResponse
from app.application.use_cases.profile import (
    AddExperienceUseCase,
    DeleteAccountUseCase,
    GetCurrentProfileUseCase,
    GetProfileByHandleUseCase,
    ListGithubReposUseCase,
    ListProfilesUseCase,
    RemoveExperienceUseCase,
    UpsertProfileUseCase,
)
from app.domain.exceptions import (
    ExperienceNotFoundError,
    GithubProfileNotFoundError,
    HandleTakenError,
    ProfileNotFoundError,
)


CURRENT_USER = UserResponse(id="usr-1", name="Jane Doe", email="jane@example.com")


def _profile_response(**kwargs) -> ProfileResponse:
    defaults = dict(
        id="prof-1",
        user=ProfileOwnerResponse(id="usr-1", name="Jane Doe"),
        handle="jdoe",
        status="Developer",
        skills=["go", "rust"],
    )
    defaults.update(kwargs)
    return ProfileResponse(**defaults)


@pytest.fixture
def use_cases():
    return {
        cls: AsyncMock(spec=cls)
        for cls in (
            AddExperienceUseCase,
            DeleteAccountUseCase,
            GetCurrentProfileUseCase,
            GetProfileByHandleUseCase,
            ListGithubReposUseCase,
            ListProfilesUseCase,
            RemoveExperienceUseCase,
            UpsertProfileUseCase,
        )
    }


@pytest.fixture
def client(use_cases):
    """Create test client with mocked container and an authenticated user."""
    from app.main import app

    container = MagicMock()
    container.get.side_effect = lambda cls: use_cases.get(cls)
    app.dependency_overrides[get_current_user] = lambda: CURRENT_USER

    with patch("app.api.v1.profile_controller.get_container", return_value=container):
        with TestClient(app) as c:
            yield c
    app.dependency_overrides.clear()


class TestProfileAPI:
    """Tests for /api/v1/profile endpoints"""

    def test_get_my_profile(self, client, use_cases):
        use_cases[GetCurrentProfileUseCase].execute.return_value = _profile_response()

        response = client.get("/api/v1/profile/me")

        assert response.status_code == 200
        assert response.json()["user"]["name"] == "Jane Doe"
        use_cases[GetCurrentProfileUseCase].execute.assert_awaited_once_with(user_id="usr-1")

    def test_get_my_profile_missing_returns_404(self, client, use_cases):
        use_cases[GetCurrentProfileUseCase].execute.side_effect = ProfileNotFoundError(
            "There is no profile for this user"
        )
        response = client.get("/api/v1/profile/me")
        assert response.status_code == 404
        assert response.json()["detail"] == "There is no profile for this user"

    def test_list_profiles_empty(self, client, use_cases):
        use_cases[ListProfilesUseCase].execute.return_value = []
        response = client.get("/api/v1/profile/all")
        assert response.status_code == 200
        assert response.json() == []

    def test_profile_by_unknown_handle_returns_404(self, client, use_cases):
        use_cases[GetProfileByHandleUseCase].execute.side_effect = ProfileNotFoundError(handle="ghost")
        response = client.get("/api/v1/profile/handle/ghost")
        assert response.status_code == 404

    def test_upsert_profile(self, client, use_cases):
        use_cases[UpsertProfileUseCase].execute.return_value = _profile_response()

        response = client.post(
            "/api/v1/profile",
            json={"handle": "jdoe", "status": "Developer", "skills": "go, rust", "twitter": "https://twitter.com/jdoe"},
        )

        assert response.status_code == 200
        assert response.json()["skills"] == ["go", "rust"]
        request = use_cases[UpsertProfileUseCase].execute.call_args.kwargs["request"]
        assert request.twitter == "https://twitter.com/jdoe"

    def test_upsert_missing_required_fields_returns_400(self, client, use_cases):
        response = client.post("/api/v1/profile", json={"handle": "jdoe"})
        assert response.status_code == 400
        fields = {error["field"] for error in response.json()["detail"]}
        assert fields == {"body.status", "body.skills"}
        use_cases[UpsertProfileUseCase].execute.assert_not_called()

    def test_upsert_taken_handle_returns_400(self, client, use_cases):
        use_cases[UpsertProfileUseCase].execute.side_effect = HandleTakenError("jdoe")
        response = client.post(
            "/api/v1/profile",
            json={"handle": "jdoe", "status": "Developer", "skills": "go"},
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "That handle already exists"

    def test_add_experience_uses_from_and_to(self, client, use_cases):
        use_cases[AddExperienceUseCase].execute.return_value = _profile_response()

        response = client.put(
            "/api/v1/profile/experience",
            json={"title": "CTO", "company": "Startup", "from": "2023-05-01", "to": "2024-01-31"},
        )

        assert response.status_code == 200
        request = use_cases[AddExperienceUseCase].execute.call_args.kwargs["request"]
        assert str(request.from_date) == "2023-05-01"
        assert str(request.to_date) == "2024-01-31"

    def test_add_experience_without_from_returns_400(self, client):
        response = client.put("/api/v1/profile/experience", json={"title": "CTO", "company": "Startup"})
        assert response.status_code == 400

    def test_remove_unknown_experience_returns_404(self, client, use_cases):
        use_cases[RemoveExperienceUseCase].execute.side_effect = ExperienceNotFoundError("e9")
        response = client.delete("/api/v1/profile/experience/e9")
        assert response.status_code == 404
        use_cases[RemoveExperienceUseCase].execute.assert_awaited_once_with(user_id="usr-1", entry_id="e9")

    def test_delete_account(self, client, use_cases):
        response = client.delete("/api/v1/profile")
        assert response.status_code == 200
        assert response.json() == {"msg": "Success"}

    def test_delete_account_store_failure_returns_500(self, client, use_cases):
        use_cases[DeleteAccountUseCase].execute.side_effect = RuntimeError("Error deleting user: timeout")
        response = client.delete("/api/v1/profile")
        assert response.status_code == 500
        assert response.json() == {"detail": "Server Error"}

    def test_github_repos(self, client, use_cases):
        use_cases[ListGithubReposUseCase].execute.return_value = [{"name": "dotfiles"}]
        response = client.get("/api/v1/profile/github/jdoe")
        assert response.status_code == 200
        assert response.json() == [{"name": "dotfiles"}]

    def test_github_unknown_user_returns_404(self, client, use_cases):
        use_cases[ListGithubReposUseCase].execute.side_effect = GithubProfileNotFoundError("ghost")
        response = client.get("/api/v1/profile/github/ghost")
        assert response.status_code == 404
        assert response.json()["detail"] == "No Github profile found"

    def test_upsert_empty_skills_returns_400(self, client, use_cases):
        use_cases[UpsertProfileUseCase].execute.side_effect = ValueError("Skills is required")
        response = client.post(
            "/api/v1/profile",
            json={"handle": "jdoe", "status": "Developer", "skills": ","},
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "Skills is required"
