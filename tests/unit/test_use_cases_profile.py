"""
Unit tests for profile use cases (upsert, experience/education, account delete, GitHub).
"""
from datetime import date
from unittest.mock import AsyncMock

import pytest
from app.application.dto.profile_dto import (
    EducationCreateRequest,
    ExperienceCreateRequest,
    ProfileUpsertRequest,
)
from app.application.use_cases.profile import (
    AddEducationUseCase,
    AddExperienceUseCase,
    DeleteAccountUseCase,
    GetCurrentProfileUseCase,
    GetProfileByHandleUseCase,
    ListGithubReposUseCase,
    ListProfilesUseCase,
    RemoveEducationUseCase,
    RemoveExperienceUseCase,
    UpsertProfileUseCase,
)
from app.application.use_cases.profile.upsert_profile import split_skills
from app.domain.exceptions import (
    ExperienceNotFoundError,
    GithubProfileNotFoundError,
    HandleTakenError,
    ProfileNotFoundError,
)
from app.domain.models.profile import Education, Experience, Profile, SocialLinks
from app.domain.models.user import User


def _make_user(user_id: str = "usr-1") -> User:
    return User(
        id=user_id,
        name="Jane Doe",
        email="jane@example.com",
        hashed_password="hash",
        avatar="https://avatars.test/jane",
    )


def _make_profile(**kwargs) -> Profile:
    defaults = dict(
        id="prof-1",
        user_id="usr-1",
        handle="jdoe",
        status="Developer",
        skills=["python"],
        company="Acme",
        bio="Hello",
        social=SocialLinks(twitter="https://twitter.com/jdoe"),
    )
    defaults.update(kwargs)
    return Profile(**defaults)


def _make_experience(entry_id: str) -> Experience:
    return Experience(id=entry_id, title="Engineer", company="Acme", from_date=date(2020, 1, 1))


class TestSplitSkills:
    def test_trims_and_drops_empty(self):
        assert split_skills(" go , rust,, ") == ["go", "rust"]

    @pytest.mark.asyncio
    async def test_skills_without_entries_rejected(self, profile_repo, user_repo):
        profile_repo.find_by_user.return_value = None
        profile_repo.find_by_handle.return_value = None

        with pytest.raises(ValueError, match="Skills is required"):
            await UpsertProfileUseCase(profile_repo, user_repo).execute(
                "usr-1",
                ProfileUpsertRequest(handle="jdoe", status="Developer", skills=" , ,"),
            )
        profile_repo.save.assert_not_called()


class TestUpsertProfileUseCase:
    """Tests for UpsertProfileUseCase"""

    @pytest.mark.asyncio
    async def test_create_new_profile(self, profile_repo, user_repo):
        profile_repo.find_by_user.return_value = None
        profile_repo.find_by_handle.return_value = None
        user_repo.find_by_id.return_value = _make_user()

        result = await UpsertProfileUseCase(profile_repo, user_repo).execute(
            "usr-1",
            ProfileUpsertRequest(
                handle="jdoe",
                status="Developer",
                skills="go, rust",
                githubusername="jdoe",
                youtube="https://youtube.com/jdoe",
            ),
        )

        assert result.id == "prof-new"
        assert result.skills == ["go", "rust"]
        assert result.githubusername == "jdoe"
        assert result.social.youtube == "https://youtube.com/jdoe"
        assert result.user.name == "Jane Doe"
        saved = profile_repo.save.call_args.args[0]
        assert saved.user_id == "usr-1"
        assert saved.created_at is not None

    @pytest.mark.asyncio
    async def test_create_with_taken_handle_raises(self, profile_repo, user_repo):
        profile_repo.find_by_user.return_value = None
        profile_repo.find_by_handle.return_value = _make_profile(user_id="usr-2")

        with pytest.raises(HandleTakenError, match="handle already exists"):
            await UpsertProfileUseCase(profile_repo, user_repo).execute(
                "usr-1",
                ProfileUpsertRequest(handle="jdoe", status="Developer", skills="go"),
            )
        profile_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_is_sparse(self, profile_repo, user_repo):
        existing = _make_profile()
        profile_repo.find_by_user.return_value = existing
        user_repo.find_by_id.return_value = _make_user()

        result = await UpsertProfileUseCase(profile_repo, user_repo).execute(
            "usr-1",
            ProfileUpsertRequest(
                handle="jdoe",
                status="Lead Developer",
                skills="go,rust",
                linkedin="https://linkedin.com/in/jdoe",
            ),
        )

        assert result.id == "prof-1"
        assert result.status == "Lead Developer"
        assert result.skills == ["go", "rust"]
        assert result.company == "Acme"
        assert result.bio == "Hello"
        assert result.social.twitter == "https://twitter.com/jdoe"
        assert result.social.linkedin == "https://linkedin.com/in/jdoe"
        profile_repo.find_by_handle.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_ignores_empty_values(self, profile_repo, user_repo):
        profile_repo.find_by_user.return_value = _make_profile()
        user_repo.find_by_id.return_value = None

        result = await UpsertProfileUseCase(profile_repo, user_repo).execute(
            "usr-1",
            ProfileUpsertRequest(handle="jdoe", status="Developer", skills="python", company="  "),
        )
        assert result.company == "Acme"
        assert result.user.id == "usr-1"
        assert result.user.name is None


class TestGetProfile:
    @pytest.mark.asyncio
    async def test_unknown_handle_raises(self, profile_repo, user_repo):
        profile_repo.find_by_handle.return_value = None
        with pytest.raises(ProfileNotFoundError):
            await GetProfileByHandleUseCase(profile_repo, user_repo).execute("ghost")

    @pytest.mark.asyncio
    async def test_list_empty_returns_empty_list(self, profile_repo, user_repo):
        profile_repo.find_all.return_value = []
        assert await ListProfilesUseCase(profile_repo, user_repo).execute() == []


class TestExperienceUseCases:
    """Tests for Add/RemoveExperienceUseCase"""

    @pytest.mark.asyncio
    async def test_add_experience_goes_to_head(self, profile_repo, user_repo):
        profile_repo.find_by_user.return_value = _make_profile(experience=[_make_experience("old")])
        user_repo.find_by_id.return_value = _make_user()

        result = await AddExperienceUseCase(profile_repo, user_repo).execute(
            "usr-1",
            ExperienceCreateRequest.model_validate(
                {"title": "CTO", "company": "Startup", "from": "2023-05-01", "current": True}
            ),
        )

        assert len(result.experience) == 2
        assert result.experience[0].title == "CTO"
        assert result.experience[0].from_date == date(2023, 5, 1)
        assert result.experience[0].id != "old"
        assert result.experience[1].id == "old"

    @pytest.mark.asyncio
    async def test_add_experience_without_profile_raises(self, profile_repo, user_repo):
        profile_repo.find_by_user.return_value = None
        with pytest.raises(ProfileNotFoundError, match="no profile"):
            await AddExperienceUseCase(profile_repo, user_repo).execute(
                "usr-1",
                ExperienceCreateRequest(title="CTO", company="Startup", from_date=date(2023, 5, 1)),
            )

    @pytest.mark.asyncio
    async def test_remove_experience(self, profile_repo, user_repo):
        profile_repo.find_by_user.return_value = _make_profile(
            experience=[_make_experience("e2"), _make_experience("e1")]
        )
        user_repo.find_by_id.return_value = _make_user()

        result = await RemoveExperienceUseCase(profile_repo, user_repo).execute("usr-1", "e1")
        assert [entry.id for entry in result.experience] == ["e2"]

    @pytest.mark.asyncio
    async def test_remove_unknown_experience_saves_nothing(self, profile_repo, user_repo):
        profile = _make_profile(experience=[_make_experience("e1")])
        profile_repo.find_by_user.return_value = profile

        with pytest.raises(ExperienceNotFoundError):
            await RemoveExperienceUseCase(profile_repo, user_repo).execute("usr-1", "missing")
        assert len(profile.experience) == 1
        profile_repo.save.assert_not_called()


class TestEducationUseCases:
    @pytest.mark.asyncio
    async def test_add_then_remove_education(self, profile_repo, user_repo):
        profile = _make_profile()
        profile_repo.find_by_user.return_value = profile
        user_repo.find_by_id.return_value = _make_user()

        added = await AddEducationUseCase(profile_repo, user_repo).execute(
            "usr-1",
            EducationCreateRequest.model_validate(
                {"school": "MIT", "degree": "BSc", "fieldofstudy": "CS", "from": "2015-09-01", "to": "2019-06-01"}
            ),
        )
        assert added.education[0].to_date == date(2019, 6, 1)

        removed = await RemoveEducationUseCase(profile_repo, user_repo).execute("usr-1", added.education[0].id)
        assert removed.education == []


class TestDeleteAccountUseCase:
    """Tests for DeleteAccountUseCase"""

    @pytest.mark.asyncio
    async def test_deletes_profile_and_user(self, profile_repo, user_repo):
        profile_repo.find_by_user.return_value = _make_profile()
        user_repo.delete.return_value = True

        await DeleteAccountUseCase(profile_repo, user_repo).execute("usr-1")

        profile_repo.delete_by_user.assert_awaited_once_with("usr-1")
        user_repo.delete.assert_awaited_once_with("usr-1")
        profile_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_user_without_profile_is_still_deleted(self, profile_repo, user_repo):
        profile_repo.find_by_user.return_value = None
        user_repo.delete.return_value = True

        await DeleteAccountUseCase(profile_repo, user_repo).execute("usr-1")

        profile_repo.delete_by_user.assert_not_called()
        user_repo.delete.assert_awaited_once_with("usr-1")

    @pytest.mark.asyncio
    async def test_failed_user_delete_restores_profile(self, profile_repo, user_repo):
        profile = _make_profile(education=[
            Education(id="ed1", school="MIT", degree="BSc", fieldofstudy="CS", from_date=date(2015, 9, 1))
        ])
        profile_repo.find_by_user.return_value = profile
        user_repo.delete.side_effect = RuntimeError("Database error")

        with pytest.raises(RuntimeError, match="Database error"):
            await DeleteAccountUseCase(profile_repo, user_repo).execute("usr-1")

        profile_repo.save.assert_awaited_once_with(profile)
        assert profile_repo.save.call_args.args[0].id == "prof-1"


class TestListGithubReposUseCase:
    @pytest.mark.asyncio
    async def test_returns_repositories(self):
        github_client = AsyncMock()
        github_client.list_repositories.return_value = [{"name": "dotfiles"}]

        result = await ListGithubReposUseCase(github_client, repo_limit=3).execute("jdoe")

        assert result == [{"name": "dotfiles"}]
        github_client.list_repositories.assert_awaited_once_with("jdoe", limit=3)

    @pytest.mark.asyncio
    async def test_unknown_user_raises(self):
        github_client = AsyncMock()
        github_client.list_repositories.return_value = None

        with pytest.raises(GithubProfileNotFoundError, match="No Github profile found"):
            await ListGithubReposUseCase(github_client).execute("ghost")


class InMemoryProfileRepository:
    """Profile store keyed by user ID, enough for delete-then-read flows"""

    def __init__(self, *profiles: Profile) -> None:
        self.profiles = {profile.user_id: profile for profile in profiles}

    async def find_by_user(self, user_id):
        return self.profiles.get(user_id)

    async def delete_by_user(self, user_id):
        return self.profiles.pop(user_id, None) is not None

    async def save(self, profile):
        self.profiles[profile.user_id] = profile
        return profile


class TestDeleteThenRead:
    @pytest.mark.asyncio
    async def test_deleted_profile_is_not_found(self, user_repo):
        profile_repo = InMemoryProfileRepository(_make_profile())
        user_repo.delete.return_value = True
        user_repo.find_by_id.return_value = _make_user()

        found = await GetCurrentProfileUseCase(profile_repo, user_repo).execute("usr-1")
        assert found.handle == "jdoe"

        await DeleteAccountUseCase(profile_repo, user_repo).execute("usr-1")

        with pytest.raises(ProfileNotFoundError, match="no profile"):
            await GetCurrentProfileUseCase(profile_repo, user_repo).execute("usr-1")

    @pytest.mark.asyncio
    async def test_restored_profile_is_readable_after_failed_delete(self, user_repo):
        profile_repo = InMemoryProfileRepository(_make_profile())
        user_repo.delete.side_effect = RuntimeError("Error deleting user: timeout")
        user_repo.find_by_id.return_value = _make_user()

        with pytest.raises(RuntimeError):
            await DeleteAccountUseCase(profile_repo, user_repo).execute("usr-1")

        restored = await GetCurrentProfileUseCase(profile_repo, user_repo).execute("usr-1")
        assert restored.id == "prof-1"
