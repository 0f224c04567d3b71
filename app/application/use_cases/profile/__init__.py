from .upsert_profile import UpsertProfileUseCase
from .get_profile import (
    GetCurrentProfileUseCase,
    GetProfileByHandleUseCase,
    GetProfileByUserUseCase,
)
from .list_profiles import ListProfilesUseCase
from .manage_experience import AddExperienceUseCase, RemoveExperienceUseCase
from .manage_education import AddEducationUseCase, RemoveEducationUseCase
from .delete_account import DeleteAccountUseCase
from .list_github_repos import ListGithubReposUseCase

__all__ = [
    "UpsertProfileUseCase",
    "GetCurrentProfileUseCase",
    "GetProfileByHandleUseCase",
    "GetProfileByUserUseCase",
    "ListProfilesUseCase",
    "AddExperienceUseCase",
    "RemoveExperienceUseCase",
    "AddEducationUseCase",
    "RemoveEducationUseCase",
    "DeleteAccountUseCase",
    "ListGithubReposUseCase",
]
