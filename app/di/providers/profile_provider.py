from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.profile_repository import ProfileRepository
from ...application.use_cases.profile import (
    UpsertProfileUseCase,
    GetCurrentProfileUseCase,
    GetProfileByHandleUseCase,
    GetProfileByUserUseCase,
    ListProfilesUseCase,
    AddExperienceUseCase,
    RemoveExperienceUseCase,
    AddEducationUseCase,
    RemoveEducationUseCase,
    DeleteAccountUseCase,
    ListGithubReposUseCase,
)
from ...infrastructure.external.github_client import GithubClient

if TYPE_CHECKING:
    from ..base_container import BaseContainer


# Use cases whose constructor takes exactly the profile and user repositories
_PROFILE_USE_CASES = (
    UpsertProfileUseCase,
    GetCurrentProfileUseCase,
    GetProfileByHandleUseCase,
    GetProfileByUserUseCase,
    ListProfilesUseCase,
    AddExperienceUseCase,
    RemoveExperienceUseCase,
    AddEducationUseCase,
    RemoveEducationUseCase,
    DeleteAccountUseCase,
)


class ProfileProvider:
    """Profile use case provider - registers all profile-related use cases"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all profile use cases.
        Use cases are created on-demand via factories.
        """
        # Register GithubClient as singleton if not already registered
        try:
            container.get(GithubClient)
        except ValueError:
            container.register_singleton(GithubClient, GithubClient())
        
        for use_case_class in _PROFILE_USE_CASES:
            container.register_factory(
                use_case_class,
                lambda use_case_class=use_case_class: use_case_class(
                    profile_repository=container.get(ProfileRepository),
                    user_repository=container.get(UserRepository),
                )
            )
        
        container.register_factory(
            ListGithubReposUseCase,
            lambda: ListGithubReposUseCase(
                github_client=container.get(GithubClient),
                repo_limit=get_settings().github_repo_limit,
            )
        )
