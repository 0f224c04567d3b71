from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
    GetCurrentUserUseCase,
)
from .profile import (
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
from .post import (
    CreatePostUseCase,
    ListPostsUseCase,
    GetPostUseCase,
    DeletePostUseCase,
    LikePostUseCase,
    UnlikePostUseCase,
    AddCommentUseCase,
    RemoveCommentUseCase,
)

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "GetCurrentUserUseCase",
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
    "CreatePostUseCase",
    "ListPostsUseCase",
    "GetPostUseCase",
    "DeletePostUseCase",
    "LikePostUseCase",
    "UnlikePostUseCase",
    "AddCommentUseCase",
    "RemoveCommentUseCase",
]
