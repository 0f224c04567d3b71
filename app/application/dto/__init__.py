from .auth_dto import UserRegistrationRequest, UserLoginRequest, TokenResponse
from .user_dto import UserResponse
from .profile_dto import (
    ProfileUpsertRequest,
    ExperienceCreateRequest,
    EducationCreateRequest,
    SocialLinksResponse,
    ExperienceResponse,
    EducationResponse,
    ProfileOwnerResponse,
    ProfileResponse,
)
from .post_dto import (
    PostCreateRequest,
    CommentCreateRequest,
    LikeResponse,
    CommentResponse,
    PostResponse,
    MessageResponse,
)

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "TokenResponse",
    "UserResponse",
    "ProfileUpsertRequest",
    "ExperienceCreateRequest",
    "EducationCreateRequest",
    "SocialLinksResponse",
    "ExperienceResponse",
    "EducationResponse",
    "ProfileOwnerResponse",
    "ProfileResponse",
    "PostCreateRequest",
    "CommentCreateRequest",
    "LikeResponse",
    "CommentResponse",
    "PostResponse",
    "MessageResponse",
]
