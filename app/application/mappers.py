"""Conversions from domain models to response DTOs."""
# Standard library imports
from typing import List, Optional

# Local application imports
from ..domain.models.post import Post
from ..domain.models.profile import Profile
from ..domain.models.user import User
from .dto.post_dto import CommentResponse, LikeResponse, PostResponse
from .dto.profile_dto import (
    EducationResponse,
    ExperienceResponse,
    ProfileOwnerResponse,
    ProfileResponse,
    SocialLinksResponse,
)
from .dto.user_dto import UserResponse


def to_user_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id or "",
        name=user.name,
        email=user.email,
        avatar=user.avatar,
        created_at=user.created_at,
    )


def to_profile_response(profile: Profile, owner: Optional[User] = None) -> ProfileResponse:
    """
    Build a profile response.
    
    ``owner`` populates the embedded user name/avatar; when the owner could
    not be loaded only the user ID is returned.
    """
    social = profile.social
    return ProfileResponse(
        id=profile.id or "",
        user=ProfileOwnerResponse(
            id=profile.user_id,
            name=owner.name if owner else None,
            avatar=owner.avatar if owner else None,
        ),
        handle=profile.handle,
        status=profile.status,
        skills=list(profile.skills),
        company=profile.company,
        website=profile.website,
        location=profile.location,
        bio=profile.bio,
        githubusername=profile.githubusername,
        social=SocialLinksResponse(
            youtube=social.youtube,
            twitter=social.twitter,
            facebook=social.facebook,
            linkedin=social.linkedin,
            instagram=social.instagram,
        ),
        experience=[
            ExperienceResponse(
                id=entry.id,
                title=entry.title,
                company=entry.company,
                location=entry.location,
                from_date=entry.from_date,
                to_date=entry.to_date,
                current=entry.current,
                description=entry.description,
            )
            for entry in profile.experience
        ],
        education=[
            EducationResponse(
                id=entry.id,
                school=entry.school,
                degree=entry.degree,
                fieldofstudy=entry.fieldofstudy,
                from_date=entry.from_date,
                to_date=entry.to_date,
                current=entry.current,
                description=entry.description,
            )
            for entry in profile.education
        ],
        created_at=profile.created_at,
    )


def to_likes_response(post: Post) -> List[LikeResponse]:
    return [LikeResponse(user=like.user_id) for like in post.likes]


def to_post_response(post: Post) -> PostResponse:
    return PostResponse(
        id=post.id or "",
        user=post.user_id,
        text=post.text,
        name=post.name,
        avatar=post.avatar,
        likes=to_likes_response(post),
        comments=[
            CommentResponse(
                id=comment.id,
                user=comment.user_id,
                text=comment.text,
                name=comment.name,
                avatar=comment.avatar,
                created_at=comment.created_at,
            )
            for comment in post.comments
        ],
        created_at=post.created_at,
    )
