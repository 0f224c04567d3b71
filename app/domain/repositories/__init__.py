from .user_repository import UserRepository
from .profile_repository import ProfileRepository
from .post_repository import PostRepository

__all__ = ["UserRepository", "ProfileRepository", "PostRepository"]
