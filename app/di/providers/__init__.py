from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .auth_provider import AuthProvider
from .profile_provider import ProfileProvider
from .post_provider import PostProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "AuthProvider",
    "ProfileProvider",
    "PostProvider",
]
