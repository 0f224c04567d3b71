from .user import User
from .profile import Profile, SocialLinks, Experience, Education
from .post import Post, Like, Comment

__all__ = [
    "User",
    "Profile",
    "SocialLinks",
    "Experience",
    "Education",
    "Post",
    "Like",
    "Comment",
]
