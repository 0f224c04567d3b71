"""
Domain exception hierarchy for DevConnect.

Raised by use cases and domain models; the API layer maps each family to an
HTTP status code. Store and connectivity failures are not part of this
hierarchy: repositories raise RuntimeError for those.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class DevConnectError(Exception):
    """Base exception for all domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


# -----------------------------------------------------------------------------
# Not found
# -----------------------------------------------------------------------------


class NotFoundError(DevConnectError):
    """Raised when a referenced document or sub-document does not exist."""
    pass


class UserNotFoundError(NotFoundError):
    def __init__(self, user_id: str):
        super().__init__("User not found", {"user_id": user_id})


class ProfileNotFoundError(NotFoundError):
    def __init__(self, message: str = "Profile not found", **details: Any):
        super().__init__(message, details)


class PostNotFoundError(NotFoundError):
    def __init__(self, post_id: str):
        super().__init__("No post found", {"post_id": post_id})


class CommentNotFoundError(NotFoundError):
    def __init__(self, comment_id: str):
        super().__init__("Comment does not exist", {"comment_id": comment_id})


class ExperienceNotFoundError(NotFoundError):
    def __init__(self, entry_id: str):
        super().__init__("Experience does not exist", {"entry_id": entry_id})


class EducationNotFoundError(NotFoundError):
    def __init__(self, entry_id: str):
        super().__init__("Education does not exist", {"entry_id": entry_id})


class GithubProfileNotFoundError(NotFoundError):
    def __init__(self, username: str):
        super().__init__("No Github profile found", {"username": username})


# -----------------------------------------------------------------------------
# Conflict
# -----------------------------------------------------------------------------


class ConflictError(DevConnectError):
    """Raised when a request collides with the current state of a document."""
    pass


class EmailTakenError(ConflictError):
    def __init__(self, email: str):
        super().__init__("User with this email already exists", {"email": email})


class HandleTakenError(ConflictError):
    def __init__(self, handle: str):
        super().__init__("That handle already exists", {"handle": handle})


class AlreadyLikedError(ConflictError):
    def __init__(self, post_id: str):
        super().__init__("You have already liked this post", {"post_id": post_id})


class NotLikedError(ConflictError):
    def __init__(self, post_id: str):
        super().__init__("You have not liked this post", {"post_id": post_id})


# -----------------------------------------------------------------------------
# Authorization
# -----------------------------------------------------------------------------


class NotAuthorizedError(DevConnectError):
    """Raised when the caller does not own the resource being mutated."""

    def __init__(self, message: str = "User not authorized", **details: Any):
        super().__init__(message, details)
