# Standard library imports
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

# Local application imports
from ..exceptions import AlreadyLikedError, CommentNotFoundError, NotLikedError


@dataclass
class Like:
    """A user's like on a post"""
    user_id: str


@dataclass
class Comment:
    """
    Comment embedded in a Post.
    
    ``name`` and ``avatar`` are a snapshot of the author taken when the
    comment was written.
    """
    id: str
    user_id: str
    text: str
    name: Optional[str] = None
    avatar: Optional[str] = None
    created_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        if not self.text or not self.text.strip():
            raise ValueError("Text is required")


@dataclass
class Post:
    """
    Pure domain model for a Post.
    
    ``name`` and ``avatar`` are copied from the author at creation time and
    never refreshed. Likes and comments are most-recent-first.
    """
    id: Optional[str]
    user_id: str
    text: str
    name: Optional[str] = None
    avatar: Optional[str] = None
    likes: List[Like] = field(default_factory=list)
    comments: List[Comment] = field(default_factory=list)
    created_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.user_id:
            raise ValueError("User ID is required")
        if not self.text or not self.text.strip():
            raise ValueError("Text is required")

    def is_liked_by(self, user_id: str) -> bool:
        return any(like.user_id == user_id for like in self.likes)

    def like(self, user_id: str) -> None:
        """Add the user's like at the head of the list; one like per user"""
        if self.is_liked_by(user_id):
            raise AlreadyLikedError(self.id or "")
        self.likes.insert(0, Like(user_id=user_id))

    def unlike(self, user_id: str) -> None:
        if not self.is_liked_by(user_id):
            raise NotLikedError(self.id or "")
        index = [like.user_id for like in self.likes].index(user_id)
        del self.likes[index]

    def add_comment(self, comment: Comment) -> None:
        self.comments.insert(0, comment)

    def remove_comment(self, comment_id: str) -> Comment:
        for index, comment in enumerate(self.comments):
            if comment.id == comment_id:
                return self.comments.pop(index)
        raise CommentNotFoundError(comment_id)
