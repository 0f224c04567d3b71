from .create_post import CreatePostUseCase
from .get_post import ListPostsUseCase, GetPostUseCase
from .delete_post import DeletePostUseCase
from .like_post import LikePostUseCase, UnlikePostUseCase
from .comment_post import AddCommentUseCase, RemoveCommentUseCase

__all__ = [
    "CreatePostUseCase",
    "ListPostsUseCase",
    "GetPostUseCase",
    "DeletePostUseCase",
    "LikePostUseCase",
    "UnlikePostUseCase",
    "AddCommentUseCase",
    "RemoveCommentUseCase",
]
