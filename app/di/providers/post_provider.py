from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.post_repository import PostRepository
from ...application.use_cases.post import (
    CreatePostUseCase,
    ListPostsUseCase,
    GetPostUseCase,
    DeletePostUseCase,
    LikePostUseCase,
    UnlikePostUseCase,
    AddCommentUseCase,
    RemoveCommentUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class PostProvider:
    """Post use case provider - registers all post-related use cases"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all post use cases.
        Use cases are created on-demand via factories.
        """
        # Use cases that snapshot the author need the user repository too
        for use_case_class in (CreatePostUseCase, AddCommentUseCase):
            container.register_factory(
                use_case_class,
                lambda use_case_class=use_case_class: use_case_class(
                    post_repository=container.get(PostRepository),
                    user_repository=container.get(UserRepository),
                )
            )
        
        for use_case_class in (
            ListPostsUseCase,
            GetPostUseCase,
            DeletePostUseCase,
            LikePostUseCase,
            UnlikePostUseCase,
            RemoveCommentUseCase,
        ):
            container.register_factory(
                use_case_class,
                lambda use_case_class=use_case_class: use_case_class(
                    post_repository=container.get(PostRepository),
                )
            )
