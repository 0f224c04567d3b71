# Standard library imports
import logging
from typing import List

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ...dto.post_dto import LikeResponse
from ...mappers import to_likes_response
from .common import load_post

logger = logging.getLogger(__name__)


class LikePostUseCase:
    """Use case for liking a post, at most once per user"""
    
    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository
    
    async def execute(self, user_id: str, post_id: str) -> List[LikeResponse]:
        """
        Returns:
            The post's likes after the change, most recent first
            
        Raises:
            PostNotFoundError: If the post does not exist
            AlreadyLikedError: If the caller already likes the post (nothing is saved)
        """
        post = await load_post(self.post_repository, post_id)
        post.like(user_id)
        saved_post = await self.post_repository.save(post)
        logger.info(f"User {user_id} liked post {post_id}")
        return to_likes_response(saved_post)


class UnlikePostUseCase:
    """Use case for withdrawing a like"""
    
    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository
    
    async def execute(self, user_id: str, post_id: str) -> List[LikeResponse]:
        """
        Raises:
            PostNotFoundError: If the post does not exist
            NotLikedError: If the caller has not liked the post (nothing is saved)
        """
        post = await load_post(self.post_repository, post_id)
        post.unlike(user_id)
        saved_post = await self.post_repository.save(post)
        logger.info(f"User {user_id} unliked post {post_id}")
        return to_likes_response(saved_post)
