# Standard library imports
import logging

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.exceptions import NotAuthorizedError
from .common import load_post

logger = logging.getLogger(__name__)


class DeletePostUseCase:
    """Use case for deleting one of the caller's posts"""
    
    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository
    
    async def execute(self, user_id: str, post_id: str) -> None:
        """
        Raises:
            PostNotFoundError: If the post does not exist
            NotAuthorizedError: If the caller is not the author
        """
        post = await load_post(self.post_repository, post_id)
        if post.user_id != user_id:
            raise NotAuthorizedError(user_id=user_id, post_id=post_id)
        
        await self.post_repository.delete(post_id)
        logger.info(f"User {user_id} deleted post {post_id}")
