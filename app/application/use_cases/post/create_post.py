# Standard library imports
import logging

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.post import Post
from ....utils.datetime_utils import utc_now
from ...dto.post_dto import PostCreateRequest, PostResponse
from ...mappers import to_post_response
from .common import load_author

logger = logging.getLogger(__name__)


class CreatePostUseCase:
    """Use case for publishing a new post"""
    
    def __init__(self, post_repository: PostRepository, user_repository: UserRepository) -> None:
        self.post_repository = post_repository
        self.user_repository = user_repository
    
    async def execute(self, user_id: str, request: PostCreateRequest) -> PostResponse:
        """
        Create a post carrying the author's current name and avatar
        
        Raises:
            UserNotFoundError: If the author no longer exists
        """
        author = await load_author(self.user_repository, user_id)
        
        new_post = Post(
            id=None,
            user_id=user_id,
            text=request.text,
            name=author.name,
            avatar=author.avatar,
            created_at=utc_now(),
        )
        saved_post = await self.post_repository.save(new_post)
        logger.info(f"User {user_id} created post {saved_post.id}")
        return to_post_response(saved_post)
