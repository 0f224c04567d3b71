# Standard library imports
import logging
import secrets

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.post import Comment
from ....utils.datetime_utils import utc_now
from ...dto.post_dto import CommentCreateRequest, PostResponse
from ...mappers import to_post_response
from .common import load_author, load_post

logger = logging.getLogger(__name__)


class AddCommentUseCase:
    """Use case for commenting on a post"""
    
    def __init__(self, post_repository: PostRepository, user_repository: UserRepository) -> None:
        self.post_repository = post_repository
        self.user_repository = user_repository
    
    def _generate_comment_id(self) -> str:
        return secrets.token_hex(12)
    
    async def execute(self, user_id: str, post_id: str, request: CommentCreateRequest) -> PostResponse:
        """
        Insert a comment, with the commenter's current name and avatar, at
        the head of the post's comments
        
        Raises:
            UserNotFoundError: If the commenter no longer exists
            PostNotFoundError: If the post does not exist
        """
        author = await load_author(self.user_repository, user_id)
        post = await load_post(self.post_repository, post_id)
        
        post.add_comment(
            Comment(
                id=self._generate_comment_id(),
                user_id=user_id,
                text=request.text,
                name=author.name,
                avatar=author.avatar,
                created_at=utc_now(),
            )
        )
        saved_post = await self.post_repository.save(post)
        return to_post_response(saved_post)


class RemoveCommentUseCase:
    """Use case for removing a comment from a post"""
    
    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository
    
    async def execute(self, post_id: str, comment_id: str) -> PostResponse:
        """
        Raises:
            PostNotFoundError: If the post does not exist
            CommentNotFoundError: If the post has no such comment (nothing is saved)
        """
        post = await load_post(self.post_repository, post_id)
        post.remove_comment(comment_id)
        saved_post = await self.post_repository.save(post)
        logger.info(f"Removed comment {comment_id} from post {post_id}")
        return to_post_response(saved_post)
