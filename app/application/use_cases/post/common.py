# Local application imports
from ....domain.exceptions import PostNotFoundError, UserNotFoundError
from ....domain.models.post import Post
from ....domain.models.user import User
from ....domain.repositories.post_repository import PostRepository
from ....domain.repositories.user_repository import UserRepository


async def load_post(post_repository: PostRepository, post_id: str) -> Post:
    """
    Raises:
        PostNotFoundError: If the post is missing or the ID is malformed
    """
    post = await post_repository.find_by_id(post_id)
    if post is None:
        raise PostNotFoundError(post_id)
    return post


async def load_author(user_repository: UserRepository, user_id: str) -> User:
    """Load the user whose name/avatar will be snapshotted onto a post or comment"""
    user = await user_repository.find_by_id(user_id)
    if user is None:
        raise UserNotFoundError(user_id)
    return user
