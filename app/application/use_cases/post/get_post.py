# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ...dto.post_dto import PostResponse
from ...mappers import to_post_response
from .common import load_post


class ListPostsUseCase:
    """Use case for listing all posts, newest first"""
    
    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository
    
    async def execute(self) -> List[PostResponse]:
        posts = await self.post_repository.find_all()
        return [to_post_response(post) for post in posts]


class GetPostUseCase:
    """Use case for getting a post by ID"""
    
    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository
    
    async def execute(self, post_id: str) -> PostResponse:
        post = await load_post(self.post_repository, post_id)
        return to_post_response(post)
