from abc import ABC, abstractmethod
from typing import Optional, List
from ..models.post import Post


class PostRepository(ABC):
    """Repository interface - defines contract for post data access"""
    
    @abstractmethod
    async def find_by_id(self, post_id: str) -> Optional[Post]:
        """Find post by ID"""
        pass
    
    @abstractmethod
    async def find_all(self) -> List[Post]:
        """List all posts, newest first"""
        pass
    
    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save post (create or update)"""
        pass
    
    @abstractmethod
    async def delete(self, post_id: str) -> bool:
        """Delete post by ID, returns True if a document was removed"""
        pass
