# Standard library imports
from typing import Optional, List, Dict, Any

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import DESCENDING

# Local application imports
from ...domain.repositories.post_repository import PostRepository
from ...domain.models.post import Post, Like, Comment
from ...domain.constants import PostFields
from ...domain.exceptions import PostNotFoundError
from ...utils.datetime_utils import ensure_utc
from .mongo_connection import get_post_collection
from .mongo_user_repository import to_object_id


class MongoPostRepository(PostRepository):
    """MongoDB implementation of PostRepository"""
    
    def __init__(self, post_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.post_collection = post_collection if post_collection is not None else get_post_collection()
    
    async def find_by_id(self, post_id: str) -> Optional[Post]:
        """
        Find post by ID
        
        Returns:
            Post domain model if found, None when missing or the ID is malformed
        """
        object_id = to_object_id(post_id) if post_id else None
        if object_id is None:
            return None
        
        try:
            document = await self.post_collection.find_one({PostFields.MONGO_ID: object_id})
        except Exception as e:
            raise RuntimeError(f"Error finding post by ID: {str(e)}")
        if document is None:
            return None
        return self._document_to_post(document)
    
    async def find_all(self) -> List[Post]:
        try:
            cursor = self.post_collection.find().sort(PostFields.CREATED_AT, DESCENDING)
            posts = []
            async for document in cursor:
                posts.append(self._document_to_post(document))
            return posts
        except Exception as e:
            raise RuntimeError(f"Error listing posts: {str(e)}")
    
    async def save(self, post: Post) -> Post:
        """
        Save post (create new or update existing)
        
        Updates rewrite the whole document, including the likes and comments
        arrays, with the in-memory state.
        
        Raises:
            PostNotFoundError: If the post was deleted after it was loaded
        """
        if not post:
            raise ValueError("Post cannot be None")
        
        post_dict = self._post_to_dict(post)
        
        try:
            if post.id:
                object_id = to_object_id(post.id)
                if object_id is None:
                    raise ValueError(f"Invalid post ID format: {post.id}")
                update_result = await self.post_collection.update_one(
                    {PostFields.MONGO_ID: object_id},
                    {"$set": post_dict}
                )
                if update_result.matched_count == 0:
                    raise PostNotFoundError(post.id)
            else:
                result = await self.post_collection.insert_one(post_dict)
                object_id = result.inserted_id
            document = await self.post_collection.find_one({PostFields.MONGO_ID: object_id})
        except (ValueError, PostNotFoundError):
            raise
        except Exception as e:
            raise RuntimeError(f"Error saving post: {str(e)}")
        
        if document is None:
            raise RuntimeError("Post was saved but could not be retrieved")
        return self._document_to_post(document)
    
    async def delete(self, post_id: str) -> bool:
        object_id = to_object_id(post_id) if post_id else None
        if object_id is None:
            return False
        try:
            result = await self.post_collection.delete_one({PostFields.MONGO_ID: object_id})
        except Exception as e:
            raise RuntimeError(f"Error deleting post: {str(e)}")
        return result.deleted_count > 0
    
    def _document_to_post(self, document: Dict[str, Any]) -> Post:
        """Convert MongoDB document to Post domain model"""
        if not document or PostFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")
        
        return Post(
            id=str(document[PostFields.MONGO_ID]),
            user_id=document.get(PostFields.USER_ID, ""),
            text=document.get(PostFields.TEXT, ""),
            name=document.get(PostFields.NAME),
            avatar=document.get(PostFields.AVATAR),
            likes=[
                Like(user_id=like[PostFields.USER_ID])
                for like in document.get(PostFields.LIKES) or []
            ],
            comments=[
                Comment(
                    id=comment[PostFields.COMMENT_ID],
                    user_id=comment.get(PostFields.USER_ID, ""),
                    text=comment.get(PostFields.TEXT, ""),
                    name=comment.get(PostFields.NAME),
                    avatar=comment.get(PostFields.AVATAR),
                    created_at=ensure_utc(comment.get(PostFields.CREATED_AT)),
                )
                for comment in document.get(PostFields.COMMENTS) or []
            ],
            created_at=ensure_utc(document.get(PostFields.CREATED_AT)),
        )
    
    def _post_to_dict(self, post: Post) -> Dict[str, Any]:
        """Convert Post domain model to MongoDB document (without _id)"""
        return {
            PostFields.USER_ID: post.user_id,
            PostFields.TEXT: post.text,
            PostFields.NAME: post.name,
            PostFields.AVATAR: post.avatar,
            PostFields.LIKES: [{PostFields.USER_ID: like.user_id} for like in post.likes],
            PostFields.COMMENTS: [
                {
                    PostFields.COMMENT_ID: comment.id,
                    PostFields.USER_ID: comment.user_id,
                    PostFields.TEXT: comment.text,
                    PostFields.NAME: comment.name,
                    PostFields.AVATAR: comment.avatar,
                    PostFields.CREATED_AT: comment.created_at,
                }
                for comment in post.comments
            ],
            PostFields.CREATED_AT: post.created_at,
        }
