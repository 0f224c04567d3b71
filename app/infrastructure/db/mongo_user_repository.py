# Standard library imports
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from ...utils.datetime_utils import ensure_utc
from .mongo_connection import get_user_collection


def to_object_id(value: str) -> Optional[ObjectId]:
    """Parse a string ID into an ObjectId, None when it is malformed"""
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""
    
    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()
    
    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address
        
        Args:
            email: Email address to search for
            
        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None
        
        try:
            document = await self.user_collection.find_one({UserFields.EMAIL: email.lower()})
        except Exception as e:
            raise RuntimeError(f"Error finding user by email: {str(e)}")
        if document is None:
            return None
        return self._document_to_user(document)
    
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID
        
        Returns:
            User domain model if found, None when missing or the ID is malformed
        """
        object_id = to_object_id(user_id) if user_id else None
        if object_id is None:
            return None
        
        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except Exception as e:
            raise RuntimeError(f"Error finding user by ID: {str(e)}")
        if document is None:
            return None
        return self._document_to_user(document)
    
    async def save(self, user: User) -> User:
        """
        Save user (create new or update existing)
        
        Returns:
            Saved User domain model with ID set
        """
        if not user:
            raise ValueError("User cannot be None")
        
        user_dict = self._user_to_dict(user)
        
        try:
            if user.id:
                object_id = to_object_id(user.id)
                if object_id is None:
                    raise ValueError(f"Invalid user ID format: {user.id}")
                update_result = await self.user_collection.update_one(
                    {UserFields.MONGO_ID: object_id},
                    {"$set": user_dict}
                )
                if update_result.matched_count == 0:
                    raise ValueError(f"User with ID {user.id} not found")
                document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
            else:
                result = await self.user_collection.insert_one(user_dict)
                document = await self.user_collection.find_one({UserFields.MONGO_ID: result.inserted_id})
        except ValueError:
            raise
        except Exception as e:
            raise RuntimeError(f"Error saving user: {str(e)}")
        
        if document is None:
            raise RuntimeError("User was saved but could not be retrieved")
        return self._document_to_user(document)
    
    async def delete(self, user_id: str) -> bool:
        """Delete user by ID"""
        object_id = to_object_id(user_id) if user_id else None
        if object_id is None:
            return False
        
        try:
            result = await self.user_collection.delete_one({UserFields.MONGO_ID: object_id})
        except Exception as e:
            raise RuntimeError(f"Error deleting user: {str(e)}")
        return result.deleted_count > 0
    
    def _document_to_user(self, document: dict) -> User:
        """Convert MongoDB document to User domain model"""
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")
        
        return User(
            id=str(document[UserFields.MONGO_ID]),
            name=document.get(UserFields.NAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            hashed_password=document.get(UserFields.HASHED_PASSWORD, ""),
            avatar=document.get(UserFields.AVATAR),
            created_at=ensure_utc(document.get(UserFields.CREATED_AT)),
        )
    
    def _user_to_dict(self, user: User) -> dict:
        """Convert User domain model to MongoDB document (without _id)"""
        return {
            UserFields.NAME: user.name,
            UserFields.EMAIL: user.email.lower(),
            UserFields.HASHED_PASSWORD: user.hashed_password,
            UserFields.AVATAR: user.avatar,
            UserFields.CREATED_AT: user.created_at,
        }
