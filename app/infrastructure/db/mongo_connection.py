# Standard library imports
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection

# Local application imports
from ...core.config import get_settings


# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)
    
    The client connects lazily, so this does not touch the network.
    """
    global _mongo_client, _mongo_database
    
    if _mongo_database is not None:
        return _mongo_database
    
    settings = get_settings()
    _mongo_client = AsyncIOMotorClient(settings.mongo_uri, tz_aware=True)
    _mongo_database = _mongo_client[settings.mongo_database_name]
    return _mongo_database


def close_database() -> None:
    """Close the MongoDB client (call on application shutdown)"""
    global _mongo_client, _mongo_database
    
    if _mongo_client is not None:
        _mongo_client.close()
    _mongo_client = None
    _mongo_database = None


def get_user_collection() -> AsyncIOMotorCollection:
    """Get users collection from MongoDB"""
    return get_database()["users"]


def get_profile_collection() -> AsyncIOMotorCollection:
    """Get profiles collection from MongoDB"""
    return get_database()["profiles"]


def get_post_collection() -> AsyncIOMotorCollection:
    """Get posts collection from MongoDB"""
    return get_database()["posts"]
