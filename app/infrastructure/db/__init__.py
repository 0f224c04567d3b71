from .mongo_connection import (
    get_database,
    close_database,
    get_user_collection,
    get_profile_collection,
    get_post_collection,
)
from .mongo_user_repository import MongoUserRepository
from .mongo_profile_repository import MongoProfileRepository
from .mongo_post_repository import MongoPostRepository

__all__ = [
    "get_database",
    "close_database",
    "get_user_collection",
    "get_profile_collection",
    "get_post_collection",
    "MongoUserRepository",
    "MongoProfileRepository",
    "MongoPostRepository",
]
