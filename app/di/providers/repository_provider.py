from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.profile_repository import ProfileRepository
from ...domain.repositories.post_repository import PostRepository
from ...infrastructure.db.mongo_user_repository import MongoUserRepository
from ...infrastructure.db.mongo_profile_repository import MongoProfileRepository
from ...infrastructure.db.mongo_post_repository import MongoPostRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        # Domain interfaces -> Infrastructure implementations
        container.register_singleton(
            UserRepository,
            MongoUserRepository(user_collection=container.get("user_collection"))
        )
        
        container.register_singleton(
            ProfileRepository,
            MongoProfileRepository(profile_collection=container.get("profile_collection"))
        )
        
        container.register_singleton(
            PostRepository,
            MongoPostRepository(post_collection=container.get("post_collection"))
        )
