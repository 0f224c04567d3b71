# Standard library imports
import logging

# Local application imports
from ....domain.repositories.profile_repository import ProfileRepository
from ....domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class DeleteAccountUseCase:
    """
    Use case for deleting the caller's profile together with their user.
    
    The two collections are written separately. If removing the user fails
    after the profile is gone, the profile is written back under its
    original ID before the error propagates, so the user is never left
    without the profile it had.
    """
    
    def __init__(self, profile_repository: ProfileRepository, user_repository: UserRepository) -> None:
        self.profile_repository = profile_repository
        self.user_repository = user_repository
    
    async def execute(self, user_id: str) -> None:
        profile = await self.profile_repository.find_by_user(user_id)
        if profile is not None:
            await self.profile_repository.delete_by_user(user_id)
        
        try:
            deleted = await self.user_repository.delete(user_id)
        except Exception:
            if profile is not None:
                logger.error(
                    f"Deleting user {user_id} failed, restoring profile {profile.id}",
                    exc_info=True
                )
                await self.profile_repository.save(profile)
            raise
        
        if not deleted:
            logger.warning(f"User {user_id} was already gone during account deletion")
        logger.info(f"Deleted account of user {user_id}")
