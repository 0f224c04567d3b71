# Standard library imports
import logging

# Local application imports
from ....domain.repositories.profile_repository import ProfileRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.profile import Experience
from ...dto.profile_dto import ExperienceCreateRequest, ProfileResponse
from .common import build_profile_response, generate_entry_id, load_own_profile

logger = logging.getLogger(__name__)


class AddExperienceUseCase:
    """Use case for adding an experience entry to the caller's profile"""
    
    def __init__(self, profile_repository: ProfileRepository, user_repository: UserRepository) -> None:
        self.profile_repository = profile_repository
        self.user_repository = user_repository
    
    async def execute(self, user_id: str, request: ExperienceCreateRequest) -> ProfileResponse:
        """
        Insert the entry at the head of the experience list
        
        Raises:
            ProfileNotFoundError: If the caller has no profile
        """
        profile = await load_own_profile(self.profile_repository, user_id)
        profile.add_experience(
            Experience(
                id=generate_entry_id(),
                title=request.title,
                company=request.company,
                location=request.location,
                from_date=request.from_date,
                to_date=request.to_date,
                current=request.current,
                description=request.description,
            )
        )
        saved_profile = await self.profile_repository.save(profile)
        return await build_profile_response(saved_profile, self.user_repository)


class RemoveExperienceUseCase:
    """Use case for removing an experience entry from the caller's profile"""
    
    def __init__(self, profile_repository: ProfileRepository, user_repository: UserRepository) -> None:
        self.profile_repository = profile_repository
        self.user_repository = user_repository
    
    async def execute(self, user_id: str, entry_id: str) -> ProfileResponse:
        """
        Raises:
            ProfileNotFoundError: If the caller has no profile
            ExperienceNotFoundError: If no entry has this ID (nothing is saved)
        """
        profile = await load_own_profile(self.profile_repository, user_id)
        profile.remove_experience(entry_id)
        saved_profile = await self.profile_repository.save(profile)
        logger.info(f"Removed experience {entry_id} from profile {saved_profile.id}")
        return await build_profile_response(saved_profile, self.user_repository)
