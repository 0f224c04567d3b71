# Standard library imports
import logging

# Local application imports
from ....domain.repositories.profile_repository import ProfileRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.profile import Education
from ...dto.profile_dto import EducationCreateRequest, ProfileResponse
from .common import build_profile_response, generate_entry_id, load_own_profile

logger = logging.getLogger(__name__)


class AddEducationUseCase:
    """Use case for adding an education entry to the caller's profile"""
    
    def __init__(self, profile_repository: ProfileRepository, user_repository: UserRepository) -> None:
        self.profile_repository = profile_repository
        self.user_repository = user_repository
    
    async def execute(self, user_id: str, request: EducationCreateRequest) -> ProfileResponse:
        profile = await load_own_profile(self.profile_repository, user_id)
        profile.add_education(
            Education(
                id=generate_entry_id(),
                school=request.school,
                degree=request.degree,
                fieldofstudy=request.fieldofstudy,
                from_date=request.from_date,
                to_date=request.to_date,
                current=request.current,
                description=request.description,
            )
        )
        saved_profile = await self.profile_repository.save(profile)
        return await build_profile_response(saved_profile, self.user_repository)


class RemoveEducationUseCase:
    """Use case for removing an education entry from the caller's profile"""
    
    def __init__(self, profile_repository: ProfileRepository, user_repository: UserRepository) -> None:
        self.profile_repository = profile_repository
        self.user_repository = user_repository
    
    async def execute(self, user_id: str, entry_id: str) -> ProfileResponse:
        """
        Raises:
            ProfileNotFoundError: If the caller has no profile
            EducationNotFoundError: If no entry has this ID (nothing is saved)
        """
        profile = await load_own_profile(self.profile_repository, user_id)
        profile.remove_education(entry_id)
        saved_profile = await self.profile_repository.save(profile)
        logger.info(f"Removed education {entry_id} from profile {saved_profile.id}")
        return await build_profile_response(saved_profile, self.user_repository)
