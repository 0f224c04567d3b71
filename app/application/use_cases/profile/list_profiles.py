# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.profile_repository import ProfileRepository
from ....domain.repositories.user_repository import UserRepository
from ...dto.profile_dto import ProfileResponse
from .common import build_profile_response


class ListProfilesUseCase:
    """Use case for listing every developer profile, newest first"""
    
    def __init__(self, profile_repository: ProfileRepository, user_repository: UserRepository) -> None:
        self.profile_repository = profile_repository
        self.user_repository = user_repository
    
    async def execute(self) -> List[ProfileResponse]:
        profiles = await self.profile_repository.find_all()
        
        result = []
        for profile in profiles:
            result.append(await build_profile_response(profile, self.user_repository))
        return result
