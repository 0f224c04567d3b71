# Local application imports
from ....domain.repositories.profile_repository import ProfileRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import ProfileNotFoundError
from ...dto.profile_dto import ProfileResponse
from .common import build_profile_response, load_own_profile


class GetCurrentProfileUseCase:
    """Use case for reading the caller's own profile"""
    
    def __init__(self, profile_repository: ProfileRepository, user_repository: UserRepository) -> None:
        self.profile_repository = profile_repository
        self.user_repository = user_repository
    
    async def execute(self, user_id: str) -> ProfileResponse:
        profile = await load_own_profile(self.profile_repository, user_id)
        return await build_profile_response(profile, self.user_repository)


class GetProfileByHandleUseCase:
    """Use case for the public profile lookup by handle"""
    
    def __init__(self, profile_repository: ProfileRepository, user_repository: UserRepository) -> None:
        self.profile_repository = profile_repository
        self.user_repository = user_repository
    
    async def execute(self, handle: str) -> ProfileResponse:
        """
        Raises:
            ProfileNotFoundError: If no profile uses the handle
        """
        profile = await self.profile_repository.find_by_handle(handle)
        if profile is None:
            raise ProfileNotFoundError(handle=handle)
        return await build_profile_response(profile, self.user_repository)


class GetProfileByUserUseCase:
    """Use case for the public profile lookup by user ID"""
    
    def __init__(self, profile_repository: ProfileRepository, user_repository: UserRepository) -> None:
        self.profile_repository = profile_repository
        self.user_repository = user_repository
    
    async def execute(self, user_id: str) -> ProfileResponse:
        """
        Raises:
            ProfileNotFoundError: If the user has no profile
        """
        profile = await self.profile_repository.find_by_user(user_id)
        if profile is None:
            raise ProfileNotFoundError(user_id=user_id)
        return await build_profile_response(profile, self.user_repository)
