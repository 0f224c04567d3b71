# Standard library imports
import secrets

# Local application imports
from ....domain.exceptions import ProfileNotFoundError
from ....domain.models.profile import Profile
from ....domain.repositories.profile_repository import ProfileRepository
from ....domain.repositories.user_repository import UserRepository
from ...dto.profile_dto import ProfileResponse
from ...mappers import to_profile_response


def generate_entry_id() -> str:
    """Identifier for an embedded experience/education entry"""
    return secrets.token_hex(12)


async def load_own_profile(profile_repository: ProfileRepository, user_id: str) -> Profile:
    """
    Load the caller's profile
    
    Raises:
        ProfileNotFoundError: If the user has not created a profile yet
    """
    profile = await profile_repository.find_by_user(user_id)
    if profile is None:
        raise ProfileNotFoundError("There is no profile for this user", user_id=user_id)
    return profile


async def build_profile_response(profile: Profile, user_repository: UserRepository) -> ProfileResponse:
    """Build the response with the owner's name and avatar populated"""
    owner = await user_repository.find_by_id(profile.user_id)
    return to_profile_response(profile, owner)
