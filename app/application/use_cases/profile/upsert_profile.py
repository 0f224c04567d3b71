# Standard library imports
import logging
from typing import Any, Dict, List

# Local application imports
from ....domain.repositories.profile_repository import ProfileRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.profile import Profile, SocialLinks
from ....domain.exceptions import HandleTakenError
from ....utils.datetime_utils import utc_now
from ...dto.profile_dto import ProfileUpsertRequest, ProfileResponse
from .common import build_profile_response

logger = logging.getLogger(__name__)

SOCIAL_NETWORKS = ("youtube", "twitter", "facebook", "linkedin", "instagram")


def split_skills(skills: str) -> List[str]:
    """Split a comma-separated skills string into trimmed, non-empty entries"""
    return [skill.strip() for skill in skills.split(",") if skill.strip()]


def build_profile_fields(request: ProfileUpsertRequest) -> Dict[str, Any]:
    """
    Collect the fields present in a submission.
    
    Empty values are treated as absent so they never overwrite stored data.

    Raises:
        ValueError: If ``skills`` holds no entry once split
    """
    submitted = request.model_dump(exclude_none=True)
    fields: Dict[str, Any] = {
        name: value
        for name, value in submitted.items()
        if value and name in Profile.PATCHABLE_FIELDS
    }
    if "skills" in fields:
        fields["skills"] = split_skills(fields["skills"])
        if not fields["skills"]:
            raise ValueError("Skills is required")
    social = {name: submitted[name] for name in SOCIAL_NETWORKS if submitted.get(name)}
    if social:
        fields["social"] = social
    return fields


class UpsertProfileUseCase:
    """Use case for creating the caller's profile, or patching it if it exists"""
    
    def __init__(
        self,
        profile_repository: ProfileRepository,
        user_repository: UserRepository,
    ) -> None:
        self.profile_repository = profile_repository
        self.user_repository = user_repository
    
    async def execute(self, user_id: str, request: ProfileUpsertRequest) -> ProfileResponse:
        """
        Create or update the caller's profile
        
        An existing profile only receives the fields present in the request.
        Handle uniqueness is checked when the profile is first created.
        
        Raises:
            HandleTakenError: If creating and another profile owns the handle
        """
        fields = build_profile_fields(request)
        profile = await self.profile_repository.find_by_user(user_id)
        
        if profile is not None:
            profile.apply_patch(fields)
            saved_profile = await self.profile_repository.save(profile)
            logger.info(f"Updated profile {saved_profile.id} for user {user_id}")
            return await build_profile_response(saved_profile, self.user_repository)
        
        if await self.profile_repository.find_by_handle(fields["handle"]) is not None:
            raise HandleTakenError(fields["handle"])
        
        new_profile = Profile(
            id=None,
            user_id=user_id,
            handle=fields["handle"],
            status=fields["status"],
            skills=fields.get("skills", []),
            created_at=utc_now(),
        )
        # Optional fields and social links go through the same patch path
        new_profile.apply_patch(fields)
        saved_profile = await self.profile_repository.save(new_profile)
        logger.info(f"Created profile {saved_profile.id} for user {user_id}")
        return await build_profile_response(saved_profile, self.user_repository)
