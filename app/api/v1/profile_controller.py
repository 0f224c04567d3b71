# Standard library imports
from typing import Any, Dict, List

# External package imports
from fastapi import APIRouter, Depends

# Local application imports
from ...application.dto.post_dto import MessageResponse
from ...application.dto.profile_dto import (
    EducationCreateRequest,
    ExperienceCreateRequest,
    ProfileResponse,
    ProfileUpsertRequest,
)
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.profile import (
    AddEducationUseCase,
    AddExperienceUseCase,
    DeleteAccountUseCase,
    GetCurrentProfileUseCase,
    GetProfileByHandleUseCase,
    GetProfileByUserUseCase,
    ListGithubReposUseCase,
    ListProfilesUseCase,
    RemoveEducationUseCase,
    RemoveExperienceUseCase,
    UpsertProfileUseCase,
)
from ...domain.exceptions import DevConnectError
from ...di.container import get_container
from .dependencies import get_current_user
from .error_mapping import to_http_exception


router = APIRouter(tags=["profile"])


@router.get("/me", response_model=ProfileResponse)
async def get_my_profile(
    current_user: UserResponse = Depends(get_current_user),
) -> ProfileResponse:
    """Get the current user's profile"""
    use_case = get_container().get(GetCurrentProfileUseCase)
    
    try:
        return await use_case.execute(user_id=current_user.id)
    except DevConnectError as exception:
        raise to_http_exception(exception)


@router.get("/all", response_model=List[ProfileResponse])
async def list_profiles() -> List[ProfileResponse]:
    """List all profiles (public)"""
    use_case = get_container().get(ListProfilesUseCase)
    return await use_case.execute()


@router.get("/handle/{handle}", response_model=ProfileResponse)
async def get_profile_by_handle(handle: str) -> ProfileResponse:
    """Get a profile by handle (public)"""
    use_case = get_container().get(GetProfileByHandleUseCase)
    
    try:
        return await use_case.execute(handle=handle)
    except DevConnectError as exception:
        raise to_http_exception(exception)


@router.get("/user/{user_id}", response_model=ProfileResponse)
async def get_profile_by_user(user_id: str) -> ProfileResponse:
    """Get a profile by user ID (public)"""
    use_case = get_container().get(GetProfileByUserUseCase)
    
    try:
        return await use_case.execute(user_id=user_id)
    except DevConnectError as exception:
        raise to_http_exception(exception)


@router.post("", response_model=ProfileResponse)
async def upsert_profile(
    request: ProfileUpsertRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> ProfileResponse:
    """Create the current user's profile, or update the fields sent"""
    use_case = get_container().get(UpsertProfileUseCase)
    
    try:
        return await use_case.execute(user_id=current_user.id, request=request)
    except (DevConnectError, ValueError) as exception:
        raise to_http_exception(exception)


@router.delete("", response_model=MessageResponse)
async def delete_account(
    current_user: UserResponse = Depends(get_current_user),
) -> MessageResponse:
    """Delete the current user's profile and user account"""
    use_case = get_container().get(DeleteAccountUseCase)
    await use_case.execute(user_id=current_user.id)
    return MessageResponse(msg="Success")


@router.put("/experience", response_model=ProfileResponse)
async def add_experience(
    request: ExperienceCreateRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> ProfileResponse:
    """Add an experience entry to the current user's profile"""
    use_case = get_container().get(AddExperienceUseCase)
    
    try:
        return await use_case.execute(user_id=current_user.id, request=request)
    except (DevConnectError, ValueError) as exception:
        raise to_http_exception(exception)


@router.delete("/experience/{exp_id}", response_model=ProfileResponse)
async def remove_experience(
    exp_id: str,
    current_user: UserResponse = Depends(get_current_user),
) -> ProfileResponse:
    """Remove an experience entry from the current user's profile"""
    use_case = get_container().get(RemoveExperienceUseCase)
    
    try:
        return await use_case.execute(user_id=current_user.id, entry_id=exp_id)
    except (DevConnectError, ValueError) as exception:
        raise to_http_exception(exception)


@router.put("/education", response_model=ProfileResponse)
async def add_education(
    request: EducationCreateRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> ProfileResponse:
    """Add an education entry to the current user's profile"""
    use_case = get_container().get(AddEducationUseCase)
    
    try:
        return await use_case.execute(user_id=current_user.id, request=request)
    except (DevConnectError, ValueError) as exception:
        raise to_http_exception(exception)


@router.delete("/education/{edu_id}", response_model=ProfileResponse)
async def remove_education(
    edu_id: str,
    current_user: UserResponse = Depends(get_current_user),
) -> ProfileResponse:
    """Remove an education entry from the current user's profile"""
    use_case = get_container().get(RemoveEducationUseCase)
    
    try:
        return await use_case.execute(user_id=current_user.id, entry_id=edu_id)
    except (DevConnectError, ValueError) as exception:
        raise to_http_exception(exception)


@router.get("/github/{username}", response_model=List[Dict[str, Any]])
async def list_github_repos(username: str) -> List[Dict[str, Any]]:
    """Latest public GitHub repositories of a user (public)"""
    use_case = get_container().get(ListGithubReposUseCase)
    
    try:
        return await use_case.execute(username=username)
    except DevConnectError as exception:
        raise to_http_exception(exception)
