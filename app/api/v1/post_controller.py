# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.post_dto import (
    CommentCreateRequest,
    LikeResponse,
    MessageResponse,
    PostCreateRequest,
    PostResponse,
)
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.post import (
    AddCommentUseCase,
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    LikePostUseCase,
    ListPostsUseCase,
    RemoveCommentUseCase,
    UnlikePostUseCase,
)
from ...domain.exceptions import DevConnectError
from ...di.container import get_container
from .dependencies import get_current_user
from .error_mapping import to_http_exception


router = APIRouter(tags=["posts"])


@router.get("", response_model=List[PostResponse])
async def list_posts(
    current_user: UserResponse = Depends(get_current_user),
) -> List[PostResponse]:
    """List all posts, newest first"""
    use_case = get_container().get(ListPostsUseCase)
    return await use_case.execute()


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: str,
    current_user: UserResponse = Depends(get_current_user),
) -> PostResponse:
    """Get a post by ID"""
    use_case = get_container().get(GetPostUseCase)
    
    try:
        return await use_case.execute(post_id=post_id)
    except (DevConnectError, ValueError) as exception:
        raise to_http_exception(exception)


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: PostCreateRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> PostResponse:
    """Create a new post"""
    use_case = get_container().get(CreatePostUseCase)
    
    try:
        return await use_case.execute(user_id=current_user.id, request=request)
    except (DevConnectError, ValueError) as exception:
        raise to_http_exception(exception)


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_post(
    post_id: str,
    current_user: UserResponse = Depends(get_current_user),
) -> MessageResponse:
    """Delete one of the current user's posts"""
    use_case = get_container().get(DeletePostUseCase)
    
    try:
        await use_case.execute(user_id=current_user.id, post_id=post_id)
    except (DevConnectError, ValueError) as exception:
        raise to_http_exception(exception)
    return MessageResponse(msg="Success")


@router.put("/like/{post_id}", response_model=List[LikeResponse])
async def like_post(
    post_id: str,
    current_user: UserResponse = Depends(get_current_user),
) -> List[LikeResponse]:
    """Like a post"""
    use_case = get_container().get(LikePostUseCase)
    
    try:
        return await use_case.execute(user_id=current_user.id, post_id=post_id)
    except (DevConnectError, ValueError) as exception:
        raise to_http_exception(exception)


@router.put("/unlike/{post_id}", response_model=List[LikeResponse])
async def unlike_post(
    post_id: str,
    current_user: UserResponse = Depends(get_current_user),
) -> List[LikeResponse]:
    """Withdraw a like"""
    use_case = get_container().get(UnlikePostUseCase)
    
    try:
        return await use_case.execute(user_id=current_user.id, post_id=post_id)
    except (DevConnectError, ValueError) as exception:
        raise to_http_exception(exception)


@router.post("/comment/{post_id}", response_model=PostResponse)
async def add_comment(
    post_id: str,
    request: CommentCreateRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> PostResponse:
    """Comment on a post"""
    use_case = get_container().get(AddCommentUseCase)
    
    try:
        return await use_case.execute(user_id=current_user.id, post_id=post_id, request=request)
    except (DevConnectError, ValueError) as exception:
        raise to_http_exception(exception)


@router.delete("/comment/{post_id}/{comment_id}", response_model=PostResponse)
async def remove_comment(
    post_id: str,
    comment_id: str,
    current_user: UserResponse = Depends(get_current_user),
) -> PostResponse:
    """Remove a comment from a post"""
    use_case = get_container().get(RemoveCommentUseCase)
    
    try:
        return await use_case.execute(post_id=post_id, comment_id=comment_id)
    except (DevConnectError, ValueError) as exception:
        raise to_http_exception(exception)
