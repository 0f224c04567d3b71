# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....core.security import decode_jwt_token
from ...dto.user_dto import UserResponse
from ...mappers import to_user_response


class GetCurrentUserUseCase:
    """Use case for resolving the authenticated user from a JWT"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, token: str) -> UserResponse:
        """
        Get current user from JWT token
        
        Raises:
            ValueError: If token is invalid or user not found
        """
        payload = decode_jwt_token(token)
        
        user_id: Optional[str] = payload.get("sub")
        if not user_id:
            raise ValueError("Invalid authentication payload: missing user ID")
        
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise ValueError("User not found")
        
        return to_user_response(user)
