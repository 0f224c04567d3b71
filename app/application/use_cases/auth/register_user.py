# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.exceptions import EmailTakenError
from ....core.security import hash_password, gravatar_url
from ....utils.datetime_utils import utc_now
from ...dto.auth_dto import UserRegistrationRequest
from ...dto.user_dto import UserResponse
from ...mappers import to_user_response

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, request: UserRegistrationRequest) -> UserResponse:
        """
        Register a new user with a Gravatar avatar
        
        Raises:
            EmailTakenError: If a user with this email already exists
        """
        email = request.email.lower()
        existing_user = await self.user_repository.find_by_email(email)
        if existing_user is not None:
            raise EmailTakenError(email)
        
        new_user = User(
            id=None,  # Will be set by repository
            name=request.name,
            email=email,
            hashed_password=hash_password(request.password),
            avatar=gravatar_url(email),
            created_at=utc_now(),
        )
        
        saved_user = await self.user_repository.save(new_user)
        logger.info(f"Registered user {saved_user.id}")
        return to_user_response(saved_user)
