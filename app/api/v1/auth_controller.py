# External package imports
from fastapi import APIRouter, Depends, HTTPException, status

# Local application imports
from ...application.dto.auth_dto import UserRegistrationRequest, UserLoginRequest, TokenResponse
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...domain.exceptions import DevConnectError
from ...di.container import get_container
from .dependencies import get_current_user
from .error_mapping import to_http_exception


router = APIRouter(tags=["authentication"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register_user(request: UserRegistrationRequest) -> UserResponse:
    """Register a new user"""
    container = get_container()
    register_use_case = container.get(RegisterUserUseCase)
    
    try:
        return await register_use_case.execute(request)
    except (DevConnectError, ValueError) as exception:
        raise to_http_exception(exception)


@router.post("/login", response_model=TokenResponse)
async def login_user(request: UserLoginRequest) -> TokenResponse:
    """Authenticate user and get access token"""
    container = get_container()
    login_use_case = container.get(LoginUserUseCase)
    
    token_response = await login_use_case.execute(request)
    if token_response is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password"
        )
    return token_response


@router.get("/me", response_model=UserResponse)
async def get_me(current_user: UserResponse = Depends(get_current_user)) -> UserResponse:
    """Get current authenticated user information"""
    return current_user
