"""
Authentication endpoints.

Handles user registration, login and the token-protected profile.
"""

from fastapi import APIRouter, Depends, status

from app.api.dependencies import get_current_user, get_user_service
from app.schemas.error import ErrorResponse
from app.schemas.token import TokenData
from app.schemas.user import LoginRequest, LoginResponse, ProfileResponse, RegisterRequest, RegisterResponse
from app.services.user_service import UserService

router = APIRouter()


@router.post("/register",
             summary="Register new user.",
             response_model=RegisterResponse,
             status_code=status.HTTP_201_CREATED,
             responses={400: {"model": ErrorResponse}})
def register(user_data: RegisterRequest, service: UserService = Depends(get_user_service)):
    """
    Register a new user.

    Args:
        user_data: User registration data (username, email, password)
        service: User service bound to the request's database session

    Returns:
        Confirmation message and the new user id

    Raises:
        HTTPException 400: If username or email already exists
    """
    return service.register(user_data)


@router.post("/login",
             summary="Login user and get JWT.",
             response_model=LoginResponse,
             responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}})
def login(login_data: LoginRequest, service: UserService = Depends(get_user_service)):
    """
    Authenticate user via JSON body.

    Returns:
        JWT access token (valid 24 hours) and public user info
    """
    return service.authenticate(login_data)


@router.get("/profile",
            summary="Get current user profile (JWT required).",
            response_model=ProfileResponse,
            responses={401: {"model": ErrorResponse}})
def profile(identity: TokenData = Depends(get_current_user)):
    return UserService.get_profile(identity)
