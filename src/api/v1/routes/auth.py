"""Auth API routes: login and current user."""

from fastapi import APIRouter, Depends

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_auth_service
from api.v1.schemas.auth import TokenResponse, UserLogin, UserResponse
from api.v1.schemas.common import ErrorResponse
from domain.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get(
    "",
    response_model=UserResponse,
    summary="Get the authenticated user",
    responses={
        401: {"model": ErrorResponse, "description": "Missing or invalid token"},
        404: {"model": ErrorResponse, "description": "User no longer exists"},
    },
)
async def get_me(
    user: CurrentUser,
    service: AuthService = Depends(get_auth_service),
) -> UserResponse:
    """Return the caller's user record, without the password."""
    account = await service.get_user(user.id)
    return UserResponse(
        id=account.id,
        name=account.name,
        email=account.email,
        avatar=account.avatar,
        date=account.date,
    )


@router.post(
    "",
    response_model=TokenResponse,
    summary="Authenticate user and get token",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid credentials or validation failed"},
    },
)
async def login(
    body: UserLogin,
    service: AuthService = Depends(get_auth_service),
) -> TokenResponse:
    """Exchange email and password for a signed token."""
    token = await service.login(email=body.email, password=body.password)
    return TokenResponse(token=token)
