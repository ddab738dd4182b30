"""User registration route."""

from fastapi import APIRouter, Depends

from api.v1.dependencies import get_auth_service
from api.v1.schemas.auth import TokenResponse, UserRegister
from api.v1.schemas.common import ErrorResponse
from domain.services.auth_service import AuthService

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "",
    response_model=TokenResponse,
    summary="Register user",
    responses={
        400: {"model": ErrorResponse, "description": "Validation failed or user already exists"},
    },
)
async def register(
    body: UserRegister,
    service: AuthService = Depends(get_auth_service),
) -> TokenResponse:
    """Register a new account and return a token for it."""
    token = await service.register(
        name=body.name,
        email=body.email,
        password=body.password,
    )
    return TokenResponse(token=token)
