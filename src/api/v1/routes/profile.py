"""Profile API routes."""

from fastapi import APIRouter, Depends

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_profile_service
from api.v1.schemas.common import ErrorResponse
from api.v1.schemas.profile import (
    ProfileResponse,
    ProfileUpsert,
    ProfileUserResponse,
    ProfileWithUserResponse,
    SocialResponse,
)
from domain.services.profile_service import ProfileService

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get(
    "/me",
    response_model=ProfileWithUserResponse,
    summary="Get current user's profile",
    responses={
        400: {"model": ErrorResponse, "description": "There is no profile for this user"},
    },
)
async def get_my_profile(
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileWithUserResponse:
    """Get the caller's profile with their name and avatar populated."""
    result = await service.get_for_user(user.id)
    profile = result.profile
    return ProfileWithUserResponse(
        id=profile.id,
        user=ProfileUserResponse(
            id=result.user.id,
            name=result.user.name,
            avatar=result.user.avatar,
        ),
        company=profile.company,
        website=profile.website,
        location=profile.location,
        bio=profile.bio,
        status=profile.status,
        githubusername=profile.githubusername,
        skills=profile.skills,
        social=SocialResponse(**profile.social.to_dict()),
        date=profile.date,
    )


@router.post(
    "",
    response_model=ProfileResponse,
    summary="Create or update user's profile",
    responses={
        400: {"model": ErrorResponse, "description": "Validation failed"},
    },
)
async def upsert_profile(
    body: ProfileUpsert,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Create the caller's profile, or update only the fields sent."""
    profile = await service.upsert(user.id, body.model_dump())
    return ProfileResponse(
        id=profile.id,
        user=profile.user_id,
        company=profile.company,
        website=profile.website,
        location=profile.location,
        bio=profile.bio,
        status=profile.status,
        githubusername=profile.githubusername,
        skills=profile.skills,
        social=SocialResponse(**profile.social.to_dict()),
        date=profile.date,
    )
