"""Pydantic schemas for Profile API."""

from datetime import datetime
from typing import Annotated
from uuid import UUID

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from api.v1.schemas.common import error_message


def _has_skill(value: str) -> str:
    if not any(skill.strip() for skill in value.split(",")):
        raise ValueError("no skills listed")
    return value


class ProfileUpsert(BaseModel):
    """Schema for creating or updating the caller's profile.

    ``skills`` is a comma-separated string. Optional fields left out (or
    empty) keep their stored values.
    """

    status: Annotated[str, Field(min_length=1), error_message("Status is required")] = Field(
        "", validate_default=True
    )
    skills: Annotated[
        str,
        Field(min_length=1),
        AfterValidator(_has_skill),
        error_message("Skills is required"),
    ] = Field("", validate_default=True)
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    githubusername: str | None = None
    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None


class SocialResponse(BaseModel):
    """Social links on a profile."""

    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None


class ProfileUserResponse(BaseModel):
    """Owner fields populated into a profile."""

    id: UUID
    name: str
    avatar: str | None = None


class ProfileBase(BaseModel):
    """Fields shared by profile responses."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    status: str
    githubusername: str | None = None
    skills: list[str] = []
    social: SocialResponse = SocialResponse()
    date: datetime


class ProfileResponse(ProfileBase):
    """Stored profile document, owner as id."""

    user: UUID


class ProfileWithUserResponse(ProfileBase):
    """Profile with the owner's name and avatar populated."""

    user: ProfileUserResponse
