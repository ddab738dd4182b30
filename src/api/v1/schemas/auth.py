"""Pydantic schemas for registration, login and the current user."""

from datetime import datetime
from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from api.v1.schemas.common import error_message


class UserRegister(BaseModel):
    """Schema for registering a user."""

    name: Annotated[
        str, Field(min_length=1, max_length=100), error_message("Name is required")
    ] = Field("", validate_default=True)
    email: Annotated[EmailStr, error_message("Please include a valid email")] = Field(
        "", validate_default=True
    )
    password: Annotated[
        str,
        Field(min_length=6),
        error_message("Please enter a password with 6 or more characters"),
    ] = Field("", validate_default=True)


class UserLogin(BaseModel):
    """Schema for logging in."""

    email: Annotated[EmailStr, error_message("Please include a valid email")] = Field(
        "", validate_default=True
    )
    password: Annotated[str, Field(min_length=1), error_message("Password is required")] = (
        Field("", validate_default=True)
    )


class TokenResponse(BaseModel):
    """Signed token returned by registration and login."""

    token: str


class UserResponse(BaseModel):
    """Schema for a user record. Never carries the password."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "name": "John Doe",
                "email": "john@example.com",
                "avatar": "//www.gravatar.com/avatar/1f9d9a9efc2f523b2f09629444632b5c?s=200&r=pg&d=mm",
                "date": "2026-01-28T10:00:00",
            }
        },
    )

    id: UUID
    name: str
    email: str
    avatar: str | None = None
    date: datetime
