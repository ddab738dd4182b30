"""Pydantic schemas for Post API."""

from datetime import datetime
from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from api.v1.schemas.common import error_message


class PostCreate(BaseModel):
    """Schema for creating a Post."""

    text: Annotated[str, Field(min_length=1), error_message("Text is required")] = Field(
        "", validate_default=True
    )


class CommentCreate(BaseModel):
    """Schema for commenting on a Post."""

    text: Annotated[str, Field(min_length=1), error_message("Text is required")] = Field(
        "", validate_default=True
    )


class LikeResponse(BaseModel):
    """A like on a post."""

    user: UUID
    date: datetime


class CommentResponse(BaseModel):
    """A comment on a post."""

    id: UUID
    user: UUID
    text: str
    name: str
    avatar: str | None = None
    date: datetime


class PostResponse(BaseModel):
    """Schema for Post response."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "789e4567-e89b-12d3-a456-426614174000",
                "user": "123e4567-e89b-12d3-a456-426614174000",
                "text": "Hello world",
                "name": "John Doe",
                "avatar": "//www.gravatar.com/avatar/1f9d9a9efc2f523b2f09629444632b5c?s=200&r=pg&d=mm",
                "likes": [],
                "comments": [],
                "date": "2026-01-28T10:00:00",
            }
        },
    )

    id: UUID
    user: UUID
    text: str
    name: str
    avatar: str | None = None
    likes: list[LikeResponse] = []
    comments: list[CommentResponse] = []
    date: datetime
