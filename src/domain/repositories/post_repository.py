"""Post repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.post import Comment, Like, Post


class IPostRepository(Protocol):
    """Repository interface for Post entities and their likes/comments."""

    async def get(self, id: UUID) -> Post | None:
        """Get a post with its likes and comments."""
        ...

    async def get_all(self) -> list[Post]:
        """Get all posts, newest first."""
        ...

    async def create(self, post: Post) -> Post:
        """Create a new post."""
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete a post with its likes and comments."""
        ...

    async def add_like(self, post_id: UUID, like: Like) -> None:
        """Store a like on a post."""
        ...

    async def remove_like(self, post_id: UUID, user_id: UUID) -> None:
        """Remove a user's like from a post."""
        ...

    async def add_comment(self, post_id: UUID, comment: Comment) -> None:
        """Store a comment on a post."""
        ...

    async def remove_comment(self, post_id: UUID, comment_id: UUID) -> None:
        """Remove a comment from a post."""
        ...
