"""Post service layer with business logic."""

from typing import Callable, List
from uuid import UUID

import structlog
from sqlalchemy.exc import IntegrityError

from core.exceptions import (
    CommentNotFoundError,
    NotAuthorizedError,
    PostAlreadyLikedError,
    PostNotFoundError,
    PostNotLikedError,
    UserNotFoundError,
)
from domain.entities.post import Comment, Like, Post
from domain.repositories.unit_of_work import IUnitOfWork
from infrastructure.database.errors import is_unique_violation

logger = structlog.get_logger()


def _parse_id(value: str | UUID) -> UUID | None:
    """Parse a path id, returning None when it is not a valid UUID."""
    if isinstance(value, UUID):
        return value
    try:
        return UUID(value)
    except ValueError:
        return None


class PostService:
    """Service layer for Post, like and comment business logic.

    Every operation is a single read-modify-write inside one unit of work.
    Malformed ids are reported as not found.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def create(self, user_id: UUID, text: str) -> Post:
        """Create a post, copying the author's name and avatar onto it."""
        async with self._uow_factory() as uow:
            user = await uow.users.get(user_id)
            if not user:
                raise UserNotFoundError(str(user_id))

            post = Post(
                user_id=user_id,
                text=text,
                name=user.name,
                avatar=user.avatar,
            )

            created = await uow.posts.create(post)
            await uow.commit()

        logger.info("post_created", post_id=str(created.id), user_id=str(user_id))
        return created

    async def get_all(self) -> List[Post]:
        """Get all posts, newest first."""
        async with self._uow_factory() as uow:
            return await uow.posts.get_all()  # type: ignore[no-any-return]

    async def get_by_id(self, post_id: str | UUID) -> Post:
        """Get a single post."""
        async with self._uow_factory() as uow:
            return await self._get_post(uow, post_id)

    async def delete(self, post_id: str | UUID, user_id: UUID) -> None:
        """Delete a post. Only its owner may do this."""
        async with self._uow_factory() as uow:
            post = await self._get_post(uow, post_id)
            if post.user_id != user_id:
                raise NotAuthorizedError()

            await uow.posts.delete(post.id)
            await uow.commit()

        logger.info("post_deleted", post_id=str(post.id), user_id=str(user_id))

    async def like(self, post_id: str | UUID, user_id: UUID) -> List[Like]:
        """Like a post and return its likes, newest first."""
        async with self._uow_factory() as uow:
            post = await self._get_post(uow, post_id)
            if post.is_liked_by(user_id):
                raise PostAlreadyLikedError(str(post.id))

            like = post.add_like(user_id)
            try:
                await uow.posts.add_like(post.id, like)
                await uow.commit()
            except IntegrityError as exc:
                await uow.rollback()
                # A concurrent like from the same user won the unique index
                if is_unique_violation(exc):
                    raise PostAlreadyLikedError(str(post.id)) from exc
                raise
            return post.likes

    async def unlike(self, post_id: str | UUID, user_id: UUID) -> List[Like]:
        """Remove the caller's like and return the remaining likes."""
        async with self._uow_factory() as uow:
            post = await self._get_post(uow, post_id)
            if not post.is_liked_by(user_id):
                raise PostNotLikedError(str(post.id))

            post.remove_like(user_id)
            await uow.posts.remove_like(post.id, user_id)
            await uow.commit()
            return post.likes

    async def add_comment(self, post_id: str | UUID, user_id: UUID, text: str) -> List[Comment]:
        """Comment on a post and return its comments, newest first."""
        async with self._uow_factory() as uow:
            user = await uow.users.get(user_id)
            if not user:
                raise UserNotFoundError(str(user_id))

            post = await self._get_post(uow, post_id)
            comment = Comment(
                user_id=user_id,
                text=text,
                name=user.name,
                avatar=user.avatar,
            )
            post.add_comment(comment)
            await uow.posts.add_comment(post.id, comment)
            await uow.commit()
            return post.comments

    async def delete_comment(
        self, post_id: str | UUID, comment_id: str | UUID, user_id: UUID
    ) -> List[Comment]:
        """Delete a comment. Only its author may do this."""
        async with self._uow_factory() as uow:
            post = await self._get_post(uow, post_id)

            parsed_comment_id = _parse_id(comment_id)
            comment = post.find_comment(parsed_comment_id) if parsed_comment_id else None
            if not comment:
                raise CommentNotFoundError(str(comment_id))
            if comment.user_id != user_id:
                raise NotAuthorizedError()

            post.remove_comment(comment.id)
            await uow.posts.remove_comment(post.id, comment.id)
            await uow.commit()
            return post.comments

    async def _get_post(self, uow: IUnitOfWork, post_id: str | UUID) -> Post:
        """Load a post or raise PostNotFoundError."""
        parsed = _parse_id(post_id)
        post = await uow.posts.get(parsed) if parsed else None
        if not post:
            raise PostNotFoundError(str(post_id))
        return post
