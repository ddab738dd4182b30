"""SQLAlchemy implementation of Post repository."""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from domain.entities.post import Comment, Like, Post
from infrastructure.database.models import CommentModel, PostLikeModel, PostModel


class SQLAlchemyPostRepository:
    """SQLAlchemy implementation of IPostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    def _select_with_children(self):  # type: ignore[no-untyped-def]
        """Select posts with likes and comments eagerly loaded."""
        return select(PostModel).options(
            selectinload(PostModel.likes),
            selectinload(PostModel.comments),
        )

    async def get(self, id: UUID) -> Post | None:
        """Get a post with its likes and comments."""
        stmt = self._select_with_children().where(PostModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[Post]:
        """Get all posts, newest first."""
        stmt = self._select_with_children().order_by(PostModel.date.desc())
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, post: Post) -> Post:
        """Create a new post."""
        model = PostModel(
            id=post.id,
            user_id=post.user_id,
            text=post.text,
            name=post.name,
            avatar=post.avatar,
            date=post.date,
        )
        self._session.add(model)
        await self._session.flush()
        return Post(
            id=model.id,
            user_id=model.user_id,
            text=model.text,
            name=model.name,
            avatar=model.avatar,
            date=model.date,
        )

    async def delete(self, id: UUID) -> bool:
        """Delete a post; likes and comments go with it."""
        stmt = self._select_with_children().where(PostModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    async def add_like(self, post_id: UUID, like: Like) -> None:
        """Store a like on a post."""
        model = PostLikeModel(post_id=post_id, user_id=like.user_id, date=like.date)
        self._session.add(model)
        await self._session.flush()

    async def remove_like(self, post_id: UUID, user_id: UUID) -> None:
        """Remove a user's like from a post."""
        stmt = delete(PostLikeModel).where(
            PostLikeModel.post_id == post_id,
            PostLikeModel.user_id == user_id,
        )
        await self._session.execute(stmt)
        await self._session.flush()

    async def add_comment(self, post_id: UUID, comment: Comment) -> None:
        """Store a comment on a post."""
        model = CommentModel(
            id=comment.id,
            post_id=post_id,
            user_id=comment.user_id,
            text=comment.text,
            name=comment.name,
            avatar=comment.avatar,
            date=comment.date,
        )
        self._session.add(model)
        await self._session.flush()

    async def remove_comment(self, post_id: UUID, comment_id: UUID) -> None:
        """Remove a comment from a post."""
        stmt = delete(CommentModel).where(
            CommentModel.post_id == post_id,
            CommentModel.id == comment_id,
        )
        await self._session.execute(stmt)
        await self._session.flush()

    def _to_entity(self, model: PostModel) -> Post:
        """Convert ORM model (with children loaded) to domain entity."""
        return Post(
            id=model.id,
            user_id=model.user_id,
            text=model.text,
            name=model.name,
            avatar=model.avatar,
            date=model.date,
            likes=[Like(user_id=like.user_id, date=like.date) for like in model.likes],
            comments=[
                Comment(
                    id=comment.id,
                    user_id=comment.user_id,
                    text=comment.text,
                    name=comment.name,
                    avatar=comment.avatar,
                    date=comment.date,
                )
                for comment in model.comments
            ],
        )
