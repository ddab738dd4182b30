"""Unit tests for PostService."""

from uuid import UUID, uuid4

import pytest

from core.exceptions import (
    CommentNotFoundError,
    NotAuthorizedError,
    PostAlreadyLikedError,
    PostNotFoundError,
    PostNotLikedError,
)
from domain.entities.post import Comment, Like, Post
from domain.entities.user import User
from domain.services.post_service import PostService
from tests.unit.conftest import FakeUnitOfWork


@pytest.fixture
def service(uow: FakeUnitOfWork) -> PostService:
    return PostService(lambda: uow)


def _user(user_id: UUID, name: str = "Jane") -> User:
    return User(id=user_id, name=name, email=f"{name.lower()}@example.com", password="x", avatar="a.png")


def _post(owner_id: UUID) -> Post:
    return Post(user_id=owner_id, text="Hello", name="Jane", avatar="a.png")


# --- create / read ---


class TestCreate:
    @pytest.mark.asyncio
    async def test_copies_author_name_and_avatar(
        self, service: PostService, uow: FakeUnitOfWork, user_id: UUID
    ):
        uow.users.get.return_value = _user(user_id)
        uow.posts.create.side_effect = lambda post: post

        result = await service.create(user_id, "Hello world")

        assert result.text == "Hello world"
        assert result.name == "Jane"
        assert result.avatar == "a.png"
        assert result.user_id == user_id
        assert uow.committed


class TestGetById:
    @pytest.mark.asyncio
    async def test_returns_post(self, service: PostService, uow: FakeUnitOfWork, user_id: UUID):
        post = _post(user_id)
        uow.posts.get.return_value = post

        result = await service.get_by_id(str(post.id))

        assert result is post
        uow.posts.get.assert_called_once_with(post.id)

    @pytest.mark.asyncio
    async def test_raises_not_found(self, service: PostService, uow: FakeUnitOfWork):
        uow.posts.get.return_value = None

        with pytest.raises(PostNotFoundError):
            await service.get_by_id(str(uuid4()))

    @pytest.mark.asyncio
    async def test_malformed_id_is_not_found(self, service: PostService, uow: FakeUnitOfWork):
        with pytest.raises(PostNotFoundError):
            await service.get_by_id("not-a-uuid")

        uow.posts.get.assert_not_called()


# --- delete ---


class TestDelete:
    @pytest.mark.asyncio
    async def test_owner_can_delete(self, service: PostService, uow: FakeUnitOfWork, user_id: UUID):
        post = _post(user_id)
        uow.posts.get.return_value = post

        await service.delete(str(post.id), user_id)

        uow.posts.delete.assert_called_once_with(post.id)
        assert uow.committed

    @pytest.mark.asyncio
    async def test_non_owner_cannot_delete(
        self, service: PostService, uow: FakeUnitOfWork, user_id: UUID, other_user_id: UUID
    ):
        post = _post(user_id)
        uow.posts.get.return_value = post

        with pytest.raises(NotAuthorizedError) as exc_info:
            await service.delete(str(post.id), other_user_id)

        assert exc_info.value.status_code == 401
        uow.posts.delete.assert_not_called()
        assert not uow.committed


# --- likes ---


class TestLike:
    @pytest.mark.asyncio
    async def test_prepends_like(
        self, service: PostService, uow: FakeUnitOfWork, user_id: UUID, other_user_id: UUID
    ):
        post = _post(user_id)
        post.likes = [Like(user_id=other_user_id)]
        uow.posts.get.return_value = post

        likes = await service.like(str(post.id), user_id)

        assert [like.user_id for like in likes] == [user_id, other_user_id]
        uow.posts.add_like.assert_called_once()
        assert uow.committed

    @pytest.mark.asyncio
    async def test_second_like_is_rejected(
        self, service: PostService, uow: FakeUnitOfWork, user_id: UUID
    ):
        post = _post(user_id)
        post.likes = [Like(user_id=user_id)]
        uow.posts.get.return_value = post

        with pytest.raises(PostAlreadyLikedError):
            await service.like(str(post.id), user_id)

        assert len(post.likes) == 1
        uow.posts.add_like.assert_not_called()


class TestUnlike:
    @pytest.mark.asyncio
    async def test_removes_callers_like(
        self, service: PostService, uow: FakeUnitOfWork, user_id: UUID, other_user_id: UUID
    ):
        post = _post(user_id)
        post.likes = [Like(user_id=user_id), Like(user_id=other_user_id)]
        uow.posts.get.return_value = post

        likes = await service.unlike(str(post.id), user_id)

        assert [like.user_id for like in likes] == [other_user_id]
        uow.posts.remove_like.assert_called_once_with(post.id, user_id)

    @pytest.mark.asyncio
    async def test_raises_when_not_liked(
        self, service: PostService, uow: FakeUnitOfWork, user_id: UUID
    ):
        uow.posts.get.return_value = _post(user_id)

        with pytest.raises(PostNotLikedError):
            await service.unlike(str(uuid4()), user_id)


# --- comments ---


class TestComments:
    @pytest.mark.asyncio
    async def test_add_comment_snapshots_commenter(
        self, service: PostService, uow: FakeUnitOfWork, user_id: UUID, other_user_id: UUID
    ):
        post = _post(user_id)
        uow.posts.get.return_value = post
        uow.users.get.return_value = _user(other_user_id, name="Bob")

        comments = await service.add_comment(str(post.id), other_user_id, "Nice")

        assert comments[0].text == "Nice"
        assert comments[0].name == "Bob"
        assert comments[0].user_id == other_user_id
        uow.posts.add_comment.assert_called_once()

    @pytest.mark.asyncio
    async def test_delete_own_comment(
        self, service: PostService, uow: FakeUnitOfWork, user_id: UUID
    ):
        post = _post(user_id)
        comment = Comment(user_id=user_id, text="Mine", name="Jane")
        post.comments = [comment]
        uow.posts.get.return_value = post

        comments = await service.delete_comment(str(post.id), str(comment.id), user_id)

        assert comments == []
        uow.posts.remove_comment.assert_called_once_with(post.id, comment.id)

    @pytest.mark.asyncio
    async def test_delete_missing_comment(
        self, service: PostService, uow: FakeUnitOfWork, user_id: UUID
    ):
        uow.posts.get.return_value = _post(user_id)

        with pytest.raises(CommentNotFoundError):
            await service.delete_comment(str(uuid4()), str(uuid4()), user_id)

    @pytest.mark.asyncio
    async def test_delete_someone_elses_comment(
        self, service: PostService, uow: FakeUnitOfWork, user_id: UUID, other_user_id: UUID
    ):
        post = _post(user_id)
        comment = Comment(user_id=other_user_id, text="Theirs", name="Bob")
        post.comments = [comment]
        uow.posts.get.return_value = post

        with pytest.raises(NotAuthorizedError):
            await service.delete_comment(str(post.id), str(comment.id), user_id)

        assert post.comments == [comment]
        uow.posts.remove_comment.assert_not_called()


# --- concurrent likes ---


class TestLikeRace:
    @pytest.mark.asyncio
    async def test_unique_violation_is_reported_as_already_liked(
        self, service: PostService, uow: FakeUnitOfWork, user_id: UUID
    ):
        from sqlalchemy.exc import IntegrityError

        post = _post(user_id)
        uow.posts.get.return_value = post
        uow.posts.add_like.side_effect = IntegrityError(
            "INSERT ...", {}, Exception("duplicate key value violates unique constraint")
        )

        with pytest.raises(PostAlreadyLikedError):
            await service.like(str(post.id), user_id)

        assert uow.rolled_back
        assert not uow.committed

    @pytest.mark.asyncio
    async def test_non_unique_integrity_error_is_reraised(
        self, service: PostService, uow: FakeUnitOfWork, user_id: UUID
    ):
        from sqlalchemy.exc import IntegrityError

        post = _post(user_id)
        uow.posts.get.return_value = post
        uow.posts.add_like.side_effect = IntegrityError(
            "INSERT ...", {}, Exception("FOREIGN KEY constraint failed")
        )

        with pytest.raises(IntegrityError):
            await service.like(str(post.id), user_id)


# --- delete, unknown posts ---


class TestDeleteNotFound:
    @pytest.mark.asyncio
    async def test_unknown_post(self, service: PostService, uow: FakeUnitOfWork, user_id: UUID):
        uow.posts.get.return_value = None

        with pytest.raises(PostNotFoundError):
            await service.delete(str(uuid4()), user_id)

        uow.posts.delete.assert_not_called()
        assert not uow.committed

    @pytest.mark.asyncio
    async def test_malformed_id(self, service: PostService, uow: FakeUnitOfWork, user_id: UUID):
        with pytest.raises(PostNotFoundError):
            await service.delete("not-an-id", user_id)

        uow.posts.get.assert_not_called()
