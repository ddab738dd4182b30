"""Post domain entities."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass
class Like:
    """A user's like on a post."""

    user_id: UUID
    date: datetime = field(default_factory=datetime.utcnow)


@dataclass
class Comment:
    """A comment on a post, with the author's name/avatar as of posting."""

    user_id: UUID
    text: str
    name: str
    avatar: str | None = None
    id: UUID = field(default_factory=uuid4)
    date: datetime = field(default_factory=datetime.utcnow)


@dataclass
class Post:
    """Domain entity for a Post.

    ``name`` and ``avatar`` are copied from the author when the post is
    created and never resynced. ``likes`` and ``comments`` are newest first.
    """

    user_id: UUID
    text: str
    name: str
    avatar: str | None = None
    id: UUID = field(default_factory=uuid4)
    likes: list[Like] = field(default_factory=list)
    comments: list[Comment] = field(default_factory=list)
    date: datetime = field(default_factory=datetime.utcnow)

    def is_liked_by(self, user_id: UUID) -> bool:
        return any(like.user_id == user_id for like in self.likes)

    def add_like(self, user_id: UUID) -> Like:
        """Prepend a like for the user."""
        like = Like(user_id=user_id)
        self.likes.insert(0, like)
        return like

    def remove_like(self, user_id: UUID) -> None:
        self.likes = [like for like in self.likes if like.user_id != user_id]

    def find_comment(self, comment_id: UUID) -> Comment | None:
        return next((c for c in self.comments if c.id == comment_id), None)

    def add_comment(self, comment: Comment) -> None:
        """Prepend a comment."""
        self.comments.insert(0, comment)

    def remove_comment(self, comment_id: UUID) -> None:
        self.comments = [c for c in self.comments if c.id != comment_id]
