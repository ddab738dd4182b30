"""User domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass
class User:
    """Domain entity for a registered account."""

    name: str
    email: str
    password: str  # bcrypt hash, never the plaintext
    avatar: str | None = None
    id: UUID = field(default_factory=uuid4)
    date: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        """Normalize email so uniqueness is case-insensitive."""
        self.email = self.email.strip().lower()

    def summary(self) -> "UserSummary":
        """Public snapshot of the user (no email, no password)."""
        return UserSummary(id=self.id, name=self.name, avatar=self.avatar)


@dataclass(frozen=True, slots=True)
class UserSummary:
    """Read-only value object: the fields shown next to a user's content."""

    id: UUID
    name: str
    avatar: str | None = None
