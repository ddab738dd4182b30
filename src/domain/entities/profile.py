"""Profile domain entity."""

from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any
from uuid import UUID, uuid4

from domain.entities.user import UserSummary


@dataclass
class SocialLinks:
    """Social network links shown on a profile."""

    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None

    def merge(self, links: dict[str, str]) -> None:
        """Overwrite only the links given, keep the rest."""
        for name, value in links.items():
            setattr(self, name, value)

    def to_dict(self) -> dict[str, str]:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name)}


PROFILE_TEXT_FIELDS = (
    "company",
    "website",
    "location",
    "bio",
    "status",
    "githubusername",
)


@dataclass
class Profile:
    """Domain entity for a user's career profile (one per user)."""

    user_id: UUID
    status: str
    skills: list[str] = field(default_factory=list)
    id: UUID = field(default_factory=uuid4)
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    githubusername: str | None = None
    social: SocialLinks = field(default_factory=SocialLinks)
    date: datetime = field(default_factory=datetime.utcnow)

    def apply(self, changes: dict[str, Any]) -> None:
        """Apply a partial update document.

        Keys missing from ``changes`` are left untouched; ``social`` is
        merged link by link.
        """
        for name, value in changes.items():
            if name == "social":
                self.social.merge(value)
            elif name == "skills" or name in PROFILE_TEXT_FIELDS:
                setattr(self, name, value)
            else:
                raise ValueError(f"Unknown profile field: {name}")


@dataclass(frozen=True, slots=True)
class ProfileWithUser:
    """Read-only value object: a Profile bundled with its owner's summary."""

    profile: Profile
    user: UserSummary
