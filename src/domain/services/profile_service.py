"""Profile service layer with business logic."""

from typing import Any, Callable, Optional
from uuid import UUID

import structlog

from core.exceptions import ProfileNotFoundError, UserNotFoundError
from domain.entities.profile import PROFILE_TEXT_FIELDS, Profile, ProfileWithUser
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()

SOCIAL_FIELDS = ("youtube", "twitter", "facebook", "linkedin", "instagram")


def parse_skills(skills: str) -> list[str]:
    """Split a comma-separated skills string into trimmed, non-empty items."""
    return [skill.strip() for skill in skills.split(",") if skill.strip()]


def build_profile_changes(fields: dict[str, Optional[str]]) -> dict[str, Any]:
    """Build a partial update document from request fields.

    Only non-empty values are included, so anything the caller left out
    keeps its stored value.
    """
    changes: dict[str, Any] = {
        name: fields[name] for name in PROFILE_TEXT_FIELDS if fields.get(name)
    }

    skills = parse_skills(fields.get("skills") or "")
    if skills:
        changes["skills"] = skills

    social = {name: fields[name] for name in SOCIAL_FIELDS if fields.get(name)}
    if social:
        changes["social"] = social

    return changes


class ProfileService:
    """Service layer for Profile business logic."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_for_user(self, user_id: UUID) -> ProfileWithUser:
        """Get the user's profile with the owner's name and avatar."""
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_by_user_id(user_id)
            if not profile:
                raise ProfileNotFoundError()

            user = await uow.users.get(user_id)
            if not user:
                raise UserNotFoundError(str(user_id))

            return ProfileWithUser(profile=profile, user=user.summary())

    async def upsert(self, user_id: UUID, fields: dict[str, Optional[str]]) -> Profile:
        """Create the user's profile or apply a partial update to it.

        Always keyed by the authenticated user id.
        """
        changes = build_profile_changes(fields)

        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_by_user_id(user_id)

            if profile:
                profile.apply(changes)
                saved = await uow.profiles.update(profile)
                logger.info("profile_updated", user_id=str(user_id), fields=sorted(changes))
            else:
                profile = Profile(user_id=user_id, status=changes.get("status", ""))
                profile.apply(changes)
                saved = await uow.profiles.create(profile)
                logger.info("profile_created", user_id=str(user_id))

            await uow.commit()
            return saved
