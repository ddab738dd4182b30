"""SQLAlchemy implementation of Profile repository."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.profile import Profile, SocialLinks
from infrastructure.database.models import ProfileModel


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_user_id(self, user_id: UUID) -> Profile | None:
        """Get the profile owned by a user."""
        stmt = select(ProfileModel).where(ProfileModel.user_id == user_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def create(self, profile: Profile) -> Profile:
        """Create a new profile."""
        model = self._to_model(profile)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, profile: Profile) -> Profile:
        """Update an existing profile."""
        stmt = select(ProfileModel).where(ProfileModel.id == profile.id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            raise ValueError(f"Profile {profile.id} not found")

        model.company = profile.company
        model.website = profile.website
        model.location = profile.location
        model.bio = profile.bio
        model.status = profile.status
        model.githubusername = profile.githubusername
        # JSON columns only track reassignment, not in-place mutation
        model.skills = list(profile.skills)
        model.social = profile.social.to_dict()

        await self._session.flush()
        return self._to_entity(model)

    def _to_entity(self, model: ProfileModel) -> Profile:
        """Convert ORM model to domain entity."""
        return Profile(
            id=model.id,
            user_id=model.user_id,
            company=model.company,
            website=model.website,
            location=model.location,
            bio=model.bio,
            status=model.status,
            githubusername=model.githubusername,
            skills=list(model.skills or []),
            social=SocialLinks(**(model.social or {})),
            date=model.date,
        )

    def _to_model(self, entity: Profile) -> ProfileModel:
        """Convert domain entity to ORM model."""
        return ProfileModel(
            id=entity.id,
            user_id=entity.user_id,
            company=entity.company,
            website=entity.website,
            location=entity.location,
            bio=entity.bio,
            status=entity.status,
            githubusername=entity.githubusername,
            skills=list(entity.skills),
            social=entity.social.to_dict(),
            date=entity.date,
        )
