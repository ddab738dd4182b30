"""Dependency injection factories for API v1."""

from functools import lru_cache
from typing import Callable

from api.dependencies.auth import get_auth_provider
from domain.services.auth_service import AuthService
from domain.services.post_service import PostService
from domain.services.profile_service import ProfileService
from infrastructure.database.session import async_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork


def get_uow_factory() -> Callable[[], SQLAlchemyUnitOfWork]:
    """Factory for creating Unit of Work instances."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(async_session_factory)

    return factory


@lru_cache
def get_auth_service() -> AuthService:
    """Get Auth service instance."""
    return AuthService(get_uow_factory(), auth_provider=get_auth_provider())


@lru_cache
def get_profile_service() -> ProfileService:
    """Get Profile service instance."""
    return ProfileService(get_uow_factory())


@lru_cache
def get_post_service() -> PostService:
    """Get Post service instance."""
    return PostService(get_uow_factory())
