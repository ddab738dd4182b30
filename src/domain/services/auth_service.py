"""Auth service: registration, login and the current user."""

from typing import Callable
from uuid import UUID

import structlog
from sqlalchemy.exc import IntegrityError

from core.exceptions import (
    InvalidCredentialsError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from core.security import gravatar_url, hash_password, verify_password
from domain.entities.user import User
from domain.repositories.unit_of_work import IUnitOfWork
from infrastructure.auth.provider import IAuthProvider, TokenUser
from infrastructure.database.errors import is_unique_violation

logger = structlog.get_logger()


class AuthService:
    """Service layer for account and token business logic."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        auth_provider: IAuthProvider,
    ) -> None:
        self._uow_factory = uow_factory
        self._auth_provider = auth_provider

    async def register(self, name: str, email: str, password: str) -> str:
        """Create an account and return a token for it.

        Raises:
            UserAlreadyExistsError: If the email is already registered.
        """
        async with self._uow_factory() as uow:
            existing = await uow.users.get_by_email(email.strip().lower())
            if existing:
                raise UserAlreadyExistsError(email)

            user = User(
                name=name,
                email=email,
                password=hash_password(password),
                avatar=gravatar_url(email),
            )

            try:
                created = await uow.users.create(user)
                await uow.commit()
            except IntegrityError as exc:
                await uow.rollback()
                # A concurrent registration won the unique email index
                if is_unique_violation(exc):
                    raise UserAlreadyExistsError(email) from exc
                raise

        logger.info("user_registered", user_id=str(created.id))
        return self._auth_provider.create_token(TokenUser(id=created.id))

    async def login(self, email: str, password: str) -> str:
        """Check credentials and return a token.

        Unknown email and wrong password raise the same error.
        """
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_email(email.strip().lower())

        if not user or not verify_password(password, user.password):
            raise InvalidCredentialsError()

        logger.info("user_logged_in", user_id=str(user.id))
        return self._auth_provider.create_token(TokenUser(id=user.id))

    async def get_user(self, user_id: UUID) -> User:
        """Get the account behind an authenticated request."""
        async with self._uow_factory() as uow:
            user = await uow.users.get(user_id)
            if not user:
                raise UserNotFoundError(str(user_id))
            return user
