"""JWT authentication provider implementation.

Tokens are signed with a shared secret (HS256 by default).

Payload structure:
    {
        "sub": "user-uuid",
        "iat": 1234567000,
        "exp": 1234567890
    }
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

from core.config import settings
from infrastructure.auth.provider import TokenUser

logger = logging.getLogger(__name__)


class JWTAuthProvider:
    """JWT-based authentication provider.

    Issues tokens at registration/login and validates the bearer token
    presented on every protected request.
    """

    def __init__(
        self,
        secret_key: str = settings.jwt_secret_key,
        algorithm: str = settings.jwt_algorithm,
        expire_minutes: int = settings.jwt_expire_minutes,
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expire_minutes = expire_minutes

    async def validate_token(self, token: str) -> Optional[TokenUser]:
        """
        Validate a JWT token and extract the user id.

        Checks signature and expiry against the shared secret.

        Args:
            token: The JWT to validate

        Returns:
            TokenUser if valid, None if invalid or expired
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
            )
        except JWTError as e:
            logger.debug("Rejected token: %s", e)
            return None

        user_id = payload.get("sub")
        if not user_id:
            return None

        try:
            return TokenUser(id=UUID(user_id))
        except (TypeError, ValueError):
            logger.debug("Rejected token with malformed sub claim")
            return None

    def create_token(self, user: TokenUser) -> str:
        """
        Create a signed JWT token for a user.

        Args:
            user: The user to create a token for

        Returns:
            The generated JWT string
        """
        now = datetime.now(timezone.utc)
        payload: dict = {
            "sub": str(user.id),
            "iat": now,
            "exp": now + timedelta(minutes=self._expire_minutes),
        }

        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
