"""Authentication dependencies for FastAPI."""

from typing import Annotated

from fastapi import Depends, Header
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from core.exceptions import AuthenticationError, ErrorCode
from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.auth.provider import TokenUser

# Security scheme for OpenAPI docs
security = HTTPBearer(auto_error=False)

# Singleton auth provider
_auth_provider: JWTAuthProvider | None = None


def get_auth_provider() -> JWTAuthProvider:
    """Get or create the auth provider singleton."""
    global _auth_provider
    if _auth_provider is None:
        _auth_provider = JWTAuthProvider()
    return _auth_provider


async def get_current_user(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None,
        Depends(security),
    ],
    x_auth_token: Annotated[str | None, Header()] = None,
    auth_provider: JWTAuthProvider = Depends(get_auth_provider),
) -> TokenUser:
    """
    Dependency to get the current authenticated user.

    Reads the bearer token from the Authorization header, falling back to
    the legacy ``x-auth-token`` header.

    Raises:
        AuthenticationError: If no token provided or token is invalid
    """
    token = credentials.credentials if credentials else x_auth_token
    if not token:
        raise AuthenticationError(
            message="No token, authorization denied",
            error_code=ErrorCode.UNAUTHORIZED,
        )

    user = await auth_provider.validate_token(token)

    if not user:
        raise AuthenticationError(
            message="Token is not valid",
            error_code=ErrorCode.INVALID_TOKEN,
        )

    return user


# Type alias for convenience in route handlers
CurrentUser = Annotated[TokenUser, Depends(get_current_user)]
