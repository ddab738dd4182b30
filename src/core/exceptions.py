"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Authentication errors (401)
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_TOKEN = "INVALID_TOKEN"

    # Authorization errors (401, "not your resource")
    NOT_AUTHORIZED = "NOT_AUTHORIZED"

    # Not found errors (404)
    USER_NOT_FOUND = "USER_NOT_FOUND"
    POST_NOT_FOUND = "POST_NOT_FOUND"
    COMMENT_NOT_FOUND = "COMMENT_NOT_FOUND"

    # Validation and state errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    NO_PROFILE = "NO_PROFILE"
    POST_ALREADY_LIKED = "POST_ALREADY_LIKED"
    POST_NOT_LIKED = "POST_NOT_LIKED"

    # Conflict errors (400, duplicate resource)
    USER_ALREADY_EXISTS = "USER_ALREADY_EXISTS"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class AuthenticationError(AppException):
    """Authentication failed."""

    def __init__(
        self,
        message: str = "No token, authorization denied",
        error_code: ErrorCode = ErrorCode.UNAUTHORIZED,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=401,
        )


class NotAuthorizedError(AppException):
    """Caller does not own the resource it is trying to change."""

    def __init__(self, message: str = "User not authorized") -> None:
        super().__init__(
            error_code=ErrorCode.NOT_AUTHORIZED,
            message=message,
            status_code=401,
        )


class InvalidCredentialsError(AppException):
    """Login failed. Never says which of email or password was wrong."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_CREDENTIALS,
            message="Invalid credentials",
            status_code=400,
        )


class UserAlreadyExistsError(AppException):
    """A user with this email is already registered."""

    def __init__(self, email: str) -> None:
        super().__init__(
            error_code=ErrorCode.USER_ALREADY_EXISTS,
            message="User already exists",
            status_code=400,
            details={"email": email},
        )


class UserNotFoundError(AppException):
    """User not found."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.USER_NOT_FOUND,
            message=f"User not found: {user_id}",
            status_code=404,
            details={"user_id": user_id},
        )


class ProfileNotFoundError(AppException):
    """The caller has not created a profile yet."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.NO_PROFILE,
            message="There is no profile for this user",
            status_code=400,
        )


class PostNotFoundError(AppException):
    """Post not found."""

    def __init__(self, post_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.POST_NOT_FOUND,
            message="Post not found",
            status_code=404,
            details={"post_id": post_id},
        )


class CommentNotFoundError(AppException):
    """Comment not found on the post."""

    def __init__(self, comment_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.COMMENT_NOT_FOUND,
            message="Comment does not exist",
            status_code=404,
            details={"comment_id": comment_id},
        )


class PostAlreadyLikedError(AppException):
    """The caller already likes this post."""

    def __init__(self, post_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.POST_ALREADY_LIKED,
            message="Post already liked",
            status_code=400,
            details={"post_id": post_id},
        )


class PostNotLikedError(AppException):
    """The caller has not liked this post."""

    def __init__(self, post_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.POST_NOT_LIKED,
            message="Post has not yet been liked",
            status_code=400,
            details={"post_id": post_id},
        )
