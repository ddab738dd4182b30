"""Common Pydantic schemas shared across the API."""

from typing import Any

from pydantic import BaseModel, ValidationError, ValidatorFunctionWrapHandler, WrapValidator
from pydantic_core import PydanticCustomError


class ErrorResponse(BaseModel):
    """Standardized error response."""

    error_code: str
    message: str
    details: Any | None = None


class MessageResponse(BaseModel):
    """Simple message response."""

    msg: str


def error_message(message: str) -> WrapValidator:
    """Report any failure of the wrapped field with a single user-facing message.

    Put it after the field's constraints so they run inside the wrapper.
    Pair with a default and ``validate_default=True`` so a missing field
    gets the same message.
    """

    def validate(value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        try:
            return handler(value)
        except ValidationError:
            raise PydanticCustomError("value_error", message) from None

    return WrapValidator(validate)
