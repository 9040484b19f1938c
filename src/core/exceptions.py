"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Authentication errors (401)
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    NOT_AUTHENTICATED = "NOT_AUTHENTICATED"

    # Not found errors (404)
    USER_NOT_FOUND = "USER_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    WEAK_PASSWORD = "WEAK_PASSWORD"
    INVALID_SETTINGS = "INVALID_SETTINGS"
    INVALID_PROFILE = "INVALID_PROFILE"

    # Conflict errors (409)
    DUPLICATE_NICKNAME = "DUPLICATE_NICKNAME"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

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


class DuplicateNicknameError(AppException):
    """Nickname is already used by another account (case-insensitive)."""

    def __init__(self, nickname: str) -> None:
        super().__init__(
            error_code=ErrorCode.DUPLICATE_NICKNAME,
            message="Nickname already taken",
            status_code=409,
            details={"nickname": nickname},
        )


class WeakPasswordError(AppException):
    """Password does not satisfy the minimum length policy."""

    def __init__(self, min_length: int) -> None:
        super().__init__(
            error_code=ErrorCode.WEAK_PASSWORD,
            message=f"Password must be at least {min_length} characters",
            status_code=400,
            details={"min_length": min_length},
        )


class InvalidCredentialsError(AppException):
    """Nickname/password mismatch.

    The message is identical whether the nickname is unknown or the password
    is wrong, so callers cannot enumerate accounts.
    """

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_CREDENTIALS,
            message="Invalid nickname or password",
            status_code=401,
        )


class NotFoundError(AppException):
    """User id is not present in the credential store."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.USER_NOT_FOUND,
            message=f"User not found: {user_id}",
            status_code=404,
            details={"user_id": user_id},
        )


class InvalidSettingsError(AppException):
    """A settings update carried an unsupported value."""

    def __init__(self, field: str, value: Any) -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_SETTINGS,
            message=f"Unsupported value for setting '{field}'",
            status_code=400,
            details={"field": field, "value": value},
        )


class NotAuthenticatedError(AppException):
    """No active session."""

    def __init__(self, message: str = "Sign in required") -> None:
        super().__init__(
            error_code=ErrorCode.NOT_AUTHENTICATED,
            message=message,
            status_code=401,
        )


class InvalidProfileError(AppException):
    """A profile update carried a value of the wrong type or an unknown plan.

    The rejected value is left out of the details, since profile fields hold
    contact data.
    """

    def __init__(self, field: str) -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_PROFILE,
            message=f"Invalid value for profile field '{field}'",
            status_code=400,
            details={"field": field},
        )
