"""
Domain errors raised by the validation, storage and service layers.

Each error carries the HTTP status it maps to; the handlers registered in
``app.main`` turn them into JSON responses.
"""
from typing import NamedTuple, Optional


class FieldError(NamedTuple):
    """A single failing field and the message to show for it."""
    field: str
    message: str


class ProfileServiceError(Exception):
    """Base class for all errors surfaced to API clients."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ProfileValidationError(ProfileServiceError):
    """One or more input fields failed validation."""

    status_code = 400
    default_message = "Invalid input data"

    def __init__(self, errors: list[FieldError], message: Optional[str] = None):
        super().__init__(message)
        self.errors = list(errors)

    @property
    def fields(self) -> list[str]:
        return [error.field for error in self.errors]


class ConflictError(ProfileServiceError):
    """A unique field (document id or email) is already taken."""

    status_code = 409
    default_message = "A profile with this data already exists"

    messages = {
        "documentId": "A profile with this document id already exists",
        "email": "A profile with this email address already exists",
    }

    def __init__(self, field: str, message: Optional[str] = None):
        super().__init__(message or self.messages.get(field))
        self.field = field


class NotFoundError(ProfileServiceError):
    status_code = 404
    default_message = "Profile not found. Please register first."


class InvalidTokenError(ProfileServiceError):
    """
    Token is missing, malformed, expired or points to an unusable profile.

    The message is fixed so callers cannot tell which check failed.
    """

    status_code = 401
    default_message = "Invalid or expired token"

    def __init__(self):
        super().__init__(self.default_message)


class InternalError(ProfileServiceError):
    """Storage or signing failure; details are only logged."""

    status_code = 500
    default_message = "Internal server error"
