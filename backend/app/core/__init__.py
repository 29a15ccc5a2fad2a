"""
Core module - reference lists, errors and token handling.

Validation lives in ``app.core.validation`` and is imported from there
directly, since it depends on the request schemas.
"""
from app.core.catalogs import ACADEMIC_LEVELS, DEPARTMENTS
from app.core.errors import (
    ConflictError,
    FieldError,
    InternalError,
    InvalidTokenError,
    NotFoundError,
    ProfileServiceError,
    ProfileValidationError,
)
from app.core.security import create_access_token, decode_token

__all__ = [
    "ACADEMIC_LEVELS",
    "DEPARTMENTS",
    "ConflictError",
    "FieldError",
    "InternalError",
    "InvalidTokenError",
    "NotFoundError",
    "ProfileServiceError",
    "ProfileValidationError",
    "create_access_token",
    "decode_token",
]
