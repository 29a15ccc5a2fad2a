"""
Request and response schemas for API endpoints.
"""
from app.schemas.profile import (
    AuthResponse,
    CatalogsResponse,
    ErrorResponse,
    LoginRequest,
    MessageResponse,
    ProfileCreate,
    ProfilePublic,
    ProfileResponse,
    ProfileUpdate,
    StatsResponse,
)

__all__ = [
    "AuthResponse",
    "CatalogsResponse",
    "ErrorResponse",
    "LoginRequest",
    "MessageResponse",
    "ProfileCreate",
    "ProfilePublic",
    "ProfileResponse",
    "ProfileUpdate",
    "StatsResponse",
]
