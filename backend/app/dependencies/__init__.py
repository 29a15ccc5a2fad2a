"""
Dependencies for dependency injection in routes.
"""
from app.dependencies.auth import (
    CurrentProfile,
    ProfileServiceDep,
    get_bearer_token,
    get_current_profile,
    get_profile_service,
)

__all__ = [
    "CurrentProfile",
    "ProfileServiceDep",
    "get_bearer_token",
    "get_current_profile",
    "get_profile_service",
]
