"""
Service layer for business logic.
"""
from app.services.profile_service import AuthResult, ProfileService, ProfileStats

__all__ = [
    "AuthResult",
    "ProfileService",
    "ProfileStats",
]
