"""
Authentication dependencies for route protection.
"""
from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.database.connections import get_database
from app.models.profile import ProfileRecord
from app.services.profile_service import ProfileService

bearer_scheme = HTTPBearer(
    auto_error=False,
    description="Token returned by /api/auth/register or /api/auth/login",
)


async def get_profile_service() -> ProfileService:
    """Dependency to get ProfileService instance."""
    db = await get_database()
    return ProfileService(db)


def get_bearer_token(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
) -> Optional[str]:
    """Raw token from ``Authorization: Bearer <token>``, or None."""
    if credentials is None:
        return None
    return credentials.credentials


async def get_current_profile(
    token: Annotated[Optional[str], Depends(get_bearer_token)],
    profile_service: Annotated[ProfileService, Depends(get_profile_service)],
) -> ProfileRecord:
    """
    Dependency to get the authenticated profile from the bearer token.

    Raises:
        InvalidTokenError: If the token is missing, invalid, expired, or the
            profile no longer exists or is inactive
    """
    return await profile_service.verify_token(token)


# Type aliases for cleaner route signatures
CurrentProfile = Annotated[ProfileRecord, Depends(get_current_profile)]
ProfileServiceDep = Annotated[ProfileService, Depends(get_profile_service)]
