"""
Profile router for the authenticated profile owner.
"""
from typing import Annotated, Any

from fastapi import APIRouter, Body

from app.dependencies.auth import CurrentProfile, ProfileServiceDep
from app.schemas.profile import (
    ErrorResponse,
    MessageResponse,
    ProfileData,
    ProfilePublic,
    ProfileResponse,
    StatsData,
    StatsResponse,
)

router = APIRouter(prefix="/api/users", tags=["Profiles"])

UNAUTHORIZED = {401: {"model": ErrorResponse, "description": "Invalid or expired token"}}


@router.get(
    "/profile",
    response_model=ProfileResponse,
    summary="Get own profile",
    responses=UNAUTHORIZED,
)
async def get_profile(current_profile: CurrentProfile, profile_service: ProfileServiceDep):
    """Profile of the token owner."""
    record = await profile_service.get_profile(current_profile)
    return ProfileResponse(
        message="Profile retrieved successfully",
        data=ProfileData(user=ProfilePublic.from_record(record)),
    )


@router.put(
    "/profile",
    response_model=ProfileResponse,
    summary="Update own profile",
    responses={
        **UNAUTHORIZED,
        400: {"model": ErrorResponse, "description": "Invalid fields"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
    },
)
async def update_profile(
    current_profile: CurrentProfile,
    profile_service: ProfileServiceDep,
    payload: Annotated[Any, Body()] = None,
):
    """
    Update the editable fields of the profile.

    Only **fullName**, **phone**, **email** and **profession** can change;
    other keys are ignored and blank values leave the field unchanged.
    """
    record = await profile_service.update_profile(current_profile, payload)
    return ProfileResponse(
        message="Profile updated successfully",
        data=ProfileData(user=ProfilePublic.from_record(record)),
    )


@router.delete(
    "/profile",
    response_model=MessageResponse,
    summary="Deactivate own profile",
    responses=UNAUTHORIZED,
)
async def deactivate_profile(current_profile: CurrentProfile, profile_service: ProfileServiceDep):
    """
    Deactivate the profile. Its tokens stop working and it can no longer log in.
    """
    await profile_service.deactivate(current_profile)
    return MessageResponse(message="Profile deactivated")


@router.post(
    "/logout",
    response_model=MessageResponse,
    summary="Logout",
    responses=UNAUTHORIZED,
)
async def logout(current_profile: CurrentProfile, profile_service: ProfileServiceDep):
    """
    Record the logout time. The client is expected to discard its token,
    which otherwise stays valid until it expires.
    """
    await profile_service.logout(current_profile)
    return MessageResponse(message="Logged out successfully")


@router.get(
    "/stats",
    response_model=StatsResponse,
    summary="Registration statistics",
)
async def stats(profile_service: ProfileServiceDep):
    """Number of active profiles and of profiles registered today (UTC)."""
    result = await profile_service.stats()
    return StatsResponse(
        data=StatsData(
            total_users=result.total_users,
            today_users=result.today_users,
            timestamp=result.timestamp,
        )
    )
