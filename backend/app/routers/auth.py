"""
Authentication router for registration, login, token verification and
the reference lists used by the registration form.
"""
from typing import Annotated, Any

from fastapi import APIRouter, Body, status

from app.dependencies.auth import CurrentProfile, ProfileServiceDep
from app.schemas.profile import (
    AuthData,
    AuthResponse,
    CatalogsData,
    CatalogsResponse,
    ErrorResponse,
    ProfileData,
    ProfilePublic,
    ProfileResponse,
)

router = APIRouter(prefix="/api/auth", tags=["Authentication"])


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new profile",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid fields"},
        409: {"model": ErrorResponse, "description": "Document id or email already registered"},
    },
)
async def register(
    profile_service: ProfileServiceDep,
    payload: Annotated[Any, Body()] = None,
):
    """
    Register a new profile and return it with a bearer token.

    - **fullName**, **profession**, **city**: 2-100 characters
    - **documentId**: 5-20 alphanumeric characters (must be unique)
    - **email**: valid email address (must be unique)
    - **department**, **academicLevel**: values from `GET /api/auth/lists`
    - **consentGiven**: must be `true`

    Every invalid field is reported in one response.
    """
    result = await profile_service.register(payload)
    return AuthResponse(
        message="Profile registered successfully",
        data=AuthData(user=ProfilePublic.from_record(result.record), token=result.token),
    )


@router.post(
    "/login",
    response_model=AuthResponse,
    summary="Login with a document id",
    responses={
        400: {"model": ErrorResponse, "description": "Malformed document id"},
        404: {"model": ErrorResponse, "description": "No active profile with that document id"},
    },
)
async def login(
    profile_service: ProfileServiceDep,
    payload: Annotated[Any, Body()] = None,
):
    """
    Authenticate with `{"documentId": "..."}` to receive a new bearer token.
    """
    result = await profile_service.login(payload)
    return AuthResponse(
        message="Login successful",
        data=AuthData(user=ProfilePublic.from_record(result.record), token=result.token),
    )


@router.get(
    "/verify",
    response_model=ProfileResponse,
    summary="Verify a bearer token",
    responses={401: {"model": ErrorResponse, "description": "Invalid or expired token"}},
)
async def verify(current_profile: CurrentProfile):
    """
    Check the `Authorization: Bearer <token>` header and return its profile.
    """
    return ProfileResponse(
        message="Token is valid",
        data=ProfileData(user=ProfilePublic.from_record(current_profile)),
    )


@router.get(
    "/lists",
    response_model=CatalogsResponse,
    summary="Department and academic level choices",
)
async def lists(profile_service: ProfileServiceDep):
    """Valid values for the `department` and `academicLevel` fields."""
    return CatalogsResponse(data=CatalogsData(**profile_service.list_catalogs()))
