"""
Profile request/response schemas.

Wire names are camelCase (``fullName``, ``documentId``...); Python
attributes stay snake_case.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator
from pydantic.alias_generators import to_camel

from app.core.catalogs import ACADEMIC_LEVELS, DEPARTMENTS

DOCUMENT_ID_PATTERN = r"^[0-9A-Za-z]{5,20}$"
PHONE_PATTERN = r"^[+]?[0-9\s\-()]{7,15}$"
EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"


class CamelModel(BaseModel):
    """Base model serialized with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProfileInput(CamelModel):
    """Base for user-submitted bodies: strings are trimmed before checks."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class ProfileCreate(ProfileInput):
    """Registration form. Field order is the order errors are reported in."""
    full_name: str = Field(..., min_length=2, max_length=100, description="Full name")
    document_id: str = Field(
        ...,
        pattern=DOCUMENT_ID_PATTERN,
        description="Identity document number, 5-20 alphanumeric characters",
    )
    phone: str = Field(..., pattern=PHONE_PATTERN, description="Phone number")
    email: str = Field(..., pattern=EMAIL_PATTERN, description="Email address")
    profession: str = Field(..., min_length=2, max_length=100, description="Profession")
    city: str = Field(..., min_length=2, max_length=100, description="City of residence")
    department: str = Field(..., description="Department, one of /api/auth/lists")
    academic_level: str = Field(..., description="Academic level, one of /api/auth/lists")
    consent_given: StrictBool = Field(..., description="Data processing consent, must be true")

    @field_validator("department")
    @classmethod
    def _known_department(cls, value: str) -> str:
        if value not in DEPARTMENTS:
            raise ValueError("unknown department")
        return value

    @field_validator("academic_level")
    @classmethod
    def _known_academic_level(cls, value: str) -> str:
        if value not in ACADEMIC_LEVELS:
            raise ValueError("unknown academic level")
        return value

    @field_validator("consent_given")
    @classmethod
    def _consent_accepted(cls, value: bool) -> bool:
        if value is not True:
            raise ValueError("consent not given")
        return value


class ProfileUpdate(ProfileInput):
    """Profile update body. Only these fields can change after registration."""
    full_name: Optional[str] = Field(None, min_length=2, max_length=100)
    phone: Optional[str] = Field(None, pattern=PHONE_PATTERN)
    email: Optional[str] = Field(None, pattern=EMAIL_PATTERN)
    profession: Optional[str] = Field(None, min_length=2, max_length=100)

    @field_validator("full_name", "phone", "email", "profession", mode="before")
    @classmethod
    def _blank_means_unchanged(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class LoginRequest(ProfileInput):
    """Login body: the document id is the only credential."""
    document_id: str = Field(..., pattern=DOCUMENT_ID_PATTERN)


class ProfilePublic(CamelModel):
    """Public view of a profile record."""
    id: str = Field(..., description="Profile ID")
    full_name: str
    document_id: str
    profession: str
    city: str
    department: str
    academic_level: str
    registered_at: datetime
    last_seen_at: datetime

    @classmethod
    def from_record(cls, record: BaseModel) -> "ProfilePublic":
        """Project a stored ProfileRecord onto the public fields."""
        return cls.model_validate(record.model_dump())


class AuthData(CamelModel):
    user: ProfilePublic
    token: str = Field(..., description="Bearer token, valid for 24 hours")


class AuthResponse(CamelModel):
    """Registration/login response."""
    success: bool = True
    message: str
    data: AuthData


class ProfileData(CamelModel):
    user: ProfilePublic


class ProfileResponse(CamelModel):
    success: bool = True
    message: str
    data: ProfileData


class CatalogsData(CamelModel):
    departments: list[str]
    academic_levels: list[str]


class CatalogsResponse(CamelModel):
    success: bool = True
    data: CatalogsData


class StatsData(CamelModel):
    total_users: int = Field(..., description="Active profiles")
    today_users: int = Field(..., description="Profiles registered since 00:00 UTC")
    timestamp: datetime


class StatsResponse(CamelModel):
    success: bool = True
    data: StatsData


class MessageResponse(CamelModel):
    success: bool = True
    message: str


class FieldErrorDetail(CamelModel):
    field: str
    message: str


class ErrorResponse(CamelModel):
    """Body of every error response."""
    success: bool = False
    message: str
    errors: Optional[list[FieldErrorDetail]] = None
    field: Optional[str] = None
    error: Optional[str] = Field(None, description="Error detail, development only")
