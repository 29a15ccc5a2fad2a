"""
Profile model for the profiles database.
"""
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProfileRecord(BaseModel):
    """
    Profile document model for MongoDB profiles_db.profiles collection.
    """
    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    full_name: str = Field(..., description="Full name, capitalized per word")
    document_id: str = Field(..., description="Unique identity document, used to log in")
    phone: str = Field(..., description="Phone number")
    email: str = Field(..., description="Unique lower-cased email address")
    profession: str = Field(..., description="Profession")
    city: str = Field(..., description="City of residence")
    department: str = Field(..., description="Department from the reference list")
    academic_level: str = Field(..., description="Academic level from the reference list")
    consent_given: bool = Field(default=True, description="Always true once stored")
    registered_at: datetime = Field(..., description="Registration timestamp")
    last_seen_at: datetime = Field(..., description="Last login/logout timestamp")
    is_active: bool = Field(default=True, description="False once the profile is deactivated")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("registered_at", "last_seen_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # MongoDB hands back naive datetimes that are UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "ProfileRecord":
        """Build a record from a raw MongoDB document."""
        document = dict(document)
        document["_id"] = str(document["_id"])
        return cls(**document)
