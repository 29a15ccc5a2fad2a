"""
Profile service: registration, login and profile management.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from bson import ObjectId
from jose.exceptions import JOSEError
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.config import get_settings
from app.core.catalogs import get_catalogs
from app.core.errors import ConflictError, InternalError, InvalidTokenError, NotFoundError
from app.core.security import create_access_token, decode_token
from app.core.validation import validate_and_normalize, validate_login, validate_update
from app.database.profile_store import ProfileStore
from app.models.profile import ProfileRecord

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class AuthResult:
    """A profile together with a freshly issued token."""
    record: ProfileRecord
    token: str


@dataclass
class ProfileStats:
    total_users: int
    today_users: int
    timestamp: datetime


class ProfileService:
    """Service for profile operations."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with the profiles database."""
        self.db = db
        self.store = ProfileStore(db)
        self.settings = get_settings()

    def issue_token(self, record: ProfileRecord) -> str:
        """Mint a bearer token for a stored profile."""
        return self._sign(record.id, record.document_id)

    def _sign(self, record_id: str, document_id: str) -> str:
        try:
            return create_access_token(record_id=record_id, document_id=document_id)
        except JOSEError as exc:
            logger.error("Token signing failed for profile %s: %s", record_id, exc)
            raise InternalError() from exc

    async def register(self, payload: Any) -> AuthResult:
        """
        Register a new profile.

        Args:
            payload: Decoded registration body

        Returns:
            AuthResult with the stored record and a new token

        Raises:
            ProfileValidationError: If any field is invalid
            ConflictError: If the document id or email is already registered
        """
        profile = validate_and_normalize(payload)

        # Document id collisions are reported before email collisions
        if await self.store.find_by_document_id(profile.document_id):
            logger.warning("Registration rejected, document id taken: %s", profile.document_id)
            raise ConflictError("documentId")
        if await self.store.find_by_email(profile.email):
            logger.warning("Registration rejected, email taken (document %s)", profile.document_id)
            raise ConflictError("email")

        # Signed before the insert so a signing failure leaves nothing stored
        record_id = ObjectId()
        token = self._sign(str(record_id), profile.document_id)

        now = utcnow()
        document = {
            "_id": record_id,
            **profile.model_dump(),
            "registered_at": now,
            "last_seen_at": now,
            "is_active": True,
        }
        record = await self.store.insert(document)
        logger.info("Registered profile %s (document %s)", record.id, record.document_id)

        return AuthResult(record=record, token=token)

    async def login(self, payload: Any) -> AuthResult:
        """
        Authenticate by document id and refresh the last-seen timestamp.

        Raises:
            ProfileValidationError: If the document id is malformed
            NotFoundError: If no active profile has that document id
        """
        document_id = validate_login(payload)

        record = await self.store.find_active_by_document_id(document_id)
        if record is None:
            logger.info("Login failed, unknown document id: %s", document_id)
            raise NotFoundError()

        record = await self._touch(record)
        logger.info("Profile %s logged in", record.id)

        return AuthResult(record=record, token=self.issue_token(record))

    async def verify_token(self, token: str | None) -> ProfileRecord:
        """
        Resolve a bearer token to its active profile.

        Every failure (missing, malformed, expired, orphaned or inactive)
        raises the same InvalidTokenError.
        """
        if not token:
            raise InvalidTokenError()

        try:
            payload = decode_token(token)
        except JOSEError:
            raise InvalidTokenError()

        record_id = payload.get("sub")
        if not record_id:
            raise InvalidTokenError()

        record = await self.store.find_by_id(record_id)
        if record is None or not record.is_active:
            raise InvalidTokenError()

        return record

    async def get_profile(self, record: ProfileRecord) -> ProfileRecord:
        return record

    async def update_profile(self, record: ProfileRecord, payload: Any) -> ProfileRecord:
        """
        Update the editable fields of a profile.

        Raises:
            ProfileValidationError: If any submitted field is invalid
            ConflictError: If the new email belongs to another profile
        """
        changes = validate_update(payload)

        new_email = changes.get("email")
        if new_email is not None and new_email != record.email:
            existing = await self.store.find_by_email(new_email)
            if existing is not None and existing.id != record.id:
                logger.warning("Profile %s update rejected, email taken", record.id)
                raise ConflictError("email")

        updated = await self.store.update_by_id(record.id, changes)
        if updated is None:
            raise InvalidTokenError()

        logger.info("Profile %s updated fields: %s", record.id, ", ".join(sorted(changes)) or "none")
        return updated

    async def logout(self, record: ProfileRecord) -> None:
        """Refresh last-seen. The token itself stays valid until it expires."""
        await self._touch(record)
        logger.info("Profile %s logged out", record.id)

    async def deactivate(self, record: ProfileRecord) -> None:
        """Soft-delete: the profile can no longer log in or use its tokens."""
        await self.store.update_by_id(record.id, {"is_active": False})
        logger.info("Profile %s deactivated", record.id)

    def list_catalogs(self) -> dict[str, list[str]]:
        return get_catalogs()

    async def stats(self) -> ProfileStats:
        """Active profile count and registrations since midnight UTC."""
        now = utcnow()
        midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
        return ProfileStats(
            total_users=await self.store.count_active(),
            today_users=await self.store.count_created_since(midnight),
            timestamp=now,
        )

    async def _touch(self, record: ProfileRecord) -> ProfileRecord:
        updated = await self.store.update_by_id(record.id, {"last_seen_at": utcnow()})
        return updated or record
