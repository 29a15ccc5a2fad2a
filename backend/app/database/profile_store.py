"""
MongoDB access for profile records.

The store only reads and writes documents; deciding when a lookup means a
conflict is left to the service. Duplicate key errors raised by the unique
indexes are turned into ``ConflictError`` so concurrent registrations that
both pass the service pre-check still fail cleanly.
"""
import logging
from contextlib import contextmanager
from datetime import datetime
from typing import Any, Optional

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError, PyMongoError

from app.core.errors import ConflictError, InternalError
from app.database.databases import profiles_db
from app.models.profile import ProfileRecord

logger = logging.getLogger(__name__)


def _duplicate_field(exc: DuplicateKeyError) -> str:
    """Name the wire field behind a duplicate key error, document id first."""
    details = exc.details or {}
    key_pattern = details.get("keyPattern") or details.get("keyValue") or {}
    if "document_id" in key_pattern:
        return "documentId"
    if "email" in key_pattern:
        return "email"
    message = str(exc)
    if "email" in message and "document_id" not in message:
        return "email"
    return "documentId"


@contextmanager
def _storage_errors(operation: str):
    try:
        yield
    except DuplicateKeyError as exc:
        raise ConflictError(_duplicate_field(exc)) from exc
    except PyMongoError as exc:
        logger.error("Storage failure during %s: %s", operation, exc)
        raise InternalError() from exc


class ProfileStore:
    """Repository over the profiles collection."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with the profiles database."""
        self.db = db
        self.collection = db[profiles_db.Collections.PROFILES]

    async def _find_one(self, query: dict[str, Any]) -> Optional[ProfileRecord]:
        with _storage_errors("find"):
            document = await self.collection.find_one(query)
        if not document:
            return None
        return ProfileRecord.from_document(document)

    async def find_by_id(self, record_id: str) -> Optional[ProfileRecord]:
        """
        Get a profile by ID.

        Args:
            record_id: Profile ObjectId as string

        Returns:
            ProfileRecord or None if the ID is malformed or unknown
        """
        try:
            object_id = ObjectId(record_id)
        except (InvalidId, TypeError):
            return None
        return await self._find_one({"_id": object_id})

    async def find_by_document_id(self, document_id: str) -> Optional[ProfileRecord]:
        return await self._find_one({"document_id": document_id})

    async def find_by_email(self, email: str) -> Optional[ProfileRecord]:
        return await self._find_one({"email": email})

    async def find_active_by_document_id(self, document_id: str) -> Optional[ProfileRecord]:
        """Lookup used by login: inactive profiles are invisible."""
        return await self._find_one({"document_id": document_id, "is_active": True})

    async def insert(self, document: dict[str, Any]) -> ProfileRecord:
        """
        Insert a new profile document.

        Raises:
            ConflictError: If the document id or email is already stored
            InternalError: On any other storage failure
        """
        document = dict(document)
        with _storage_errors("insert"):
            result = await self.collection.insert_one(document)
        document["_id"] = result.inserted_id
        return ProfileRecord.from_document(document)

    async def update_by_id(
        self,
        record_id: str,
        changes: dict[str, Any],
    ) -> Optional[ProfileRecord]:
        """Apply ``$set`` changes and return the updated record."""
        object_id = ObjectId(record_id)
        if changes:
            with _storage_errors("update"):
                await self.collection.update_one({"_id": object_id}, {"$set": changes})
        return await self._find_one({"_id": object_id})

    async def count_active(self) -> int:
        with _storage_errors("count"):
            return await self.collection.count_documents({"is_active": True})

    async def count_created_since(self, since: datetime) -> int:
        with _storage_errors("count"):
            return await self.collection.count_documents({"registered_at": {"$gte": since}})
