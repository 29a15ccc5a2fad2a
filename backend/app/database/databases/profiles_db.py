"""
Profiles database configuration.
Stores registered profile records.

The database name comes from settings (``MONGO_DB_NAME``); collection
names and indexes are fixed here.
"""
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING


class Collections:
    """Collection names in the profiles database."""
    PROFILES = "profiles"

    # Unique indexes back the document id / email uniqueness checks
    INDEXES = {
        "profiles": [
            {"keys": [("document_id", ASCENDING)], "unique": True, "name": "uniq_document_id"},
            {"keys": [("email", ASCENDING)], "unique": True, "name": "uniq_email"},
            {"keys": [("registered_at", DESCENDING)]},
            {"keys": [("department", ASCENDING)]},
            {"keys": [("city", ASCENDING)]},
            {"keys": [("academic_level", ASCENDING)]},
        ],
    }


async def create_profile_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create indexes for profiles database collections."""
    for collection_name, indexes in Collections.INDEXES.items():
        collection = db[collection_name]
        for index_def in indexes:
            keys = index_def["keys"]
            kwargs = {k: v for k, v in index_def.items() if k != "keys"}
            await collection.create_index(keys, **kwargs)
