"""
MongoDB client lifecycle for the profile registry.

One Motor client is created lazily per process and shared by every request;
``close_connections`` runs at shutdown.
"""
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from app.config import get_settings

_mongo_client: Optional[AsyncIOMotorClient] = None


async def get_mongo_client() -> AsyncIOMotorClient:
    """Get or create the shared client. Stored datetimes come back UTC-aware."""
    global _mongo_client
    if _mongo_client is None:
        _mongo_client = AsyncIOMotorClient(get_settings().mongo_uri, tz_aware=True)
    return _mongo_client


async def get_database(db_name: Optional[str] = None) -> AsyncIOMotorDatabase:
    """Profiles database (``MONGO_DB_NAME``) unless another name is given."""
    client = await get_mongo_client()
    return client[db_name or get_settings().mongo_db_name]


async def ping_database() -> None:
    """Round-trip to the profiles database; raises if it is unreachable."""
    db = await get_database()
    await db.command("ping")


async def close_connections() -> None:
    global _mongo_client
    if _mongo_client is not None:
        _mongo_client.close()
        _mongo_client = None
