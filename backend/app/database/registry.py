"""
Startup database setup.
Ensures the collections used by the service carry their indexes.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorClient

from app.config import get_settings
from app.database.databases import profiles_db

logger = logging.getLogger(__name__)


async def create_indexes(client: AsyncIOMotorClient) -> None:
    """Create necessary indexes for all databases."""
    db_name = get_settings().mongo_db_name
    db = client[db_name]
    await profiles_db.create_profile_indexes(db)
    logger.info("Indexes ensured on %s", db_name)
