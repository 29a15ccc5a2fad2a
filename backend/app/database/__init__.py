"""
Database module - MongoDB connection, collection definitions and the profile store.
"""
from app.database.connections import (
    get_mongo_client,
    close_connections,
    get_database,
    ping_database,
)
from app.database.databases import profiles_db
from app.database.profile_store import ProfileStore

__all__ = [
    "get_mongo_client",
    "close_connections",
    "get_database",
    "ping_database",
    "profiles_db",
    "ProfileStore",
]
