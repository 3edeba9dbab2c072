# recipe_harvest/db/init.py
# Mongo connection utils (motor), wired to app startup/shutdown

from __future__ import annotations
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from recipe_harvest.core.config import settings

_client: AsyncIOMotorClient | None = None
_db: AsyncIOMotorDatabase | None = None

async def init_db() -> AsyncIOMotorDatabase:
    # Called once at startup to build the global connection
    global _client, _db
    if _db is not None:
        return _db

    _client = AsyncIOMotorClient(settings.MONGO_URI)
    _db = _client[settings.MONGO_DB]

    # Raises if the server is not ready yet
    await _db.command("ping")
    return _db

def get_db() -> AsyncIOMotorDatabase:
    # Handle used by routes; raises when not initialized
    if _db is None:
        raise RuntimeError("MongoDB is not initialized yet.")
    return _db

async def close_db() -> None:
    global _client, _db
    if _client:
        _client.close()
    _client = None
    _db = None
