# donation_api/core/db.py
import logging

from motor.motor_asyncio import AsyncIOMotorClient

from donation_api.core.config import Settings
from donation_api.core.indexes import ensure_indexes
from donation_api.repos.mongo import MongoDonationStore

logger = logging.getLogger(__name__)


def get_client(settings: Settings) -> AsyncIOMotorClient:
    # tz_aware so datetimes come back as UTC-aware, same as the in-memory store
    return AsyncIOMotorClient(settings.mongo_uri, tz_aware=True)


async def open_store(settings: Settings) -> MongoDonationStore:
    """Connect, verify the server answers, and make sure indexes exist."""
    client = get_client(settings)
    db = client[settings.mongo_db]
    collection = db[settings.mongo_collection]
    try:
        await db.command("ping")
        await ensure_indexes(collection)
    except Exception:
        client.close()
        raise
    logger.info("MongoDB connected (db=%s, collection=%s)", settings.mongo_db, settings.mongo_collection)
    return MongoDonationStore(collection, client=client)
