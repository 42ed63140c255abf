# donation_api/core/indexes.py
from pymongo import DESCENDING

LIST_ORDER = [("donated_at", DESCENDING), ("_id", DESCENDING)]


async def ensure_indexes(collection):
    # backs GET /api/donations (sorted newest first)
    existing = [ix["name"] async for ix in collection.list_indexes()]
    if "donated_at_-1__id_-1" in existing:
        return
    await collection.create_index(LIST_ORDER, name="donated_at_-1__id_-1")
