# donation_api/repos/mongo.py
from typing import Dict, List, Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo import ReturnDocument

from donation_api.core.indexes import LIST_ORDER
from donation_api.repos.base import now_utc, to_oid
from donation_api.schemas import DonationIn


class MongoDonationStore:
    def __init__(self, collection: AsyncIOMotorCollection, client: Optional[AsyncIOMotorClient] = None):
        self.collection = collection
        self._client = client

    async def list(self) -> List[Dict]:
        """All donations, newest `donated_at` first; ties newest-inserted first."""
        cur = self.collection.find({}).sort(LIST_ORDER)
        return [d async for d in cur]

    async def get_by_id(self, donation_id: str) -> Optional[Dict]:
        _oid = to_oid(donation_id)
        if _oid is None:
            return None
        return await self.collection.find_one({"_id": _oid})

    async def create(self, payload: DonationIn) -> Dict:
        now = now_utc()
        doc = {**payload.model_dump(), "created_at": now, "updated_at": now}
        res = await self.collection.insert_one(doc)
        doc["_id"] = res.inserted_id
        return doc

    async def update_by_id(self, donation_id: str, payload: DonationIn) -> Optional[Dict]:
        _oid = to_oid(donation_id)
        if _oid is None:
            return None
        # full replacement of the user fields; _id and created_at stay
        return await self.collection.find_one_and_update(
            {"_id": _oid},
            {"$set": {**payload.model_dump(), "updated_at": now_utc()}},
            return_document=ReturnDocument.AFTER,
        )

    async def delete_by_id(self, donation_id: str) -> bool:
        _oid = to_oid(donation_id)
        if _oid is None:
            return False
        res = await self.collection.delete_one({"_id": _oid})
        return res.deleted_count == 1

    async def close(self) -> None:
        if self._client is not None:
            self._client.close()
