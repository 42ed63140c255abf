# donation_api/repos/inmemory.py
from typing import Dict, List, Optional

from bson import ObjectId

from donation_api.repos.base import now_utc, to_oid
from donation_api.schemas import DonationIn


class InMemoryDonationStore:
    """Process-local store with the same contract as MongoDonationStore.

    Ids are real ObjectIds, so the `_id` tie-break orders records the
    way MongoDB would.
    """

    def __init__(self):
        self.donations: Dict[ObjectId, dict] = {}

    async def list(self) -> List[Dict]:
        vals = sorted(
            self.donations.values(),
            key=lambda d: (d["donated_at"], d["_id"]),
            reverse=True,
        )
        return [dict(d) for d in vals]

    async def get_by_id(self, donation_id: str) -> Optional[Dict]:
        doc = self.donations.get(to_oid(donation_id))
        return dict(doc) if doc else None

    async def create(self, payload: DonationIn) -> Dict:
        now = now_utc()
        did = ObjectId()
        doc = {"_id": did, **payload.model_dump(), "created_at": now, "updated_at": now}
        self.donations[did] = doc
        return dict(doc)

    async def update_by_id(self, donation_id: str, payload: DonationIn) -> Optional[Dict]:
        doc = self.donations.get(to_oid(donation_id))
        if doc is None:
            return None
        doc.update(payload.model_dump())
        doc["updated_at"] = max(now_utc(), doc["updated_at"])
        return dict(doc)

    async def delete_by_id(self, donation_id: str) -> bool:
        return self.donations.pop(to_oid(donation_id), None) is not None

    async def close(self) -> None:
        return None
