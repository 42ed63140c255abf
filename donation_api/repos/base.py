# donation_api/repos/base.py
from datetime import datetime, timezone
from typing import Dict, List, Optional, Protocol

from bson import ObjectId
from bson.errors import InvalidId

from donation_api.schemas import DonationIn, utc_ms


def now_utc() -> datetime:
    return utc_ms(datetime.now(timezone.utc))


def to_oid(donation_id: str) -> Optional[ObjectId]:
    """Parse an id; None when it is not a valid ObjectId (treated as absent)."""
    if not isinstance(donation_id, str):
        return None
    try:
        return ObjectId(donation_id)
    except InvalidId:
        return None


class DonationStore(Protocol):
    """Record store for donation documents. Documents carry `_id`."""

    async def list(self) -> List[Dict]: ...

    async def get_by_id(self, donation_id: str) -> Optional[Dict]: ...

    async def create(self, payload: DonationIn) -> Dict: ...

    async def update_by_id(self, donation_id: str, payload: DonationIn) -> Optional[Dict]: ...

    async def delete_by_id(self, donation_id: str) -> bool: ...

    async def close(self) -> None: ...
