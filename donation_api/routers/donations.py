# donation_api/routers/donations.py
from datetime import datetime
from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Request, Response, status

from donation_api.repos.base import DonationStore
from donation_api.schemas import DonationOut, ErrorOut
from donation_api.validation import validate_donation

router = APIRouter(prefix="/api/donations", tags=["donations"])

NOT_FOUND = {404: {"model": ErrorOut}}
INVALID = {400: {"model": ErrorOut}}


# ----- Store dependency (the handle lives on app.state, set up in create_app)
def get_store(request: Request) -> DonationStore:
    store = request.app.state.store
    if store is None:
        raise RuntimeError("donation store not opened")
    return store


def _as_dt(v) -> Optional[datetime]:
    return v if isinstance(v, datetime) else None


def _serialize(doc: dict) -> dict:
    return {
        "id": str(doc["_id"]),
        "donor_name": doc.get("donor_name"),
        "donation_type": doc.get("donation_type"),
        "amount": doc.get("amount"),
        "donated_at": _as_dt(doc.get("donated_at")),
        "created_at": _as_dt(doc.get("created_at")),
        "updated_at": _as_dt(doc.get("updated_at")),
    }


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")


@router.get("", response_model=List[DonationOut])
async def list_donations(store: DonationStore = Depends(get_store)):
    return [_serialize(d) for d in await store.list()]


@router.get("/{donation_id}", response_model=DonationOut, responses=NOT_FOUND)
async def get_donation(donation_id: str, store: DonationStore = Depends(get_store)):
    doc = await store.get_by_id(donation_id)
    if doc is None:
        raise _not_found()
    return _serialize(doc)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=DonationOut, responses=INVALID)
async def create_donation(body: Any = Body(None), store: DonationStore = Depends(get_store)):
    payload = validate_donation(body)
    return _serialize(await store.create(payload))


@router.put("/{donation_id}", response_model=DonationOut, responses={**INVALID, **NOT_FOUND})
async def update_donation(
    donation_id: str,
    body: Any = Body(None),
    store: DonationStore = Depends(get_store),
):
    # validate before touching the store, even for unknown ids
    payload = validate_donation(body)
    doc = await store.update_by_id(donation_id, payload)
    if doc is None:
        raise _not_found()
    return _serialize(doc)


@router.delete("/{donation_id}", status_code=status.HTTP_204_NO_CONTENT, responses=NOT_FOUND)
async def delete_donation(donation_id: str, store: DonationStore = Depends(get_store)):
    if not await store.delete_by_id(donation_id):
        raise _not_found()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
