# donation_api/schemas.py
import re
from datetime import date, datetime, timezone
from typing import Annotated, Literal

from pydantic import BaseModel, Field, StringConstraints, field_validator

# --------------------------
# Donation fields
# --------------------------
DonationType = Literal["money", "food", "clothing", "supplies", "other"]

DonorName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=200)]

DATE_ONLY = re.compile(r"^\d{4}-\d{2}-\d{2}$")
DATE_TIME = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}(:\d{2}(\.\d{1,6})?)?(Z|[+-]\d{2}:\d{2})?$")


def utc_ms(dt: datetime) -> datetime:
    """UTC, truncated to the millisecond precision BSON dates keep."""
    dt = dt.astimezone(timezone.utc)
    return dt.replace(microsecond=dt.microsecond // 1000 * 1000)


def parse_donated_at(value: str) -> datetime:
    """
    Accepts `YYYY-MM-DD` (UTC midnight) or a full ISO date-time.
    Date-times without an offset are taken as UTC.
    """
    if DATE_ONLY.fullmatch(value):
        try:
            d = date.fromisoformat(value)
        except ValueError:
            raise ValueError("Not a valid calendar date")
        return datetime(d.year, d.month, d.day, tzinfo=timezone.utc)

    if DATE_TIME.fullmatch(value):
        try:
            dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            raise ValueError("Not a valid date-time")
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return utc_ms(dt)

    raise ValueError("Use YYYY-MM-DD or ISO datetime")


class DonationIn(BaseModel):
    donor_name: DonorName
    donation_type: DonationType
    amount: float = Field(ge=0, allow_inf_nan=False)
    donated_at: datetime

    @field_validator("amount", mode="before")
    @classmethod
    def _amount_not_bool(cls, v):
        # bool is an int subclass; True would otherwise become 1.0
        if isinstance(v, bool):
            raise ValueError("Amount must be a number")
        return v

    @field_validator("donated_at", mode="before")
    @classmethod
    def _donated_at_text(cls, v):
        if not isinstance(v, str):
            raise ValueError("Use YYYY-MM-DD or ISO datetime")
        return parse_donated_at(v)


class DonationOut(BaseModel):
    id: str
    donor_name: str
    donation_type: DonationType
    amount: float
    donated_at: datetime
    created_at: datetime
    updated_at: datetime


class ErrorOut(BaseModel):
    error: str
    details: dict = {}
