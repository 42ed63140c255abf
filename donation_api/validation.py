"""
Trust-boundary checks for incoming donation payloads.

``validate_donation`` is pure: it either returns a normalized
``DonationIn`` or raises ``InvalidDonation`` listing every field that
failed, keyed by field name.
"""
from typing import Any, Dict, Iterable, List

from pydantic import ValidationError

from donation_api.schemas import DonationIn

ROOT = "_root"


class InvalidDonation(Exception):
    def __init__(self, details: Dict[str, List[str]]):
        super().__init__("Invalid input")
        self.details = details


def _message(err: dict) -> str:
    # pydantic prefixes our own ValueErrors with "Value error, "
    if err.get("type") == "value_error" and "error" in err.get("ctx", {}):
        return str(err["ctx"]["error"])
    return err.get("msg", "Invalid value")


def format_errors(errors: Iterable[dict]) -> Dict[str, List[str]]:
    """Group pydantic error dicts by dotted field path."""
    details: Dict[str, List[str]] = {}
    for err in errors:
        loc = [str(p) for p in err.get("loc", ()) if p != "body"]
        field = ".".join(loc) or ROOT
        if err.get("type") == "json_invalid":
            field = ROOT
        msg = _message(err)
        bucket = details.setdefault(field, [])
        if msg not in bucket:
            bucket.append(msg)
    return details


def validate_donation(data: Any) -> DonationIn:
    if not isinstance(data, dict):
        raise InvalidDonation({ROOT: ["Expected a JSON object"]})
    try:
        return DonationIn.model_validate(data)
    except ValidationError as exc:
        raise InvalidDonation(format_errors(exc.errors())) from None
