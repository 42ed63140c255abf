"""
View state for the donations screen.

Everything here is plain Python so it can be driven without a Flet
page: the view reads the fields and calls the actions, then re-renders.
The backend stays the source of truth; every mutation is followed by a
full reload.
"""
import math
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Dict, List, Optional

from donation_ui.api_client import ApiError

DONATION_TYPES = ["money", "food", "clothing", "supplies", "other"]


def today_iso_date() -> str:
    return date.today().isoformat()


def to_date_input(value) -> str:
    """YYYY-MM-DD (UTC calendar day) for an ISO timestamp; '' if unreadable."""
    if not value or not isinstance(value, str):
        return ""
    try:
        dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return ""
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc)
    return dt.date().isoformat()


def format_amount(value) -> str:
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return str(value)
    if amount.is_integer():
        return f"{int(amount):,}"
    return f"{amount:,.2f}"


@dataclass
class DonationForm:
    donor_name: str = ""
    donation_type: str = "money"
    amount: str = ""
    donated_at: str = field(default_factory=today_iso_date)


class DonationsState:
    def __init__(self, client):
        self.client = client
        self.donations: List[Dict] = []
        self.loading = True
        self.error = ""
        self.editing_id: Optional[str] = None
        self.form = DonationForm()

    @property
    def title(self) -> str:
        return "Edit Donation" if self.editing_id else "Add Donation"

    @property
    def submit_label(self) -> str:
        return "Update" if self.editing_id else "Save"

    @property
    def empty(self) -> bool:
        return not self.loading and not self.donations

    # ---------- actions ----------
    def reload(self) -> None:
        self.loading = True
        self.error = ""
        try:
            self.donations = self.client.list_donations()
        except ApiError as ex:
            self.error = str(ex) or "Failed to load donations"
        finally:
            self.loading = False

    def reset_form(self) -> None:
        self.editing_id = None
        self.form = DonationForm()

    def start_edit(self, row: Dict) -> None:
        self.editing_id = row["id"]
        self.form = DonationForm(
            donor_name=row.get("donor_name", ""),
            donation_type=row.get("donation_type", "money"),
            amount=str(row.get("amount", "")),
            donated_at=to_date_input(row.get("donated_at")),
        )

    def build_payload(self) -> Optional[Dict]:
        """Minimal local checks; the server validates again."""
        donor_name = self.form.donor_name.strip()
        if not donor_name:
            self.error = "Donor name is required"
            return None
        try:
            amount = float(self.form.amount)
        except ValueError:
            amount = math.nan
        if not math.isfinite(amount) or amount < 0:
            self.error = "Amount must be a number ≥ 0"
            return None
        return {
            "donor_name": donor_name,
            "donation_type": self.form.donation_type,
            "amount": amount,
            "donated_at": self.form.donated_at,  # YYYY-MM-DD; server normalizes
        }

    def submit(self) -> bool:
        payload = self.build_payload()
        if payload is None:
            return False
        try:
            self.error = ""
            if self.editing_id:
                self.client.update_donation(self.editing_id, payload)
            else:
                self.client.create_donation(payload)
        except ApiError as ex:
            self.error = str(ex) or "Failed to save donation"
            return False
        self.reset_form()
        self.reload()
        return True

    def delete(self, donation_id: str) -> bool:
        # caller asks for confirmation first
        try:
            self.client.delete_donation(donation_id)
        except ApiError as ex:
            self.error = str(ex) or "Failed to delete donation"
            return False
        self.reload()
        return True
