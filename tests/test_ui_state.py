from donation_ui.api_client import ApiError
from donation_ui.state import DonationsState, format_amount, to_date_input


class FakeClient:
    def __init__(self, rows=None):
        self.rows = list(rows or [])
        self.calls = []
        self.fail_with = None

    def list_donations(self):
        self.calls.append(("list",))
        if self.fail_with:
            raise ApiError(self.fail_with)
        return list(self.rows)

    def create_donation(self, payload):
        self.calls.append(("create", payload))
        row = {"id": f"id{len(self.rows)}", **payload}
        self.rows.append(row)
        return row

    def update_donation(self, donation_id, payload):
        self.calls.append(("update", donation_id, payload))
        if self.fail_with:
            raise ApiError(self.fail_with, 400)
        return {"id": donation_id, **payload}

    def delete_donation(self, donation_id):
        self.calls.append(("delete", donation_id))
        self.rows = [r for r in self.rows if r["id"] != donation_id]


ROW = {
    "id": "abc",
    "donor_name": "Alice",
    "donation_type": "food",
    "amount": 12.0,
    "donated_at": "2024-01-05T00:00:00Z",
}


def test_initial_state_and_reload():
    state = DonationsState(FakeClient([ROW]))
    assert state.loading is True
    assert state.empty is False
    state.reload()
    assert state.loading is False
    assert state.donations == [ROW]
    assert state.error == ""
    assert state.title == "Add Donation"


def test_reload_failure_sets_error():
    client = FakeClient()
    client.fail_with = "Failed to fetch donations"
    state = DonationsState(client)
    state.reload()
    assert state.error == "Failed to fetch donations"
    assert state.loading is False
    assert state.empty is True


def test_submit_requires_donor_name():
    client = FakeClient()
    state = DonationsState(client)
    state.form.donor_name = "   "
    state.form.amount = "5"
    assert state.submit() is False
    assert state.error == "Donor name is required"
    assert client.calls == []


def test_submit_requires_non_negative_number():
    client = FakeClient()
    state = DonationsState(client)
    state.form.donor_name = "Bob"
    for bad in ["", "abc", "-1", "nan", "inf"]:
        state.form.amount = bad
        assert state.submit() is False
        assert state.error == "Amount must be a number ≥ 0"
    assert client.calls == []


def test_submit_creates_then_reloads_and_resets():
    client = FakeClient()
    state = DonationsState(client)
    state.form.donor_name = "  Bob "
    state.form.donation_type = "money"
    state.form.amount = "7.5"
    state.form.donated_at = "2024-03-01"

    assert state.submit() is True
    assert client.calls[0] == (
        "create",
        {"donor_name": "Bob", "donation_type": "money", "amount": 7.5, "donated_at": "2024-03-01"},
    )
    assert client.calls[-1] == ("list",)
    assert state.donations[0]["donor_name"] == "Bob"
    assert state.form.donor_name == ""
    assert state.editing_id is None


def test_edit_loads_row_and_submit_updates():
    client = FakeClient([ROW])
    state = DonationsState(client)
    state.start_edit(ROW)
    assert state.editing_id == "abc"
    assert state.title == "Edit Donation"
    assert state.submit_label == "Update"
    assert state.form.amount == "12.0"
    assert state.form.donated_at == "2024-01-05"

    state.form.amount = "20"
    assert state.submit() is True
    assert client.calls[0][0:2] == ("update", "abc")
    assert client.calls[0][2]["amount"] == 20
    assert state.editing_id is None


def test_failed_update_keeps_form():
    client = FakeClient([ROW])
    client.fail_with = "Invalid input"
    state = DonationsState(client)
    state.start_edit(ROW)
    assert state.submit() is False
    assert state.error == "Invalid input"
    assert state.editing_id == "abc"


def test_delete_reloads():
    client = FakeClient([ROW])
    state = DonationsState(client)
    state.reload()
    assert state.delete("abc") is True
    assert ("delete", "abc") in client.calls
    assert state.donations == []
    assert state.empty is True


def test_to_date_input():
    assert to_date_input("2024-01-05T00:00:00Z") == "2024-01-05"
    assert to_date_input("2024-01-05T23:30:00-02:00") == "2024-01-06"
    assert to_date_input("garbage") == ""
    assert to_date_input(None) == ""


def test_format_amount():
    assert format_amount(1234567) == "1,234,567"
    assert format_amount(12.5) == "12.50"
    assert format_amount("n/a") == "n/a"


def test_reload_with_html_response_shows_error():
    import httpx

    from donation_ui.api_client import ApiClient

    def handler(request):
        return httpx.Response(200, text="<html>index</html>", headers={"content-type": "text/html"})

    state = DonationsState(ApiClient("http://api.test", transport=httpx.MockTransport(handler)))
    state.reload()
    assert state.loading is False
    assert state.error.startswith("Failed to fetch donations")
    assert state.donations == []
