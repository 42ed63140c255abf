import os

import flet as ft

from donation_ui.api_client import ApiClient
from donation_ui.state import DONATION_TYPES, DonationsState, format_amount, to_date_input

API_BASE = os.getenv("DONATIONS_API_URL", "http://127.0.0.1:3000")


def main(page: ft.Page):
    page.title = "Donation Inventory"
    page.window_width = 900
    page.window_height = 720
    page.scroll = ft.ScrollMode.AUTO

    state = DonationsState(ApiClient(API_BASE))

    # ---------- form controls ----------
    title = ft.Text("", size=20, weight="bold")
    alert = ft.Text("", color=ft.Colors.RED_400, visible=False, selectable=True)
    donor = ft.TextField(label="Donor Name", width=330, max_length=200)
    dtype = ft.Dropdown(
        label="Type", width=200,
        options=[ft.dropdown.Option(t, t.capitalize()) for t in DONATION_TYPES],
    )
    amount = ft.TextField(label="Amount / Quantity", width=200, keyboard_type=ft.KeyboardType.NUMBER)
    donated_at = ft.TextField(label="Date (YYYY-MM-DD)", width=200)
    submit_btn = ft.ElevatedButton("Save")

    # ---------- table ----------
    status_txt = ft.Text("", italic=True)
    table = ft.DataTable(
        columns=[
            ft.DataColumn(ft.Text("Donor")),
            ft.DataColumn(ft.Text("Type")),
            ft.DataColumn(ft.Text("Amount"), numeric=True),
            ft.DataColumn(ft.Text("Date")),
            ft.DataColumn(ft.Text("Actions")),
        ],
        rows=[],
    )

    confirm = ft.AlertDialog(modal=True, title=ft.Text("Delete this donation?"))
    page.overlay.append(confirm)

    def read_form():
        state.form.donor_name = donor.value or ""
        state.form.donation_type = dtype.value or "money"
        state.form.amount = amount.value or ""
        state.form.donated_at = (donated_at.value or "").strip()

    def render():
        title.value = state.title
        submit_btn.text = state.submit_label
        alert.value = state.error
        alert.visible = bool(state.error)

        donor.value = state.form.donor_name
        dtype.value = state.form.donation_type
        amount.value = state.form.amount
        donated_at.value = state.form.donated_at

        if state.loading:
            status_txt.value = "Loading…"
        elif state.empty:
            status_txt.value = "No donations yet."
        else:
            status_txt.value = ""
        status_txt.visible = bool(status_txt.value)

        table.rows = [
            ft.DataRow(cells=[
                ft.DataCell(ft.Text(d.get("donor_name", ""))),
                ft.DataCell(ft.Text(d.get("donation_type", ""))),
                ft.DataCell(ft.Text(format_amount(d.get("amount")))),
                ft.DataCell(ft.Text(to_date_input(d.get("donated_at")))),
                ft.DataCell(ft.Row([
                    ft.TextButton("Edit", on_click=lambda e, row=d: on_edit(row)),
                    ft.TextButton(
                        "Delete",
                        style=ft.ButtonStyle(color=ft.Colors.RED_400),
                        on_click=lambda e, did=d["id"]: ask_delete(did),
                    ),
                ])),
            ])
            for d in state.donations
        ]
        table.visible = not state.loading and bool(state.donations)
        page.update()

    def reload():
        state.loading = True
        render()
        state.reload()
        render()

    # ---------- handlers ----------
    def on_submit(_):
        read_form()
        state.submit()
        render()

    def on_clear(_):
        state.reset_form()
        state.error = ""
        render()

    def on_edit(row):
        state.start_edit(row)
        render()

    def ask_delete(donation_id: str):
        def close(_):
            confirm.open = False
            page.update()

        def do_delete(_):
            confirm.open = False
            page.update()
            state.delete(donation_id)
            render()

        confirm.actions = [
            ft.TextButton("Cancel", on_click=close),
            ft.ElevatedButton("Delete", on_click=do_delete),
        ]
        confirm.open = True
        page.update()

    submit_btn.on_click = on_submit

    page.add(
        ft.Text("Donation Inventory", size=26, weight="bold"),
        ft.Card(ft.Container(
            ft.Column([
                title,
                alert,
                ft.Row([donor, dtype]),
                ft.Row([amount, donated_at]),
                ft.Row([submit_btn, ft.OutlinedButton("Clear", on_click=on_clear)], alignment="end"),
            ], spacing=10),
            padding=20,
        )),
        ft.Card(ft.Container(
            ft.Column([
                ft.Text("Recorded Donations", size=20, weight="bold"),
                status_txt,
                table,
            ], spacing=10),
            padding=20,
        )),
    )
    reload()


def run():
    ft.app(target=main)


if __name__ == "__main__":
    run()
