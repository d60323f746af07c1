"""Client screen: search, paged rows and the add/edit dialog."""

import reflex as rx

from document_ui.components.entity_form import form_dialog, row_actions
from document_ui.components.paged_list import paged_list
from document_ui.components.search_panel import search_panel
from document_ui.models.reflex_models import ClientModel
from document_ui.state import ClientsState

_FIELDS = [
    ("company_name", "Company name", "text"),
    ("address", "Address", "textarea"),
    ("phone", "Phone", "tel"),
    ("email", "Email", "email"),
]


def client_row(client: ClientModel) -> rx.Component:
    return rx.box(
        rx.text(client.company_name, weight="medium"),
        rx.text(client.address, class_name="muted"),
        rx.text(client.phone),
        rx.text(client.email),
        row_actions(ClientsState.open_edit(client.id), ClientsState.delete(client.id)),
        class_name="list-row client-row",
        key=client.id,
    )


def _header() -> rx.Component:
    return rx.box(
        *[rx.text(label, weight="bold") for label in ("Company", "Address", "Phone", "Email", "")],
        class_name="list-row list-header client-row",
    )


def client_screen() -> rx.Component:
    return rx.box(
        rx.hstack(
            rx.box(
                rx.heading("Clients", size="6", as_="h1"),
                rx.text("Manage the companies you send documents to.", class_name="muted"),
            ),
            rx.button(rx.icon("plus", size=16), "Add Client", on_click=ClientsState.open_create),
            justify="between",
            width="100%",
            class_name="page-header",
        ),
        search_panel(ClientsState, "Search by company name or email..."),
        rx.box(
            paged_list(ClientsState, ClientsState.clients, client_row, "clients", _header()),
            class_name="card",
        ),
        form_dialog(ClientsState, _FIELDS),
    )
