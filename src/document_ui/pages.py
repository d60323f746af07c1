"""Page builders for each route."""

import reflex as rx

from document_ui.components.catalog_list import catalog_screen
from document_ui.components.client_list import client_screen
from document_ui.components.document_list import dashboard_screen, history_screen
from document_ui.components.ledger_editor import (
    client_picker,
    header_form,
    ledger_table,
    quotation_picker,
    totals_card,
)
from document_ui.layout import shell
from document_ui.state import CreateDocumentState, DocumentDetailState


def dashboard() -> rx.Component:
    return shell(dashboard_screen())


def clients() -> rx.Component:
    return shell(client_screen())


def items() -> rx.Component:
    return shell(catalog_screen())


def history() -> rx.Component:
    return shell(history_screen())


def create_document() -> rx.Component:
    """New document: header, client and quotation pickers, ledger, totals."""
    state = CreateDocumentState
    return shell(
        rx.hstack(
            rx.box(
                rx.heading("Create ", state.type_label, size="6", as_="h1"),
                rx.text("Fill in the client and the items, then save.", class_name="muted"),
            ),
            rx.spacer(),
            client_picker(state),
            rx.cond(state.doc_type == "invoice", quotation_picker(state)),
            width="100%",
            class_name="page-header",
        ),
        rx.grid(
            rx.vstack(header_form(state), ledger_table(state), spacing="4"),
            rx.vstack(
                totals_card(state),
                rx.button("Save Document", width="100%", loading=state.is_saving, on_click=state.submit),
                spacing="4",
            ),
            columns="3fr 2fr",
            spacing="4",
        ),
    )


def document_detail() -> rx.Component:
    state = DocumentDetailState
    return shell(
        rx.cond(
            state.not_found,
            rx.box(
                rx.icon("file-x", class_name="empty-icon", size=48),
                rx.heading("Document not found", size="3", as_="h3"),
                rx.link("Back to history", href="/history"),
                class_name="card empty-state",
            ),
            rx.box(
                rx.hstack(
                    rx.box(
                        rx.heading(state.type_label, " ", state.number, size="6", as_="h1"),
                        rx.badge(state.status_label, variant="soft"),
                    ),
                    rx.spacer(),
                    client_picker(state),
                    rx.button(
                        rx.icon("trash-2", size=16),
                        "Delete",
                        color_scheme="red",
                        variant="soft",
                        on_click=state.delete,
                    ),
                    width="100%",
                    class_name="page-header",
                ),
                rx.grid(
                    rx.vstack(header_form(state, type_locked=True), ledger_table(state), spacing="4"),
                    rx.vstack(
                        totals_card(state),
                        rx.button("Save Changes", width="100%", loading=state.is_saving, on_click=state.save),
                        spacing="4",
                    ),
                    columns="3fr 2fr",
                    spacing="4",
                ),
            ),
        )
    )
