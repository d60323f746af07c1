"""
Document editor components.

The same header form, ledger table and totals card are used by the create
page and the document detail page; `state` selects which editor they bind
to.
"""

import reflex as rx

from document_ui.components.search_panel import search_panel
from document_ui.models.entities import DOCUMENT_STATUSES, DOCUMENT_TYPES
from document_ui.models.reflex_models import CatalogItemModel, ClientModel, DocumentModel, LineItemModel
from document_ui.state import CatalogPickerState, ClientPickerState, QuotationPickerState


def _labeled(label: str, control: rx.Component) -> rx.Component:
    return rx.box(rx.text(label, as_="label", size="2", weight="medium"), control, width="100%")


def _text_field(state: type, name: str, label: str, input_type: str = "text") -> rx.Component:
    return _labeled(
        label,
        rx.input(
            value=getattr(state, name),
            type=input_type,
            on_change=lambda value: state.set_field(name, value),
        ),
    )


def header_form(state: type, type_locked: bool = False) -> rx.Component:
    """Document type, status, dates and client details."""
    type_control = (
        rx.badge(state.type_label, size="3")
        if type_locked
        else rx.select.root(
            rx.select.trigger(width="100%"),
            rx.select.content(*[rx.select.item(label, value=key) for key, (label, _) in DOCUMENT_TYPES.items()]),
            value=state.doc_type,
            on_change=state.set_doc_type,
        )
    )
    return rx.box(
        rx.heading("Document", size="4"),
        rx.grid(
            _labeled("Type", type_control),
            _labeled(
                "Status",
                rx.select.root(
                    rx.select.trigger(width="100%"),
                    rx.select.content(*[rx.select.item(label, value=key) for key, label in DOCUMENT_STATUSES.items()]),
                    value=state.status,
                    on_change=lambda value: state.set_field("status", value),
                ),
            ),
            _text_field(state, "date", "Date", "date"),
            _text_field(state, "due_date", "Due date", "date"),
            columns="2",
            spacing="3",
        ),
        rx.heading("Client", size="4", margin_top="1em"),
        rx.grid(
            _text_field(state, "client_name", "Company name"),
            _text_field(state, "client_email", "Email", "email"),
            _text_field(state, "client_phone", "Phone", "tel"),
            _text_field(state, "client_address", "Address"),
            columns="2",
            spacing="3",
        ),
        class_name="card",
    )


def _line_row(state: type, item: LineItemModel) -> rx.Component:
    return rx.box(
        rx.input(
            value=item.name,
            placeholder="Item name",
            on_change=lambda value: state.update_item(item.id, "name", value),
        ),
        rx.input(
            value=item.quantity,
            type="number",
            min=0,
            on_change=lambda value: state.update_item(item.id, "quantity", value),
        ),
        rx.input(
            value=item.price,
            type="number",
            min=0,
            on_change=lambda value: state.update_item(item.id, "price", value),
        ),
        rx.text(item.total_display, class_name="amount"),
        rx.icon_button(
            rx.icon("trash-2", size=16),
            variant="ghost",
            color_scheme="red",
            disabled=state.line_items.length() <= 1,
            on_click=state.remove_item(item.id),
        ),
        class_name="list-row ledger-row",
        key=item.id,
    )


def ledger_table(state: type) -> rx.Component:
    """Editable line items with add buttons."""
    return rx.box(
        rx.hstack(
            rx.heading("Items", size="4"),
            rx.spacer(),
            catalog_picker(state),
            rx.button(rx.icon("plus", size=16), "Add Row", variant="soft", on_click=state.add_item),
            width="100%",
        ),
        rx.box(
            *[rx.text(label, weight="bold") for label in ("Item", "Qty", "Price", "Total", "")],
            class_name="list-row list-header ledger-row",
        ),
        rx.foreach(state.line_items, lambda item: _line_row(state, item)),
        class_name="card",
    )


def totals_card(state: type) -> rx.Component:
    """Discount/tax inputs and the derived totals."""
    return rx.box(
        rx.heading("Summary", size="4"),
        rx.grid(
            _text_field(state, "discount", "Discount (%)", "number"),
            _text_field(state, "tax", "Tax (%)", "number"),
            columns="2",
            spacing="3",
        ),
        rx.vstack(
            _total_line("Subtotal", state.totals.subtotal),
            _total_line("Discount", state.totals.discount_amount),
            _total_line("After discount", state.totals.after_discount),
            _total_line("Tax", state.totals.tax_amount),
            rx.divider(),
            _total_line("Grand total", state.totals.grand_total, strong=True),
            spacing="1",
            margin_top="1em",
        ),
        _labeled("Notes", rx.text_area(value=state.notes, on_change=lambda value: state.set_field("notes", value))),
        class_name="card",
    )


def _total_line(label: str, value, strong: bool = False) -> rx.Component:
    weight = "bold" if strong else "regular"
    return rx.hstack(
        rx.text(label, weight=weight),
        rx.spacer(),
        rx.text(value, weight=weight, class_name="amount"),
        width="100%",
    )


def _picker(title: str, trigger: rx.Component, picker_state: type, placeholder: str, body: rx.Component) -> rx.Component:
    return rx.dialog.root(
        rx.dialog.trigger(trigger),
        rx.dialog.content(
            rx.dialog.title(title),
            search_panel(picker_state, placeholder),
            rx.scroll_area(body, max_height="50vh"),
            rx.hstack(
                rx.cond(
                    picker_state.has_more,
                    rx.button("Load more", variant="soft", loading=picker_state.is_loading, on_click=picker_state.load_more),
                ),
                rx.spacer(),
                rx.dialog.close(rx.button("Close", variant="soft", color_scheme="gray")),
                width="100%",
                margin_top="1em",
            ),
            on_open_auto_focus=picker_state.on_load,
        ),
    )


def client_picker(state: type) -> rx.Component:
    def option(client: ClientModel) -> rx.Component:
        return rx.dialog.close(
            rx.box(
                rx.text(client.company_name, weight="medium"),
                rx.text(client.email, class_name="muted", size="2"),
                class_name="picker-option",
                on_click=state.select_client(client),
            )
        )

    return _picker(
        "Select Client",
        rx.button(rx.icon("users", size=16), "Choose Client", variant="soft"),
        ClientPickerState,
        "Search clients...",
        rx.vstack(rx.foreach(ClientPickerState.options, option), spacing="1"),
    )


def catalog_picker(state: type) -> rx.Component:
    def option(entry: CatalogItemModel) -> rx.Component:
        return rx.dialog.close(
            rx.hstack(
                rx.text(entry.name, weight="medium"),
                rx.spacer(),
                rx.text(entry.price_display, class_name="amount"),
                class_name="picker-option",
                on_click=state.add_catalog_item(entry),
            )
        )

    return _picker(
        "Add From Catalog",
        rx.button(rx.icon("package", size=16), "From Catalog", variant="soft"),
        CatalogPickerState,
        "Search items...",
        rx.vstack(rx.foreach(CatalogPickerState.options, option), spacing="1"),
    )


def quotation_picker(state: type) -> rx.Component:
    def option(quotation: DocumentModel) -> rx.Component:
        return rx.dialog.close(
            rx.hstack(
                rx.box(
                    rx.text(quotation.number, weight="medium"),
                    rx.text(quotation.client_name, class_name="muted", size="2"),
                ),
                rx.spacer(),
                rx.text(quotation.grand_total_display, class_name="amount"),
                class_name="picker-option",
                on_click=state.select_quotation(quotation.id),
            )
        )

    return _picker(
        "Based On Quotation",
        rx.button(rx.icon("file-input", size=16), "From Quotation", variant="soft"),
        QuotationPickerState,
        "Search quotations...",
        rx.vstack(rx.foreach(QuotationPickerState.options, option), spacing="1"),
    )
