"""Catalog item screen."""

import reflex as rx

from document_ui.components.entity_form import form_dialog, row_actions
from document_ui.components.paged_list import paged_list
from document_ui.components.search_panel import search_panel
from document_ui.models.reflex_models import CatalogItemModel
from document_ui.state import CatalogState

_FIELDS = [
    ("name", "Item name", "text"),
    ("item_type", "Type", "text"),
    ("price", "Price", "number"),
]


def catalog_row(item: CatalogItemModel) -> rx.Component:
    return rx.box(
        rx.text(item.name, weight="medium"),
        rx.badge(item.item_type, variant="soft"),
        rx.text(item.price_display, class_name="amount"),
        row_actions(CatalogState.open_edit(item.id), CatalogState.delete(item.id)),
        class_name="list-row catalog-row",
        key=item.id,
    )


def catalog_screen() -> rx.Component:
    return rx.box(
        rx.hstack(
            rx.box(
                rx.heading("Items", size="6", as_="h1"),
                rx.text("Reusable products and services with their prices.", class_name="muted"),
            ),
            rx.button(rx.icon("plus", size=16), "Add Item", on_click=CatalogState.open_create),
            justify="between",
            width="100%",
            class_name="page-header",
        ),
        search_panel(CatalogState, "Search by item name or type..."),
        rx.box(
            paged_list(CatalogState, CatalogState.catalog_items, catalog_row, "items"),
            class_name="card",
        ),
        form_dialog(CatalogState, _FIELDS),
    )
