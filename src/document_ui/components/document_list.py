"""
History and dashboard views of stored documents.

Rows link to the document detail page; the history screen adds type and
status filters plus the sum of the loaded grand totals.
"""

import reflex as rx

from document_ui.components.paged_list import paged_list
from document_ui.components.search_panel import search_panel
from document_ui.models.entities import DOCUMENT_TYPES
from document_ui.models.reflex_models import DocumentModel
from document_ui.state import DashboardState, HistoryState
from document_ui.state.documents import STATUS_OPTIONS, TYPE_OPTIONS

_STATUS_COLORS = {
    "paid": "green",
    "completed": "green",
    "pending": "amber",
    "overdue": "red",
    "draft": "gray",
}


def status_badge(document: DocumentModel) -> rx.Component:
    return rx.badge(
        document.status_label,
        color_scheme=rx.match(
            document.status,
            *[(status, color) for status, color in _STATUS_COLORS.items()],
            "gray",
        ),
        variant="soft",
    )


def document_row(document: DocumentModel) -> rx.Component:
    """Compact history row linking to the detail page."""
    return rx.box(
        rx.link(document.number, href=f"/documents/{document.id}", weight="medium"),
        rx.text(document.type_label),
        rx.text(document.client_name),
        rx.text(document.date_display, class_name="muted"),
        rx.text(document.grand_total_display, class_name="amount"),
        status_badge(document),
        rx.icon_button(
            rx.icon("trash-2", size=16),
            variant="ghost",
            color_scheme="red",
            on_click=HistoryState.delete(document.id),
        ),
        class_name="list-row document-row",
        key=document.id,
    )


def _select(options: list[list[str]], value, on_change) -> rx.Component:
    return rx.select.root(
        rx.select.trigger(),
        rx.select.content(*[rx.select.item(label, value=key) for key, label in options]),
        value=value,
        on_change=on_change,
    )


def history_screen() -> rx.Component:
    return rx.box(
        rx.box(
            rx.heading("History", size="6", as_="h1"),
            rx.text("Every document you have created.", class_name="muted"),
            class_name="page-header",
        ),
        search_panel(HistoryState, "Search by document number or client..."),
        rx.hstack(
            _select(TYPE_OPTIONS, HistoryState.type_filter, HistoryState.set_type_filter),
            _select(STATUS_OPTIONS, HistoryState.status_filter, HistoryState.set_status_filter),
            rx.spacer(),
            rx.text("Total: ", rx.text.strong(HistoryState.total_amount)),
            align="center",
            width="100%",
            class_name="filter-bar",
        ),
        rx.box(
            paged_list(HistoryState, HistoryState.documents, document_row, "documents"),
            class_name="card",
        ),
    )


def _stat(title: str, value, description: str, icon: str) -> rx.Component:
    return rx.box(
        rx.hstack(rx.text(title, size="2", weight="medium"), rx.spacer(), rx.icon(icon, size=18)),
        rx.heading(value, size="7"),
        rx.text(description, class_name="muted", size="1"),
        class_name="card stat-card",
    )


def _recent_row(document: DocumentModel) -> rx.Component:
    return rx.hstack(
        rx.box(
            rx.link(document.number, href=f"/documents/{document.id}", weight="medium"),
            rx.text(document.client_name, class_name="muted", size="2"),
        ),
        rx.spacer(),
        rx.box(
            rx.text(document.grand_total_display, class_name="amount"),
            status_badge(document),
            text_align="right",
        ),
        width="100%",
        class_name="recent-row",
    )


def dashboard_screen() -> rx.Component:
    return rx.box(
        rx.hstack(
            rx.box(
                rx.heading("Dashboard", size="6", as_="h1"),
                rx.text("Manage your business documents.", class_name="muted"),
            ),
            rx.link(rx.button(rx.icon("plus", size=16), "Create Document"), href="/create"),
            justify="between",
            width="100%",
            class_name="page-header",
        ),
        rx.grid(
            _stat("Total Documents", DashboardState.document_count, "Documents created", "file-text"),
            _stat("Pending", DashboardState.pending_count, "Awaiting payment", "clock"),
            columns="2",
            spacing="4",
        ),
        rx.grid(
            rx.box(
                rx.heading("Quick Actions", size="4"),
                rx.vstack(
                    *[
                        rx.link(rx.button(label, variant="outline", width="100%"), href=f"/create?type={key}", width="100%")
                        for key, (label, _) in DOCUMENT_TYPES.items()
                    ],
                    spacing="2",
                ),
                class_name="card",
            ),
            rx.box(
                rx.heading("Recent Documents", size="4"),
                rx.cond(
                    DashboardState.recent.length() > 0,
                    rx.vstack(rx.foreach(DashboardState.recent, _recent_row), spacing="2"),
                    rx.text("No documents yet.", class_name="muted"),
                ),
                class_name="card",
            ),
            columns="2",
            spacing="4",
        ),
    )
