"""Reflex states for each screen of the Document UI."""

from document_ui.state.base import PagedListState, notice_event
from document_ui.state.catalog import CatalogState
from document_ui.state.clients import ClientsState
from document_ui.state.documents import DashboardState, HistoryState
from document_ui.state.editor import CreateDocumentState, DocumentDetailState, LedgerEditorMixin
from document_ui.state.pickers import CatalogPickerState, ClientPickerState, QuotationPickerState

__all__ = [
    "CatalogPickerState",
    "CatalogState",
    "ClientPickerState",
    "ClientsState",
    "CreateDocumentState",
    "DashboardState",
    "DocumentDetailState",
    "HistoryState",
    "LedgerEditorMixin",
    "PagedListState",
    "QuotationPickerState",
    "notice_event",
]
