"""Searchable pickers used by the document editor."""

import reflex as rx

from document_ui import services
from document_ui.models.reflex_models import (
    CatalogItemModel,
    ClientModel,
    DocumentModel,
    catalog_item_model,
    client_model,
    document_model,
)
from document_ui.services.paged_collection import PagedCollection
from document_ui.state.base import PagedListState


class ClientPickerState(PagedListState, rx.State):
    """Client lookup on the document editor."""

    options: list[ClientModel] = []

    _list: PagedCollection | None = None

    def _collection(self) -> PagedCollection:
        if self._list is None:
            self._list = services.client_collection(services.get_store())
        return self._list

    def _sync_items(self) -> None:
        self.options = [client_model(client) for client in self._collection().items]


class CatalogPickerState(PagedListState, rx.State):
    """Catalog lookup that adds ledger rows."""

    options: list[CatalogItemModel] = []

    _list: PagedCollection | None = None

    def _collection(self) -> PagedCollection:
        if self._list is None:
            self._list = services.catalog_collection(services.get_store())
        return self._list

    def _sync_items(self) -> None:
        self.options = [catalog_item_model(item) for item in self._collection().items]


class QuotationPickerState(PagedListState, rx.State):
    """Quotations an invoice can be based on."""

    options: list[DocumentModel] = []

    _list: PagedCollection | None = None

    def _collection(self) -> PagedCollection:
        if self._list is None:
            self._list = services.document_collection(services.get_store())
        return self._list

    def _sync_items(self) -> None:
        self.options = [document_model(document) for document in self._collection().items]

    def _filters(self) -> dict[str, str]:
        return {"type": "quotation"}
