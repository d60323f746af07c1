"""Reflex state for the catalog item screen."""

import reflex as rx

from document_ui import services
from document_ui.models.reflex_models import CatalogItemModel, catalog_item_model
from document_ui.services.entity_service import CatalogService
from document_ui.state.base import PagedListState

_BLANK_FORM = {"name": "", "item_type": "", "price": "0"}


class CatalogState(PagedListState, rx.State):
    """Catalog list, search and edit dialog."""

    catalog_items: list[CatalogItemModel] = []
    dialog_open: bool = False
    editing_id: str = ""
    form: dict[str, str] = dict(_BLANK_FORM)

    _service: CatalogService | None = None

    def _catalog_service(self) -> CatalogService:
        if self._service is None:
            self._service = services.catalog_service(services.get_store())
        return self._service

    def _collection(self):
        return self._catalog_service().collection

    def _sync_items(self) -> None:
        self.catalog_items = [catalog_item_model(item) for item in self._collection().items]

    @rx.var
    def dialog_title(self) -> str:
        return "Edit Item" if self.editing_id else "Add New Item"

    def _close_dialog(self) -> None:
        self.dialog_open = False
        self.editing_id = ""
        self.form = dict(_BLANK_FORM)

    @rx.event
    def open_create(self):
        self._close_dialog()
        self.dialog_open = True

    @rx.event
    def open_edit(self, item_id: str):
        item = self._collection().find(item_id)
        if item is None:
            return
        self.editing_id = item.id
        self.form = {"name": item.name, "item_type": item.item_type, "price": f"{item.price:g}"}
        self.dialog_open = True

    @rx.event
    def set_dialog_open(self, is_open: bool):
        if is_open:
            self.dialog_open = True
        else:
            self._close_dialog()

    @rx.event
    def set_form_field(self, name: str, value: str):
        if name in _BLANK_FORM:
            self.form = {**self.form, name: value}

    @rx.event
    async def save(self):
        stored = await self._catalog_service().save_form(self.form, self.editing_id or None)
        if stored is not None:
            self._close_dialog()
            self._sync()
        return self._take_notice()

    @rx.event
    async def delete(self, item_id: str):
        await self._catalog_service().delete(item_id)
        self._sync()
        return self._take_notice()
