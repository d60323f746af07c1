"""
Reflex state for the client list screen.

Handles paging/search through PagedListState plus the add/edit dialog and
deletes, all delegated to ClientService.
"""

import reflex as rx

from document_ui import services
from document_ui.models.reflex_models import ClientModel, client_model
from document_ui.services.entity_service import ClientService
from document_ui.state.base import PagedListState

_BLANK_FORM = {"company_name": "", "address": "", "phone": "", "email": ""}


class ClientsState(PagedListState, rx.State):
    """Client list, search and edit dialog."""

    clients: list[ClientModel] = []
    dialog_open: bool = False
    editing_id: str = ""
    form: dict[str, str] = dict(_BLANK_FORM)

    _service: ClientService | None = None

    def _client_service(self) -> ClientService:
        if self._service is None:
            self._service = services.client_service(services.get_store())
        return self._service

    def _collection(self):
        return self._client_service().collection

    def _sync_items(self) -> None:
        self.clients = [client_model(client) for client in self._collection().items]

    @rx.var
    def dialog_title(self) -> str:
        return "Edit Client" if self.editing_id else "Add New Client"

    @rx.event
    def open_create(self):
        self.editing_id = ""
        self.form = dict(_BLANK_FORM)
        self.dialog_open = True

    @rx.event
    def open_edit(self, client_id: str):
        client = self._collection().find(client_id)
        if client is None:
            return
        self.editing_id = client.id
        self.form = {name: getattr(client, name) for name in _BLANK_FORM}
        self.dialog_open = True

    def _close_dialog(self) -> None:
        self.dialog_open = False
        self.editing_id = ""
        self.form = dict(_BLANK_FORM)

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
        service = self._client_service()
        stored = await service.save_form(self.form, self.editing_id or None)
        if stored is not None:
            self._close_dialog()
            self._sync()
        return self._take_notice()

    @rx.event
    async def delete(self, client_id: str):
        await self._client_service().delete(client_id)
        self._sync()
        return self._take_notice()
