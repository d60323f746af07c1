"""
Reflex state for authoring documents.

LedgerEditorMixin holds the header fields and the line-item ledger of one
document being edited. CreateDocumentState and DocumentDetailState build on
it: the first inserts a new document, the second loads, saves, changes the
status of, or deletes an existing one.
"""

from typing import Any

import reflex as rx

from document_ui import config, services
from document_ui.lib import logs
from document_ui.models.entities import (
    DEFAULT_DOCUMENT_STATUS,
    DEFAULT_DOCUMENT_TYPE,
    DOCUMENT_STATUSES,
    DOCUMENT_TYPES,
    CatalogItem,
    Client,
    Document,
)
from document_ui.models.ledger import Ledger, LineItem, compute_totals
from document_ui.models.reflex_models import LineItemModel, TotalsModel, line_item_model, totals_model
from document_ui.services.document_service import DocumentService
from document_ui.state.base import notice_event
from document_ui.utils import format_date, today_iso

LOG = logs.logger(__file__)

HEADER_FIELDS = (
    "doc_type",
    "status",
    "client_name",
    "client_address",
    "client_phone",
    "client_email",
    "date",
    "due_date",
    "notes",
    "discount",
    "tax",
)


def _events(*events: Any) -> list:
    return [event for event in events if event is not None]


class LedgerEditorMixin(rx.State, mixin=True):
    """Header fields, ledger rows and live totals of one document."""

    doc_type: str = DEFAULT_DOCUMENT_TYPE
    status: str = DEFAULT_DOCUMENT_STATUS
    client_name: str = ""
    client_address: str = ""
    client_phone: str = ""
    client_email: str = ""
    date: str = ""
    due_date: str = ""
    notes: str = ""
    discount: str = "0"
    tax: str = f"{config.DEFAULT_TAX_PCT:g}"
    line_items: list[LineItemModel] = []
    is_saving: bool = False

    _ledger: Ledger | None = None
    _documents: DocumentService | None = None

    def _document_service(self) -> DocumentService:
        if self._documents is None:
            self._documents = services.document_service(services.get_store())
        return self._documents

    def _current_ledger(self) -> Ledger:
        if self._ledger is None:
            self._ledger = Ledger()
            self._sync_ledger()
        return self._ledger

    def _sync_ledger(self) -> None:
        self.line_items = [line_item_model(item) for item in self._current_ledger().items]

    def _reset_editor(self, doc_type: str = DEFAULT_DOCUMENT_TYPE) -> None:
        self.doc_type = doc_type if doc_type in DOCUMENT_TYPES else DEFAULT_DOCUMENT_TYPE
        self.status = DEFAULT_DOCUMENT_STATUS
        self.client_name = ""
        self.client_address = ""
        self.client_phone = ""
        self.client_email = ""
        self.date = today_iso()
        self.due_date = ""
        self.notes = ""
        self.discount = "0"
        self.tax = f"{config.DEFAULT_TAX_PCT:g}"
        self._ledger = Ledger()
        self._sync_ledger()

    def _load_document(self, document: Document, lines) -> None:
        self.doc_type = document.doc_type
        self.status = document.status
        self._load_client(document)
        self.date = document.date
        self.due_date = document.due_date
        self.notes = document.notes
        self.discount = f"{document.discount:g}"
        self.tax = f"{document.tax:g}"
        self._current_ledger().replace_items(lines)
        self._sync_ledger()

    def _load_client(self, document: Document) -> None:
        self.client_name = document.client_name
        self.client_address = document.client_address
        self.client_phone = document.client_phone
        self.client_email = document.client_email

    def _document(self, document_id: str = "", number: str = "") -> Document:
        totals = compute_totals((), self.discount, self.tax)
        return Document(
            id=document_id,
            number=number,
            doc_type=self.doc_type,
            status=self.status,
            client_name=self.client_name.strip(),
            client_address=self.client_address.strip(),
            client_phone=self.client_phone.strip(),
            client_email=self.client_email.strip(),
            date=self.date,
            due_date=self.due_date,
            notes=self.notes,
            discount=totals.discount_pct,
            tax=totals.tax_pct,
        )

    @rx.var
    def totals(self) -> TotalsModel:
        rows = [LineItem(id=item.id, name=item.name, quantity=item.quantity, price=item.price) for item in self.line_items]
        return totals_model(compute_totals(rows, self.discount, self.tax))

    @rx.var
    def type_label(self) -> str:
        return DOCUMENT_TYPES.get(self.doc_type, DOCUMENT_TYPES[DEFAULT_DOCUMENT_TYPE])[0]

    @rx.var
    def status_label(self) -> str:
        return DOCUMENT_STATUSES.get(self.status, "")

    @rx.event
    def set_field(self, name: str, value: str):
        """Set one header field from a form control."""
        if name not in HEADER_FIELDS:
            LOG.warning("Ignoring unknown header field %s", name)
            return
        setattr(self, name, value)

    @rx.event
    def add_item(self):
        self._current_ledger().add_item()
        self._sync_ledger()

    @rx.event
    def add_catalog_item(self, item: dict):
        """Append a row copied from a catalog entry."""
        entry = CatalogItem(
            id=str(item.get("id", "")),
            name=str(item.get("name", "")),
            item_type=str(item.get("item_type", "")),
            price=item.get("price") or 0.0,
        )
        self._current_ledger().add_item(entry)
        self._sync_ledger()

    @rx.event
    def remove_item(self, item_id: str):
        self._current_ledger().remove_item(item_id)
        self._sync_ledger()

    @rx.event
    def update_item(self, item_id: str, field_name: str, value: str):
        self._current_ledger().update_item(item_id, field_name, value)
        self._sync_ledger()

    @rx.event
    def select_client(self, client: dict):
        """Copy a client's contact details into the header."""
        document = self._document().with_client(
            Client(
                id=str(client.get("id", "")),
                company_name=str(client.get("company_name", "")),
                address=str(client.get("address", "")),
                phone=str(client.get("phone", "")),
                email=str(client.get("email", "")),
            )
        )
        self._load_client(document)


class CreateDocumentState(LedgerEditorMixin, rx.State):
    """New document form."""

    @rx.event
    def on_load(self):
        """Start a blank document of the type given in ?type=."""
        self._reset_editor(self.router.page.params.get("type", DEFAULT_DOCUMENT_TYPE))

    @rx.event
    def set_doc_type(self, value: str):
        if value in DOCUMENT_TYPES:
            self.doc_type = value

    @rx.event
    async def select_quotation(self, document_id: str):
        """Base an invoice on a stored quotation: client, items and a note."""
        service = self._document_service()
        loaded = await service.load(document_id)
        if loaded is None:
            return notice_event(service.notices.take())
        quotation, lines = loaded
        self._load_client(quotation)
        self._current_ledger().replace_items(lines)
        self._sync_ledger()
        self.notes = f"Based on quotation #{quotation.number} dated {format_date(quotation.date)}"
        LOG.info("Invoice based on quotation %s with %s lines", quotation.number, len(lines))

    @rx.event
    async def submit(self):
        self.is_saving = True
        yield
        service = self._document_service()
        stored = await service.create(self._document(), self._current_ledger())
        self.is_saving = False
        toast = notice_event(service.notices.take())
        if stored is None:
            yield toast
            return
        self._reset_editor(self.doc_type)
        yield _events(toast, rx.redirect(f"/documents/{stored.id}"))


class DocumentDetailState(LedgerEditorMixin, rx.State):
    """View and edit one stored document."""

    document_id: str = ""
    number: str = ""
    not_found: bool = False
    is_loading: bool = False

    @rx.event
    async def on_load(self):
        self.document_id = self.router.page.params.get("document_id", "")
        self.is_loading = True
        yield
        service = self._document_service()
        loaded = await service.load(self.document_id)
        self.is_loading = False
        if loaded is None:
            self.not_found = True
            self.number = ""
            yield notice_event(service.notices.take())
            return
        document, lines = loaded
        self.not_found = False
        self.number = document.number
        self._load_document(document, lines)

    @rx.event
    async def save(self):
        self.is_saving = True
        yield
        service = self._document_service()
        stored = await service.save(self._document(self.document_id, self.number), self._current_ledger())
        self.is_saving = False
        if stored is not None:
            self.number = stored.number
        yield notice_event(service.notices.take())

    @rx.event
    async def update_status(self, status: str):
        if status not in DOCUMENT_STATUSES:
            return None
        service = self._document_service()
        stored = await service.update_status(self._document(self.document_id, self.number), status)
        if stored is not None:
            self.status = stored.status
        return notice_event(service.notices.take())

    @rx.event
    async def delete(self):
        service = self._document_service()
        deleted = await service.delete(self.document_id)
        toast = notice_event(service.notices.take())
        if not deleted:
            return toast
        return _events(toast, rx.redirect("/history"))
