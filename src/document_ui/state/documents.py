"""
Reflex state for the document history and the dashboard.

HistoryState pages through stored documents with type/status filters and
deletes through the line-item cascade. DashboardState shows counts, the
most recent documents and quick-create links.
"""

import reflex as rx

from document_ui import services
from document_ui.lib import logs
from document_ui.models.entities import DOCUMENT_STATUSES, DOCUMENT_TYPES
from document_ui.models.reflex_models import DocumentModel, document_model
from document_ui.services.document_service import DocumentService
from document_ui.state.base import PagedListState, notice_event
from document_ui.utils import format_currency

LOG = logs.logger(__file__)

RECENT_DOCUMENTS = 5

TYPE_OPTIONS = [["all", "All types"]] + [[key, label] for key, (label, _) in DOCUMENT_TYPES.items()]
STATUS_OPTIONS = [["all", "All statuses"]] + [[key, label] for key, label in DOCUMENT_STATUSES.items()]


class HistoryState(PagedListState, rx.State):
    """Document history list."""

    documents: list[DocumentModel] = []
    type_filter: str = "all"
    status_filter: str = "all"

    _service: DocumentService | None = None

    def _document_service(self) -> DocumentService:
        if self._service is None:
            self._service = services.document_service(services.get_store(), with_history=True)
        return self._service

    def _collection(self):
        return self._document_service().collection

    def _sync_items(self) -> None:
        self.documents = [document_model(document) for document in self._collection().items]

    def _filters(self) -> dict[str, str]:
        return {"type": self.type_filter, "status": self.status_filter}

    @rx.var
    def total_amount(self) -> str:
        """Sum of grand totals over the loaded documents."""
        return format_currency(sum((document.grand_total for document in self.documents), 0.0))

    async def _apply_filters(self):
        self.is_loading = True
        yield
        await self._collection().reset(self.query, self._filters())
        self._sync()
        yield self._take_notice()

    @rx.event
    async def set_type_filter(self, value: str):
        self.type_filter = value
        async for update in self._apply_filters():
            yield update

    @rx.event
    async def set_status_filter(self, value: str):
        self.status_filter = value
        async for update in self._apply_filters():
            yield update

    @rx.event
    async def delete(self, document_id: str):
        await self._document_service().delete(document_id)
        self._sync()
        return self._take_notice()


class DashboardState(rx.State):
    """Summary counts and recent documents."""

    document_count: int = 0
    pending_count: int = 0
    recent: list[DocumentModel] = []
    is_loading: bool = False

    @rx.event
    async def on_load(self):
        self.is_loading = True
        yield
        service = services.document_service(services.get_store(), with_history=True)
        service.collection.page_size = RECENT_DOCUMENTS
        await service.collection.reset("")
        self.recent = [document_model(document) for document in service.collection.items]
        self.document_count = await service.count() or 0
        self.pending_count = await service.count(status="pending") or 0
        self.is_loading = False
        LOG.info("Dashboard - documents:%s pending:%s", self.document_count, self.pending_count)
        yield notice_event(service.notices.take())
