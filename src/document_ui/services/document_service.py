"""
Document persistence: headers, their line items and the cascade rules.

A document is stored as one header row in `documents` plus ordered rows in
`document_items`. The two tables are written in a fixed order so a failure
never leaves the user looking at half a document:

- create: header first (it provides the id), then lines; if the lines fail
  the new header is removed again
- save: current lines inserted, old lines deleted, then the header updated;
  any failure removes the new lines and puts the old ones back
- delete: lines first, then the header; the header delete is not attempted
  when the lines cannot be deleted, and the history list is only touched
  once both deletes succeeded
"""

from dataclasses import replace
from datetime import date

from document_ui.lib import logs
from document_ui.models.common import Notice, NoticeSlot, SearchQuery
from document_ui.models.entities import (
    DOCUMENT_TYPES,
    Document,
    DocumentLine,
    decode_document,
    decode_document_line,
    document_number,
    number_prefix,
)
from document_ui.models.errors import ValidationError
from document_ui.models.ledger import Ledger
from document_ui.services.entity_service import describe_error
from document_ui.services.paged_collection import PagedCollection
from document_ui.services.remote_collection import RemoteCollection, SelectOptions

LOG = logs.logger(__file__)


class DocumentService:
    """
    Reads and writes documents with their line items.

    Attributes:
        documents: Remote `documents` table.
        lines: Remote `document_items` table.
        collection: Optional history list kept in sync with writes.
        notices: Single-slot notice channel for outcomes.
    """

    def __init__(
        self,
        documents: RemoteCollection,
        lines: RemoteCollection,
        collection: PagedCollection[Document] | None = None,
        notices: NoticeSlot | None = None,
    ) -> None:
        self.documents = documents
        self.lines = lines
        self.collection = collection
        self.notices = notices or (collection.notices if collection else NoticeSlot())

    async def load(self, document_id: str) -> tuple[Document, list[DocumentLine]] | None:
        """Return a document header and its lines in display order."""
        try:
            row = await self.documents.get(document_id)
            if row is None:
                self.notices.post(Notice.error("Document not found", f"No document with id {document_id}."))
                return None
            document = decode_document(row)
            lines = await self.load_lines(document.id)
        except Exception as exc:
            LOG.error("Failed to load document %s", document_id, exc_info=True)
            self.notices.post(Notice.error("Failed to load document", describe_error(exc)))
            return None
        return document, lines

    async def load_lines(self, document_id: str) -> list[DocumentLine]:
        result = await self.lines.select(
            "*",
            SelectOptions(equals={"document_id": document_id}, order_by="position", descending=False, count=False),
        )
        return [decode_document_line(row) for row in result.rows]

    async def count(self, **equals: str) -> int | None:
        """Return the number of documents matching the equality filters."""
        try:
            result = await self.documents.select("id", SelectOptions(equals=equals, range_to=0, count=True))
        except Exception as exc:
            LOG.warning("Failed to count documents %s", equals, exc_info=True)
            self.notices.post(Notice.error("Failed to load data", describe_error(exc)))
            return None
        return result.total_count if result.total_count is not None else len(result.rows)

    async def next_number(self, doc_type: str, on: date | None = None) -> str:
        """
        Return the next number for a document type, e.g. QUO-2024-004.

        Only numbers issued in the same year are counted, so each year starts
        again at 001.
        """
        year = (on or date.today()).year
        options = SelectOptions(
            search=SearchQuery(number_prefix(doc_type, year), ("number",)),
            equals={"type": doc_type},
            range_to=0,
            count=True,
        )
        result = await self.documents.select("id", options)
        existing = result.total_count if result.total_count is not None else len(result.rows)
        return document_number(doc_type, year, existing)

    def _with_totals(self, document: Document, ledger: Ledger) -> Document:
        ledger.validate(document.client_name)
        if document.doc_type not in DOCUMENT_TYPES:
            raise ValidationError(f"Unknown document type {document.doc_type!r}.")
        totals = ledger.compute_totals(document.discount, document.tax)
        return replace(
            document,
            discount=totals.discount_pct,
            tax=totals.tax_pct,
            subtotal=totals.subtotal,
            grand_total=totals.grand_total,
        )

    async def create(self, document: Document, ledger: Ledger) -> Document | None:
        """
        Validate and store a new document with its lines.

        Returns:
            The stored document, or None when validation or storage failed.
        """
        try:
            document = self._with_totals(document, ledger)
        except ValidationError as exc:
            self.notices.post(exc.to_notice())
            return None

        try:
            if not document.number:
                doc_date = date.fromisoformat(document.date) if document.date else None
                document = replace(document, number=await self.next_number(document.doc_type, doc_date))
            stored = decode_document(await self.documents.insert(document.to_record()))
        except Exception as exc:
            LOG.error("Failed to create %s document", document.doc_type, exc_info=True)
            self.notices.post(Notice.error("Failed to create document", describe_error(exc)))
            return None

        try:
            await self._insert_lines(stored.id, ledger)
        except Exception as exc:
            LOG.error("Failed to store lines of %s, removing header", stored.number, exc_info=True)
            await self._discard_header(stored.id)
            self.notices.post(Notice.error("Failed to create document", describe_error(exc)))
            return None

        if self.collection is not None:
            self.collection.prepend(stored)
        self.notices.post(
            Notice.success("Document created", f"{stored.type_label} {stored.number} for {stored.client_name} has been created.")
        )
        return stored

    async def save(self, document: Document, ledger: Ledger) -> Document | None:
        """Update an existing document header and replace its lines."""
        try:
            document = self._with_totals(document, ledger)
        except ValidationError as exc:
            self.notices.post(exc.to_notice())
            return None

        inserted: list[str] = []
        removed: list[DocumentLine] = []
        try:
            previous = await self.load_lines(document.id)
            await self._insert_lines(document.id, ledger, inserted)
            for line in previous:
                await self.lines.delete(line.id)
                removed.append(line)
            stored = decode_document(await self.documents.update(document.id, document.to_record()))
        except Exception as exc:
            LOG.error("Failed to save document %s, restoring its lines", document.id, exc_info=True)
            await self._restore_lines(document.id, inserted, removed)
            self.notices.post(Notice.error("Failed to save document", describe_error(exc)))
            return None

        if self.collection is not None:
            self.collection.replace(stored)
        self.notices.post(Notice.success("Document saved", f"{stored.number} has been saved."))
        return stored

    async def update_status(self, document: Document, status: str) -> Document | None:
        try:
            stored = decode_document(await self.documents.update(document.id, {"status": status}))
        except Exception as exc:
            LOG.error("Failed to update status of %s", document.id, exc_info=True)
            self.notices.post(Notice.error("Failed to update status", describe_error(exc)))
            return None
        if self.collection is not None:
            self.collection.replace(stored)
        return stored

    async def delete(self, document_id: str) -> bool:
        """
        Delete a document and its lines, lines first.

        Returns:
            True if both deletes succeeded.
        """
        try:
            await self.lines.delete_where("document_id", document_id)
        except Exception as exc:
            LOG.error("Failed to delete lines of %s, keeping document", document_id, exc_info=True)
            self.notices.post(Notice.error("Failed to delete document", describe_error(exc)))
            return False
        try:
            await self.documents.delete(document_id)
        except Exception as exc:
            LOG.error("Failed to delete document %s", document_id, exc_info=True)
            self.notices.post(Notice.error("Failed to delete document", describe_error(exc)))
            return False

        removed = self.collection.discard(document_id) if self.collection is not None else None
        name = removed.number if removed is not None else "The document"
        self.notices.post(Notice.success("Document deleted", f"{name} has been deleted."))
        return True

    async def _insert_lines(self, document_id: str, ledger: Ledger, inserted: list[str] | None = None) -> None:
        for line in ledger.to_lines(document_id):
            row = await self.lines.insert(line.to_record())
            if inserted is not None:
                inserted.append(str(row["id"]))

    async def _restore_lines(self, document_id: str, inserted: list[str], removed: list[DocumentLine]) -> None:
        try:
            for line_id in inserted:
                await self.lines.delete(line_id)
            for line in removed:
                await self.lines.insert(line.to_record())
        except Exception:
            LOG.error("Could not restore lines of document %s", document_id, exc_info=True)

    async def _discard_header(self, document_id: str) -> None:
        try:
            await self.lines.delete_where("document_id", document_id)
            await self.documents.delete(document_id)
        except Exception:
            LOG.error("Could not remove incomplete document %s", document_id, exc_info=True)
