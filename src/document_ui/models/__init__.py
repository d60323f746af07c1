"""
Data models for the Document UI.

This package provides:
- Entity models (Client, CatalogItem, Document, DocumentLine) and decoders
- The line-item ledger and document totals
- Notices, search queries and collection pages shared with the UI layer
- The application exception hierarchy

Reflex view models live in reflex_models and are imported separately so
the core stays usable without the web framework.
"""

from document_ui.models.common import CollectionPage, Notice, NoticeSlot, SearchQuery
from document_ui.models.entities import (
    DOCUMENT_STATUSES,
    DOCUMENT_TYPES,
    CatalogItem,
    Client,
    Document,
    DocumentLine,
    decode_catalog_item,
    decode_client,
    decode_document,
    decode_document_line,
    document_number,
)
from document_ui.models.errors import (
    DecodeError,
    DocumentUIError,
    FormValidationError,
    LedgerValidationError,
    RemoteError,
    ValidationError,
)
from document_ui.models.ledger import DocumentTotals, Ledger, LineItem, compute_totals

__all__ = [
    "DOCUMENT_STATUSES",
    "DOCUMENT_TYPES",
    "CatalogItem",
    "Client",
    "CollectionPage",
    "DecodeError",
    "Document",
    "DocumentLine",
    "DocumentTotals",
    "DocumentUIError",
    "FormValidationError",
    "Ledger",
    "LedgerValidationError",
    "LineItem",
    "Notice",
    "NoticeSlot",
    "RemoteError",
    "SearchQuery",
    "ValidationError",
    "compute_totals",
    "decode_catalog_item",
    "decode_client",
    "decode_document",
    "decode_document_line",
    "document_number",
]
