"""
Store factory for the Document UI.

This module provides the get_store() factory function that returns the
DocumentStore (one RemoteCollection per table) for the configured backend,
plus helpers that wire the paged collections and services each screen
needs around an explicitly passed store.

Available Implementations:
- demo: In-memory tables seeded with sample records (no Supabase required)
- supabase: Supabase tables reached through the PostgREST API

The store is cached at the module level, so the same instance is reused
across all sessions. Configure via DOCUMENT_UI_SERVICE environment variable.
"""

from dataclasses import dataclass
from functools import cache
from typing import Callable, Dict

from document_ui import config
from document_ui.lib import logs
from document_ui.models.common import NoticeSlot
from document_ui.models.entities import (
    CatalogItem,
    Client,
    Document,
    decode_catalog_item,
    decode_client,
    decode_document,
)
from document_ui.services.document_service import DocumentService
from document_ui.services.entity_service import CatalogService, ClientService
from document_ui.services.paged_collection import PagedCollection
from document_ui.services.remote_collection import RemoteCollection
from document_ui.services.remote_collection_memory import MemoryRemoteCollection
from document_ui.services.remote_collection_supabase import SupabaseRemoteCollection

LOG = logs.logger(__file__)

CLIENT_SEARCH_FIELDS = ("company_name", "email")
CATALOG_SEARCH_FIELDS = ("order_item_name", "order_item_type")
DOCUMENT_SEARCH_FIELDS = ("number", "client_name")


@dataclass(frozen=True)
class DocumentStore:
    """The remote tables the application works with."""

    clients: RemoteCollection
    catalog: RemoteCollection
    documents: RemoteCollection
    document_items: RemoteCollection


def _demo_store() -> DocumentStore:
    from document_ui.data import demo_records

    tables = config.TABLES
    latency = config.DEMO_LATENCY
    return DocumentStore(
        clients=MemoryRemoteCollection(tables["clients"], demo_records.CLIENTS, latency),
        catalog=MemoryRemoteCollection(tables["catalog"], demo_records.CATALOG_ITEMS, latency),
        documents=MemoryRemoteCollection(tables["documents"], demo_records.DOCUMENTS, latency),
        document_items=MemoryRemoteCollection(tables["document_items"], demo_records.DOCUMENT_ITEMS, latency),
    )


def _supabase_store() -> DocumentStore:
    tables = config.TABLES
    return DocumentStore(
        clients=SupabaseRemoteCollection(tables["clients"]),
        catalog=SupabaseRemoteCollection(tables["catalog"]),
        documents=SupabaseRemoteCollection(tables["documents"]),
        document_items=SupabaseRemoteCollection(tables["document_items"]),
    )


_STORE_REGISTRY: Dict[str, Callable[[], DocumentStore]] = {
    "demo": _demo_store,
    "supabase": _supabase_store,
}


@cache
def get_store(kind: str | None = None) -> DocumentStore:
    """Return the configured document store implementation."""
    resolved_kind = (kind or config.SERVICE_KIND).lower()
    LOG.info("get_store - kind:%s resolved_kind:%s", kind, resolved_kind)
    try:
        factory = _STORE_REGISTRY[resolved_kind]
    except KeyError as exc:
        msg = f"Unknown document store kind: {resolved_kind}"
        raise ValueError(msg) from exc
    return factory()


def client_collection(store: DocumentStore, notices: NoticeSlot | None = None) -> PagedCollection[Client]:
    return PagedCollection(store.clients, decode_client, CLIENT_SEARCH_FIELDS, notices=notices)


def catalog_collection(store: DocumentStore, notices: NoticeSlot | None = None) -> PagedCollection[CatalogItem]:
    return PagedCollection(store.catalog, decode_catalog_item, CATALOG_SEARCH_FIELDS, notices=notices)


def document_collection(store: DocumentStore, notices: NoticeSlot | None = None) -> PagedCollection[Document]:
    return PagedCollection(store.documents, decode_document, DOCUMENT_SEARCH_FIELDS, notices=notices)


def client_service(store: DocumentStore) -> ClientService:
    return ClientService(store.clients, client_collection(store), decode_client)


def catalog_service(store: DocumentStore) -> CatalogService:
    return CatalogService(store.catalog, catalog_collection(store), decode_catalog_item)


def document_service(store: DocumentStore, with_history: bool = False) -> DocumentService:
    collection = document_collection(store) if with_history else None
    return DocumentService(store.documents, store.document_items, collection)


__all__ = [
    "DocumentStore",
    "catalog_collection",
    "catalog_service",
    "client_collection",
    "client_service",
    "document_collection",
    "document_service",
    "get_store",
]
