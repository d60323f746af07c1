"""
Create/update/delete orchestration for the client and catalog screens.

An EntityService keeps one PagedCollection consistent with its remote
table:

- create: validate, insert, then prepend the stored record
- update: validate, update, then patch the matching item in place
- delete: remove locally, delete remotely, and on failure re-fetch the
  first page instead of guessing what the store contains; if that fetch
  fails too the removed item is put back

Every outcome is reported through the collection's notice slot; no remote
failure escapes to the caller.
"""

import math
from typing import Any, Callable, Generic, Mapping, TypeVar

from document_ui.lib import logs
from document_ui.models.common import Notice
from document_ui.models.entities import CatalogItem, Client
from document_ui.models.errors import DocumentUIError, FormValidationError, ValidationError
from document_ui.services.paged_collection import PagedCollection
from document_ui.services.remote_collection import Record, RemoteCollection

LOG = logs.logger(__file__)

T = TypeVar("T")


def _text(form: Mapping[str, Any], name: str) -> str:
    value = form.get(name)
    return "" if value is None else str(value).strip()


def describe_error(exc: Exception) -> str:
    """Return the message to show for an exception caught at a call site."""
    if isinstance(exc, DocumentUIError):
        return exc.description
    return str(exc) or type(exc).__name__


class EntityService(Generic[T]):
    """
    Base class for entity CRUD against one remote table.

    Subclasses implement from_form() and label().

    Attributes:
        source: The remote table.
        collection: The list shown on screen.
    """

    noun = "Record"

    def __init__(self, source: RemoteCollection, collection: PagedCollection[T], decode: Callable[[Record], T]) -> None:
        self.source = source
        self.collection = collection
        self.notices = collection.notices
        self._decode = decode

    def from_form(self, form: Mapping[str, Any], record_id: str = "") -> T:
        """Build an entity from form values, raising FormValidationError."""
        raise NotImplementedError

    def label(self, entity: T) -> str:
        raise NotImplementedError

    async def save_form(self, form: Mapping[str, Any], record_id: str | None = None) -> T | None:
        """Create a new entity, or update record_id, from submitted form values."""
        try:
            entity = self.from_form(form, record_id or "")
        except ValidationError as exc:
            self.notices.post(exc.to_notice())
            return None
        if record_id:
            return await self.update(entity)
        return await self.create(entity)

    async def create(self, entity: T) -> T | None:
        try:
            stored = self._decode(await self.source.insert(entity.to_record()))
        except Exception as exc:
            self._failed("save", exc)
            return None
        self.collection.prepend(stored)
        self.notices.post(Notice.success(f"{self.noun} added", f"{self.label(stored)} has been added."))
        return stored

    async def update(self, entity: T) -> T | None:
        try:
            stored = self._decode(await self.source.update(entity.id, entity.to_record()))
        except Exception as exc:
            self._failed("update", exc)
            return None
        self.collection.replace(stored)
        self.notices.post(Notice.success(f"{self.noun} updated", f"{self.label(stored)} has been updated."))
        return stored

    async def delete(self, record_id: str) -> bool:
        """
        Delete optimistically; reconcile with the store when the delete fails.

        Returns:
            True if the record was deleted.
        """
        position = self.collection.position(record_id)
        removed = self.collection.discard(record_id)
        try:
            await self.source.delete(record_id)
        except Exception as exc:
            LOG.warning("Delete %s %s failed, reloading first page", self.source.name, record_id, exc_info=True)
            if not await self.collection.reset() and removed is not None:
                self.collection.restore(removed, position)
            self.notices.post(Notice.error(f"Failed to delete {self.noun.lower()}", describe_error(exc)))
            return False
        name = self.label(removed) if removed is not None else self.noun
        self.notices.post(Notice.success(f"{self.noun} deleted", f"{name} has been deleted."))
        return True

    def _failed(self, action: str, exc: Exception) -> None:
        LOG.error("Failed to %s %s", action, self.source.name, exc_info=True)
        self.notices.post(Notice.error(f"Failed to {action} {self.noun.lower()}", describe_error(exc)))


class ClientService(EntityService[Client]):
    noun = "Client"

    def from_form(self, form: Mapping[str, Any], record_id: str = "") -> Client:
        company_name = _text(form, "company_name")
        if not company_name:
            raise FormValidationError("Company name is required.")
        return Client(
            id=record_id,
            company_name=company_name,
            address=_text(form, "address"),
            phone=_text(form, "phone"),
            email=_text(form, "email"),
        )

    def label(self, entity: Client) -> str:
        return entity.company_name


class CatalogService(EntityService[CatalogItem]):
    noun = "Item"

    def from_form(self, form: Mapping[str, Any], record_id: str = "") -> CatalogItem:
        name = _text(form, "name")
        if not name:
            raise FormValidationError("Item name is required.")
        raw_price = _text(form, "price") or "0"
        try:
            price = float(raw_price)
        except ValueError as exc:
            raise FormValidationError(f"Price must be a number, got {raw_price!r}.") from exc
        if not math.isfinite(price) or price < 0:
            raise FormValidationError("Price must be a non-negative number.")
        return CatalogItem(id=record_id, name=name, item_type=_text(form, "item_type"), price=price)

    def label(self, entity: CatalogItem) -> str:
        return entity.name
