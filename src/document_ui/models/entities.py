"""
Entity models and the decode step at the store boundary.

Each remote table has an explicit frozen dataclass. Rows coming back from
the store are decoded through a benedict wrapper; a missing or malformed
required field raises DecodeError instead of silently turning into an empty
string. Optional text fields default to "".

    Client        <- clients
    CatalogItem   <- order_item
    Document      <- documents
    DocumentLine  <- document_items
"""

from dataclasses import dataclass, replace
from typing import Any, Mapping

from benedict import benedict

from document_ui.models.errors import DecodeError

# Document type -> (label, number prefix)
DOCUMENT_TYPES: dict[str, tuple[str, str]] = {
    "invoice": ("Invoice", "INV"),
    "quotation": ("Quotation", "QUO"),
    "bast": ("Handover (BAST)", "BAST"),
    "receipt": ("Receipt", "REC"),
}

DOCUMENT_STATUSES: dict[str, str] = {
    "draft": "Draft",
    "pending": "Pending",
    "paid": "Paid",
    "overdue": "Overdue",
    "completed": "Completed",
}

DEFAULT_DOCUMENT_TYPE = "invoice"
DEFAULT_DOCUMENT_STATUS = "draft"


class _Row:
    """Typed accessors over one raw store row."""

    def __init__(self, table: str, row: Mapping[str, Any]) -> None:
        self.table = table
        self._b = benedict(dict(row), keypath_separator=None)

    def required(self, key: str) -> str:
        value = self._b.get(key)
        if value is None or (isinstance(value, str) and not value.strip()):
            raise DecodeError(self.table, key)
        return str(value)

    def text(self, key: str) -> str:
        value = self._b.get(key)
        return "" if value is None else str(value)

    def number(self, key: str) -> float:
        value = self._b.get(key)
        if value is None or value == "":
            return 0.0
        if isinstance(value, bool):
            raise DecodeError(self.table, key, "malformed")
        try:
            return float(value)
        except (TypeError, ValueError) as exc:
            raise DecodeError(self.table, key, "malformed") from exc

    def integer(self, key: str) -> int:
        return int(self.number(key))

    def choice(self, key: str, choices: Mapping[str, Any], default: str) -> str:
        value = self.text(key).strip().lower() or default
        if value not in choices:
            raise DecodeError(self.table, key, f"not one of {', '.join(choices)}")
        return value


@dataclass(frozen=True, slots=True)
class Client:
    """A customer company that documents are addressed to."""

    id: str
    company_name: str
    address: str = ""
    phone: str = ""
    email: str = ""
    created_at: str = ""

    def to_record(self) -> dict[str, Any]:
        """Return the writable columns for insert/update."""
        return {
            "company_name": self.company_name,
            "address": self.address,
            "phone": self.phone,
            "email": self.email,
        }


@dataclass(frozen=True, slots=True)
class CatalogItem:
    """A reusable named price entry."""

    id: str
    name: str
    item_type: str = ""
    price: float = 0.0
    created_at: str = ""

    def to_record(self) -> dict[str, Any]:
        return {
            "order_item_name": self.name,
            "order_item_type": self.item_type,
            "order_item_price": self.price,
        }


@dataclass(frozen=True, slots=True)
class Document:
    """Header of a commercial document with its stored totals."""

    id: str
    number: str
    doc_type: str = DEFAULT_DOCUMENT_TYPE
    status: str = DEFAULT_DOCUMENT_STATUS
    client_name: str = ""
    client_address: str = ""
    client_phone: str = ""
    client_email: str = ""
    date: str = ""
    due_date: str = ""
    notes: str = ""
    discount: float = 0.0
    tax: float = 0.0
    subtotal: float = 0.0
    grand_total: float = 0.0
    created_at: str = ""

    @property
    def type_label(self) -> str:
        return DOCUMENT_TYPES[self.doc_type][0]

    @property
    def status_label(self) -> str:
        return DOCUMENT_STATUSES[self.status]

    def with_client(self, client: Client) -> "Document":
        """Copy a client's contact fields into the header by value."""
        return replace(
            self,
            client_name=client.company_name,
            client_address=client.address,
            client_phone=client.phone,
            client_email=client.email,
        )

    def to_record(self) -> dict[str, Any]:
        return {
            "number": self.number,
            "type": self.doc_type,
            "status": self.status,
            "client_name": self.client_name,
            "client_address": self.client_address,
            "client_phone": self.client_phone,
            "client_email": self.client_email,
            "date": self.date or None,
            "due_date": self.due_date or None,
            "notes": self.notes,
            "discount": self.discount,
            "tax": self.tax,
            "subtotal": self.subtotal,
            "grand_total": self.grand_total,
        }


@dataclass(frozen=True, slots=True)
class DocumentLine:
    """One stored line of a document."""

    id: str
    document_id: str
    position: int
    name: str
    quantity: float
    price: float
    total: float

    def to_record(self) -> dict[str, Any]:
        return {
            "document_id": self.document_id,
            "position": self.position,
            "name": self.name,
            "quantity": self.quantity,
            "price": self.price,
            "total": self.total,
        }


def decode_client(row: Mapping[str, Any]) -> Client:
    r = _Row("clients", row)
    return Client(
        id=r.required("id"),
        company_name=r.required("company_name"),
        address=r.text("address"),
        phone=r.text("phone"),
        email=r.text("email"),
        created_at=r.text("created_at"),
    )


def decode_catalog_item(row: Mapping[str, Any]) -> CatalogItem:
    r = _Row("order_item", row)
    return CatalogItem(
        id=r.required("id"),
        name=r.required("order_item_name"),
        item_type=r.text("order_item_type"),
        price=r.number("order_item_price"),
        created_at=r.text("created_at"),
    )


def decode_document(row: Mapping[str, Any]) -> Document:
    r = _Row("documents", row)
    return Document(
        id=r.required("id"),
        number=r.required("number"),
        doc_type=r.choice("type", DOCUMENT_TYPES, DEFAULT_DOCUMENT_TYPE),
        status=r.choice("status", DOCUMENT_STATUSES, DEFAULT_DOCUMENT_STATUS),
        client_name=r.text("client_name"),
        client_address=r.text("client_address"),
        client_phone=r.text("client_phone"),
        client_email=r.text("client_email"),
        date=r.text("date"),
        due_date=r.text("due_date"),
        notes=r.text("notes"),
        discount=r.number("discount"),
        tax=r.number("tax"),
        subtotal=r.number("subtotal"),
        grand_total=r.number("grand_total"),
        created_at=r.text("created_at"),
    )


def decode_document_line(row: Mapping[str, Any]) -> DocumentLine:
    r = _Row("document_items", row)
    return DocumentLine(
        id=r.required("id"),
        document_id=r.required("document_id"),
        position=r.integer("position"),
        name=r.required("name"),
        quantity=r.number("quantity"),
        price=r.number("price"),
        total=r.number("total"),
    )


def number_prefix(doc_type: str, year: int) -> str:
    """Return the part shared by every number of a type and year, e.g. INV-2024-."""
    return f"{DOCUMENT_TYPES[doc_type][1]}-{year}-"


def document_number(doc_type: str, year: int, existing: int) -> str:
    """
    Build the next document number, e.g. INV-2024-001.

    Args:
        doc_type: One of DOCUMENT_TYPES.
        year: Year of the document date.
        existing: Number of documents of this type already numbered in that year.
    """
    return f"{number_prefix(doc_type, year)}{existing + 1:03d}"
