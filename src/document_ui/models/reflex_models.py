"""
Reflex-compatible view models for the Document UI.

These models extend rx.Base so they can be used with rx.foreach and other
Reflex reactive components. Display strings are computed on the server,
since formatting cannot run in the browser-side expressions.
"""

import reflex as rx

from document_ui.models.entities import CatalogItem, Client, Document
from document_ui.models.ledger import DocumentTotals, LineItem
from document_ui.utils import format_currency, format_date


class ClientModel(rx.Base):
    """Client row."""

    id: str = ""
    company_name: str = ""
    address: str = ""
    phone: str = ""
    email: str = ""


class CatalogItemModel(rx.Base):
    """Catalog entry row."""

    id: str = ""
    name: str = ""
    item_type: str = ""
    price: float = 0.0
    price_display: str = ""


class DocumentModel(rx.Base):
    """Document history row."""

    id: str = ""
    number: str = ""
    doc_type: str = ""
    type_label: str = ""
    status: str = ""
    status_label: str = ""
    client_name: str = ""
    date_display: str = ""
    due_date_display: str = ""
    grand_total: float = 0.0
    grand_total_display: str = ""


class LineItemModel(rx.Base):
    """Editable ledger row."""

    id: str = ""
    name: str = ""
    quantity: float = 1.0
    price: float = 0.0
    total: float = 0.0
    total_display: str = ""


class TotalsModel(rx.Base):
    """Formatted document totals."""

    subtotal: str = ""
    discount_amount: str = ""
    after_discount: str = ""
    tax_amount: str = ""
    grand_total: str = ""


def client_model(client: Client) -> ClientModel:
    return ClientModel(
        id=client.id,
        company_name=client.company_name,
        address=client.address,
        phone=client.phone,
        email=client.email,
    )


def catalog_item_model(item: CatalogItem) -> CatalogItemModel:
    return CatalogItemModel(
        id=item.id,
        name=item.name,
        item_type=item.item_type,
        price=item.price,
        price_display=format_currency(item.price),
    )


def document_model(document: Document) -> DocumentModel:
    return DocumentModel(
        id=document.id,
        number=document.number,
        doc_type=document.doc_type,
        type_label=document.type_label,
        status=document.status,
        status_label=document.status_label,
        client_name=document.client_name,
        date_display=format_date(document.date),
        due_date_display=format_date(document.due_date) if document.due_date else "",
        grand_total=document.grand_total,
        grand_total_display=format_currency(document.grand_total),
    )


def line_item_model(item: LineItem) -> LineItemModel:
    return LineItemModel(
        id=item.id,
        name=item.name,
        quantity=item.quantity,
        price=item.price,
        total=item.total,
        total_display=format_currency(item.total),
    )


def totals_model(totals: DocumentTotals) -> TotalsModel:
    return TotalsModel(
        subtotal=format_currency(totals.subtotal),
        discount_amount=format_currency(totals.discount_amount),
        after_discount=format_currency(totals.after_discount),
        tax_amount=format_currency(totals.tax_amount),
        grand_total=format_currency(totals.grand_total),
    )
