"""
Line-item ledger and document totals.

The ledger is the editable, ordered list of rows that make up one document
being authored. A line's total is always quantity * price; there is no way
to set it directly, so it can never go stale. Document totals are derived
on every call from the current rows and the two percentages:

    subtotal        = sum(line totals)
    discount_amount = subtotal * discount% / 100
    after_discount  = subtotal - discount_amount
    tax_amount      = after_discount * tax% / 100
    grand_total     = after_discount + tax_amount
"""

import math
import uuid
from dataclasses import dataclass
from typing import Any, Iterable, Sequence

from document_ui.models.entities import CatalogItem, DocumentLine
from document_ui.models.errors import LedgerValidationError

DEFAULT_TAX_PCT = 11.0
EDITABLE_FIELDS = ("name", "quantity", "price")


def _new_id() -> str:
    return uuid.uuid4().hex


def _amount(value: Any) -> float:
    """Coerce form input to a finite, non-negative number."""
    if isinstance(value, str):
        value = value.strip().replace(",", "")
    try:
        number = float(value or 0)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


def _percent(value: Any) -> float:
    return min(_amount(value), 100.0)


@dataclass(slots=True)
class LineItem:
    """Represents one billable row of the ledger."""

    id: str
    name: str = ""
    quantity: float = 1.0
    price: float = 0.0

    @property
    def total(self) -> float:
        return self.quantity * self.price


@dataclass(frozen=True, slots=True)
class DocumentTotals:
    """Aggregates derived from a ledger and two percentages."""

    subtotal: float = 0.0
    discount_pct: float = 0.0
    discount_amount: float = 0.0
    after_discount: float = 0.0
    tax_pct: float = DEFAULT_TAX_PCT
    tax_amount: float = 0.0
    grand_total: float = 0.0


def compute_totals(
    items: Iterable[LineItem], discount_pct: Any = 0, tax_pct: Any = DEFAULT_TAX_PCT
) -> DocumentTotals:
    """
    Compute document totals for the given rows.

    Percentages are clamped to [0, 100]. An empty or all-zero ledger yields
    all-zero amounts.
    """
    discount_pct = _percent(discount_pct)
    tax_pct = _percent(tax_pct)
    subtotal = sum((item.total for item in items), 0.0)
    discount_amount = subtotal * discount_pct / 100
    after_discount = subtotal - discount_amount
    tax_amount = after_discount * tax_pct / 100
    return DocumentTotals(
        subtotal=subtotal,
        discount_pct=discount_pct,
        discount_amount=discount_amount,
        after_discount=after_discount,
        tax_pct=tax_pct,
        tax_amount=tax_amount,
        grand_total=after_discount + tax_amount,
    )


class Ledger:
    """
    Ordered, editable collection of line items for one document.

    The ledger never drops below one row: removing the last remaining item
    is silently ignored so the editor always has a row to type into.
    """

    def __init__(self, items: Iterable[LineItem] | None = None) -> None:
        self._items: list[LineItem] = [
            LineItem(id=item.id, name=item.name, quantity=item.quantity, price=item.price)
            for item in items or ()
        ]
        if not self._items:
            self._items.append(LineItem(id=_new_id()))

    def __len__(self) -> int:
        return len(self._items)

    @property
    def items(self) -> Sequence[LineItem]:
        return tuple(self._items)

    def get(self, item_id: str) -> LineItem | None:
        return next((item for item in self._items if item.id == item_id), None)

    def add_item(self, entry: CatalogItem | None = None) -> LineItem:
        """Append a blank row, or a row copied from a catalog entry."""
        if entry is None:
            item = LineItem(id=_new_id())
        else:
            item = LineItem(id=_new_id(), name=entry.name, quantity=1.0, price=_amount(entry.price))
        self._items.append(item)
        return item

    def remove_item(self, item_id: str) -> None:
        if len(self._items) <= 1:
            return
        self._items = [item for item in self._items if item.id != item_id]

    def update_item(self, item_id: str, field_name: str, value: Any) -> None:
        """Set name, quantity or price on one row; unknown ids are ignored."""
        if field_name not in EDITABLE_FIELDS:
            raise ValueError(f"Unknown line item field: {field_name}")
        item = self.get(item_id)
        if item is None:
            return
        if field_name == "name":
            item.name = "" if value is None else str(value)
        elif field_name == "quantity":
            item.quantity = _amount(value)
        else:
            item.price = _amount(value)

    def replace_items(self, lines: Iterable[LineItem | DocumentLine]) -> None:
        """Load rows from an existing document or quotation by value."""
        self._items = [
            LineItem(id=_new_id(), name=line.name, quantity=_amount(line.quantity), price=_amount(line.price))
            for line in lines
        ] or [LineItem(id=_new_id())]

    def compute_totals(self, discount_pct: Any = 0, tax_pct: Any = DEFAULT_TAX_PCT) -> DocumentTotals:
        return compute_totals(self._items, discount_pct, tax_pct)

    def validate(self, company_name: str) -> None:
        """
        Check the ledger can be submitted.

        Raises:
            LedgerValidationError: If the company name or any item name is blank.
        """
        if not (company_name or "").strip() or any(not item.name.strip() for item in self._items):
            raise LedgerValidationError("Please complete the client details and every item name.")

    def to_lines(self, document_id: str) -> list[DocumentLine]:
        """Return the rows as document lines, positioned in display order."""
        return [
            DocumentLine(
                id=item.id,
                document_id=document_id,
                position=position,
                name=item.name.strip(),
                quantity=item.quantity,
                price=item.price,
                total=item.total,
            )
            for position, item in enumerate(self._items)
        ]
