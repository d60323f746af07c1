from datetime import date

import pytest

from conftest import FailingCollection
from document_ui.models.entities import Client, Document, decode_document
from document_ui.models.ledger import Ledger, LineItem
from document_ui.services import DOCUMENT_SEARCH_FIELDS
from document_ui.services.document_service import DocumentService
from document_ui.services.paged_collection import PagedCollection

DOCUMENTS = [
    {
        "id": "1",
        "number": "INV-2024-001",
        "type": "invoice",
        "status": "paid",
        "client_name": "PT Contoh Perusahaan",
        "date": "2024-01-15",
        "discount": 5,
        "tax": 11,
        "subtotal": 7000000,
        "grand_total": 7381500,
        "created_at": "2024-01-15T10:00:00+00:00",
    },
    {
        "id": "2",
        "number": "QUO-2024-001",
        "type": "quotation",
        "status": "pending",
        "client_name": "CV Maju Jaya",
        "client_email": "info@majujaya.com",
        "date": "2024-01-14",
        "discount": 0,
        "tax": 11,
        "subtotal": 2350000,
        "grand_total": 2608500,
        "created_at": "2024-01-14T10:00:00+00:00",
    },
]

LINES = [
    {"id": "1", "document_id": "1", "position": 0, "name": "Konsultasi IT", "quantity": 10, "price": 500000, "total": 5000000},
    {"id": "2", "document_id": "1", "position": 1, "name": "Setup Server", "quantity": 1, "price": 2000000, "total": 2000000},
    {"id": "3", "document_id": "2", "position": 1, "name": "Maintenance", "quantity": 1, "price": 350000, "total": 350000},
    {"id": "4", "document_id": "2", "position": 0, "name": "Setup Server", "quantity": 1, "price": 2000000, "total": 2000000},
]


@pytest.fixture
def tables():
    return FailingCollection("documents", DOCUMENTS), FailingCollection("document_items", LINES)


@pytest.fixture
def service(tables):
    documents, lines = tables
    collection = PagedCollection(documents, decode_document, DOCUMENT_SEARCH_FIELDS)
    return DocumentService(documents, lines, collection)


@pytest.fixture
def ledger():
    return Ledger(
        [
            LineItem(id="a", name="Konsultasi IT", quantity=10, price=500000),
            LineItem(id="b", name="Setup Server", quantity=1, price=2000000),
        ]
    )


def draft(**changes):
    fields = {"id": "", "number": "", "doc_type": "invoice", "client_name": "PT Baru", "date": "2024-03-01", "discount": 5, "tax": 11}
    fields.update(changes)
    return Document(**fields)


@pytest.mark.asyncio
async def test_create_stores_header_totals_and_lines(service, tables, ledger):
    documents, lines = tables
    await service.collection.reset("")
    stored = await service.create(draft(), ledger)

    assert stored.number == "INV-2024-002"
    assert stored.status == "draft"
    assert stored.subtotal == pytest.approx(7_000_000)
    assert stored.grand_total == pytest.approx(7_381_500)
    assert service.collection.items[0].id == stored.id

    stored_lines = [row for row in lines.rows if row["document_id"] == stored.id]
    assert [(row["position"], row["name"], row["total"]) for row in stored_lines] == [
        (0, "Konsultasi IT", 5_000_000),
        (1, "Setup Server", 2_000_000),
    ]
    notice = service.notices.take()
    assert notice.title == "Document created"
    assert "INV-2024-002" in notice.description


@pytest.mark.asyncio
async def test_create_validates_before_any_remote_call(service, tables, ledger):
    documents, lines = tables
    ledger.update_item("b", "name", "")
    assert await service.create(draft(), ledger) is None
    assert documents.calls == []
    assert lines.calls == []
    assert service.notices.take().title == "Incomplete data"


@pytest.mark.asyncio
async def test_create_rejects_unknown_type(service, tables, ledger):
    assert await service.create(draft(doc_type="memo"), ledger) is None
    assert tables[0].calls == []


@pytest.mark.asyncio
async def test_failed_line_insert_removes_header(service, tables, ledger):
    documents, lines = tables
    lines.fail_on = {"insert"}
    assert await service.create(draft(), ledger) is None
    assert len(documents.rows) == 2
    assert service.collection.items == []
    notice = service.notices.take()
    assert notice.is_error
    assert notice.title == "Failed to create document"


@pytest.mark.asyncio
async def test_document_numbers_count_per_type_and_year(service):
    assert await service.next_number("quotation", date(2024, 5, 1)) == "QUO-2024-002"
    assert await service.next_number("bast", date(2025, 1, 1)) == "BAST-2025-001"
    assert await service.next_number("receipt", date(2024, 1, 1)) == "REC-2024-001"
    assert await service.next_number("invoice", date(2025, 1, 2)) == "INV-2025-001"


@pytest.mark.asyncio
async def test_load_returns_lines_in_position_order(service):
    document, lines = await service.load("2")
    assert document.number == "QUO-2024-001"
    assert document.client_email == "info@majujaya.com"
    assert [line.name for line in lines] == ["Setup Server", "Maintenance"]


@pytest.mark.asyncio
async def test_load_missing_document_posts_notice(service):
    assert await service.load("99") is None
    assert service.notices.take().title == "Document not found"


@pytest.mark.asyncio
async def test_save_swaps_lines_before_header(service, tables):
    documents, lines = tables
    document, stored_lines = await service.load("1")
    ledger = Ledger()
    ledger.replace_items(stored_lines[:1])
    ledger.update_item(ledger.items[0].id, "quantity", 2)

    saved = await service.save(document, ledger)
    assert saved.subtotal == pytest.approx(1_000_000)
    assert saved.grand_total == pytest.approx(1_054_500)
    assert [row["name"] for row in lines.rows if row["document_id"] == "1"] == ["Konsultasi IT"]
    assert documents.calls[-1] == "update"
    assert lines.calls[-4:] == ["select", "insert", "delete", "delete"]


@pytest.mark.asyncio
async def test_failed_line_insert_keeps_saved_document(service, tables):
    documents, lines = tables
    document, stored_lines = await service.load("1")
    ledger = Ledger()
    ledger.replace_items(stored_lines[:1])
    lines.fail_on = {"insert"}

    assert await service.save(document, ledger) is None
    assert "update" not in documents.calls
    assert decode_document(documents.rows[0]).grand_total == pytest.approx(7_381_500)
    assert [line.name for line in await service.load_lines("1")] == ["Konsultasi IT", "Setup Server"]
    assert service.notices.take().title == "Failed to save document"


@pytest.mark.asyncio
async def test_failed_header_update_restores_old_lines(service, tables):
    documents, lines = tables
    document, stored_lines = await service.load("1")
    ledger = Ledger()
    ledger.replace_items(stored_lines[:1])
    documents.fail_on = {"update"}

    assert await service.save(document, ledger) is None
    restored = await service.load_lines("1")
    assert [(line.position, line.name) for line in restored] == [(0, "Konsultasi IT"), (1, "Setup Server")]
    assert decode_document(documents.rows[0]).subtotal == pytest.approx(7_000_000)


@pytest.mark.asyncio
async def test_update_status_patches_history(service):
    await service.collection.reset("")
    document = service.collection.find("2")
    stored = await service.update_status(document, "paid")
    assert stored.status == "paid"
    assert service.collection.find("2").status_label == "Paid"


@pytest.mark.asyncio
async def test_delete_cascades_lines_first(service, tables):
    documents, lines = tables
    await service.collection.reset("")
    assert await service.delete("1") is True
    assert lines.calls[-1] == "delete_where"
    assert documents.calls[-1] == "delete"
    assert all(row["document_id"] != "1" for row in lines.rows)
    assert [row["id"] for row in documents.rows] == ["2"]
    assert service.collection.find("1") is None
    assert service.notices.take().title == "Document deleted"


@pytest.mark.asyncio
async def test_failed_line_delete_keeps_parent_and_list(service, tables):
    documents, lines = tables
    await service.collection.reset("")
    lines.fail_on = {"delete_where"}
    assert await service.delete("1") is False
    assert "delete" not in documents.calls
    assert len(documents.rows) == 2
    assert service.collection.find("1") is not None
    assert service.notices.take().title == "Failed to delete document"


@pytest.mark.asyncio
async def test_count_by_status(service):
    assert await service.count() == 2
    assert await service.count(status="pending") == 1


def test_client_is_copied_into_header_by_value():
    client = Client(id="1", company_name="PT Contoh", address="Jl. Sudirman", phone="021", email="a@b.c")
    document = draft().with_client(client)
    assert (document.client_name, document.client_address, document.client_phone, document.client_email) == (
        "PT Contoh",
        "Jl. Sudirman",
        "021",
        "a@b.c",
    )
