import pytest
import pytest_asyncio

from conftest import FailingCollection, make_clients
from document_ui.models.common import NOTICE_ERROR, NOTICE_SUCCESS
from document_ui.models.entities import decode_catalog_item, decode_client
from document_ui.services import CATALOG_SEARCH_FIELDS, CLIENT_SEARCH_FIELDS
from document_ui.services.entity_service import CatalogService, ClientService
from document_ui.services.paged_collection import PagedCollection
from document_ui.services.remote_collection_memory import MemoryRemoteCollection


@pytest.fixture
def client_table():
    return FailingCollection("clients", make_clients(15))


@pytest_asyncio.fixture
async def clients(client_table):
    """ClientService with its first page loaded."""
    collection = PagedCollection(client_table, decode_client, CLIENT_SEARCH_FIELDS, page_size=10)
    service = ClientService(client_table, collection, decode_client)
    await collection.reset("")
    return service


def names(service):
    return [client.company_name for client in service.collection.items]


@pytest.mark.asyncio
async def test_create_prepends_stored_record(clients, client_table):
    stored = await clients.save_form({"company_name": "  PT Baru ", "email": "baru@example.com"})
    assert stored.id == "16"
    assert stored.company_name == "PT Baru"
    assert names(clients)[0] == "PT Baru"
    assert len(clients.collection.items) == 11
    assert clients.collection.total_count == 16
    assert any(row["company_name"] == "PT Baru" for row in client_table.rows)

    notice = clients.notices.take()
    assert notice.level == NOTICE_SUCCESS
    assert notice.title == "Client added"


@pytest.mark.asyncio
async def test_create_requires_company_name(clients, client_table):
    assert await clients.save_form({"company_name": "   ", "email": "x@example.com"}) is None
    assert "insert" not in client_table.calls
    notice = clients.notices.take()
    assert notice.level == NOTICE_ERROR
    assert notice.description == "Company name is required."


@pytest.mark.asyncio
async def test_create_failure_leaves_list_untouched(clients, client_table):
    before = names(clients)
    client_table.fail_on = {"insert"}
    assert await clients.save_form({"company_name": "PT Gagal"}) is None
    assert names(clients) == before
    notice = clients.notices.take()
    assert notice.title == "Failed to save client"
    assert notice.description == "insert clients refused"


@pytest.mark.asyncio
async def test_update_patches_one_item_in_place(clients):
    before = [client.id for client in clients.collection.items]
    stored = await clients.save_form({"company_name": "Renamed", "phone": "0800"}, "14")
    assert stored.company_name == "Renamed"
    assert [client.id for client in clients.collection.items] == before
    assert clients.collection.find("14").phone == "0800"
    assert clients.notices.take().title == "Client updated"


@pytest.mark.asyncio
async def test_delete_removes_item(clients, client_table):
    assert await clients.delete("15") is True
    assert clients.collection.find("15") is None
    assert all(row["id"] != "15" for row in client_table.rows)
    notice = clients.notices.take()
    assert notice.title == "Client deleted"
    assert "Company 15" in notice.description


@pytest.mark.asyncio
async def test_failed_delete_refetches_first_page(clients, client_table):
    client_table.fail_on = {"delete"}
    selects_before = client_table.calls.count("select")
    assert await clients.delete("15") is False
    assert client_table.calls.count("select") == selects_before + 1
    assert clients.collection.find("15") is not None
    assert len(clients.collection.items) == 10
    notice = clients.notices.take()
    assert notice.level == NOTICE_ERROR
    assert notice.title == "Failed to delete client"


@pytest.mark.asyncio
async def test_failed_delete_and_failed_refetch_keep_the_list(clients, client_table):
    before = names(clients)
    client_table.fail_on = {"delete", "select"}
    assert await clients.delete("12") is False
    assert names(clients) == before
    assert clients.collection.total_count == 15
    notice = clients.notices.take()
    assert notice.title == "Failed to delete client"

    client_table.fail_on = set()
    await clients.collection.load_next_page()
    assert names(clients) == before


@pytest.fixture
def catalog():
    table = MemoryRemoteCollection(
        "order_item",
        [{"id": "1", "order_item_name": "Konsultasi IT", "order_item_type": "Service", "order_item_price": 500000}],
    )
    collection = PagedCollection(table, decode_catalog_item, CATALOG_SEARCH_FIELDS)
    return CatalogService(table, collection, decode_catalog_item)


@pytest.mark.asyncio
async def test_catalog_price_is_parsed(catalog):
    stored = await catalog.save_form({"name": "Lisensi", "item_type": "Product", "price": "1500000"})
    assert stored.price == 1_500_000
    assert stored.item_type == "Product"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("price", "message"),
    [
        ("-1", "non-negative"),
        ("abc", "must be a number"),
        ("inf", "non-negative"),
    ],
)
async def test_catalog_rejects_bad_prices(catalog, price, message):
    assert await catalog.save_form({"name": "Lisensi", "price": price}) is None
    assert message in catalog.notices.take().description


@pytest.mark.asyncio
async def test_catalog_requires_name(catalog):
    assert await catalog.save_form({"name": "", "price": "10"}) is None
    assert catalog.notices.take().description == "Item name is required."
