import pytest

from document_ui import services
from document_ui.services.remote_collection_memory import MemoryRemoteCollection


def test_unknown_store_kind():
    with pytest.raises(ValueError, match="Unknown document store kind: nope"):
        services.get_store("nope")


def test_demo_store_is_cached():
    store = services.get_store("demo")
    assert store is services.get_store("demo")
    assert isinstance(store.clients, MemoryRemoteCollection)
    assert store.catalog.name == "order_item"


@pytest.mark.asyncio
async def test_demo_history_loads_seeded_documents():
    store = services.get_store("demo")
    service = services.document_service(store, with_history=True)
    await service.collection.reset("", {"type": "all", "status": "all"})
    numbers = [document.number for document in service.collection.items]
    assert numbers[:2] == ["INV-2024-001", "QUO-2024-001"]
    document, lines = await service.load(service.collection.items[0].id)
    assert document.grand_total == pytest.approx(7_381_500)
    assert len(lines) == 2
