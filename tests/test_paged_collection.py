import asyncio

import pytest

from conftest import FailingCollection, make_clients
from document_ui.models.common import NOTICE_ERROR
from document_ui.models.entities import decode_client
from document_ui.models.errors import RemoteError
from document_ui.services.paged_collection import PagedCollection
from document_ui.services.remote_collection_memory import MemoryRemoteCollection


class ScriptedCollection(MemoryRemoteCollection):
    """Memory collection that waits, and optionally fails, per select call."""

    def __init__(self, *args, script=(), **kwargs):
        super().__init__(*args, **kwargs)
        self.script = list(script)

    async def select(self, fields="*", options=None):
        delay, fail = self.script.pop(0) if self.script else (0.0, False)
        await asyncio.sleep(delay)
        if fail:
            raise RemoteError("connection reset")
        return await super().select(fields, options)


def paged(source, **kwargs):
    kwargs.setdefault("page_size", 10)
    kwargs.setdefault("debounce", 0.05)
    return PagedCollection(source, decode_client, ("company_name", "email"), **kwargs)


def ids(collection):
    return [client.id for client in collection.items]


@pytest.mark.asyncio
async def test_first_page_is_newest_first(client_table):
    collection = paged(client_table)
    assert collection.has_more
    await collection.reset("")
    assert ids(collection) == [str(index) for index in range(25, 15, -1)]
    assert collection.total_count == 25
    assert collection.page == 1
    assert collection.has_more
    assert not collection.is_loading


@pytest.mark.asyncio
async def test_full_single_page_stops_without_extra_fetch():
    table = MemoryRemoteCollection("clients", make_clients(10))
    collection = paged(table)
    await collection.reset("")
    assert len(collection.items) == 10
    assert not collection.has_more
    assert await collection.load_next_page() is False
    assert table.select_calls == 1


@pytest.mark.asyncio
async def test_has_more_until_total_reached(client_table):
    collection = paged(client_table)
    await collection.reset("")
    loaded = [len(collection.items)]
    while await collection.load_next_page():
        loaded.append(len(collection.items))
        assert collection.has_more == (len(collection.items) < 25)
    assert loaded == [10, 20, 25]
    assert not collection.has_more
    assert len(set(ids(collection))) == 25


@pytest.mark.asyncio
async def test_has_more_without_total_uses_page_size(client_table, monkeypatch):
    collection = paged(client_table, page_size=5)

    original = client_table.select

    async def select_without_count(fields="*", options=None):
        result = await original(fields, options)
        result.total_count = None
        return result

    monkeypatch.setattr(client_table, "select", select_without_count)
    await collection.reset("")
    assert collection.total_count is None
    assert collection.has_more
    for _ in range(4):
        await collection.load_next_page()
    assert len(collection.items) == 25
    assert collection.has_more
    await collection.load_next_page()
    assert not collection.has_more


@pytest.mark.asyncio
async def test_search_term_filters_results(client_table):
    collection = paged(client_table)
    await collection.reset("company 0")
    assert ids(collection) == [str(index) for index in range(9, 0, -1)]
    assert collection.total_count == 9
    assert not collection.has_more


@pytest.mark.asyncio
async def test_search_matches_email(client_table):
    collection = paged(client_table)
    await collection.reset("CONTACT17@")
    assert ids(collection) == ["17"]


@pytest.mark.asyncio
async def test_empty_result_has_no_more(client_table):
    collection = paged(client_table)
    await collection.reset("nobody")
    assert collection.items == []
    assert not collection.has_more
    assert collection.total_count == 0


@pytest.mark.asyncio
async def test_filters_drop_all_values():
    rows = make_clients(4)
    rows[0]["phone"] = rows[1]["phone"] = "same"
    table = MemoryRemoteCollection("clients", rows)
    collection = paged(table)
    await collection.reset("", {"phone": "same", "email": "all", "address": None})
    assert collection.filters == {"phone": "same"}
    assert sorted(ids(collection)) == ["1", "2"]
    await collection.reset("company")
    assert collection.filters == {"phone": "same"}


@pytest.mark.asyncio
async def test_fetch_failure_keeps_items_and_posts_one_notice(client_rows):
    table = FailingCollection("clients", client_rows)
    collection = paged(table)
    await collection.reset("")
    before = ids(collection)

    table.fail_on = {"select"}
    assert await collection.load_next_page() is True
    assert ids(collection) == before
    assert collection.page == 1
    assert not collection.is_loading

    notice = collection.notices.take()
    assert notice.level == NOTICE_ERROR
    assert notice.title == "Failed to load data"
    assert "select clients refused" in notice.description
    assert collection.notices.take() is None

    table.fail_on = set()
    await collection.load_next_page()
    assert len(collection.items) == 20


@pytest.mark.asyncio
async def test_failed_reset_keeps_items_until_page_zero_arrives(client_rows):
    table = FailingCollection("clients", client_rows)
    collection = paged(table)
    await collection.reset("")
    await collection.load_next_page()
    before = ids(collection)

    table.fail_on = {"select"}
    assert await collection.reset("company 1") is False
    assert ids(collection) == before
    assert collection.total_count == 25
    assert collection.has_more
    assert collection.notices.take().title == "Failed to load data"

    table.fail_on = set()
    assert await collection.load_next_page() is True
    assert ids(collection) == [str(index) for index in range(19, 9, -1)]
    assert collection.page == 1
    assert collection.total_count == 11


@pytest.mark.asyncio
async def test_malformed_row_is_reported_as_failure():
    rows = make_clients(3)
    del rows[1]["company_name"]
    collection = paged(MemoryRemoteCollection("clients", rows))
    await collection.reset("")
    assert collection.items == []
    notice = collection.notices.take()
    assert notice.is_error
    assert "clients.company_name is missing" in notice.description


@pytest.mark.asyncio
async def test_in_flight_guard_skips_concurrent_load(client_rows):
    table = MemoryRemoteCollection("clients", client_rows, latency=0.05)
    collection = paged(table)
    await collection.reset("")
    first = asyncio.create_task(collection.load_next_page())
    await asyncio.sleep(0.01)
    assert collection.is_loading
    assert await collection.load_next_page() is False
    assert await first is True
    assert len(collection.items) == 20
    assert table.select_calls == 2


@pytest.mark.asyncio
async def test_stale_response_finishing_first_is_discarded(client_rows):
    table = MemoryRemoteCollection("clients", client_rows, latency=0.05)
    collection = paged(table)
    stale = asyncio.create_task(collection.reset("company 1"))
    await asyncio.sleep(0.01)
    await collection.reset("company 2")
    await stale
    assert collection.term == "company 2"
    assert ids(collection) == [str(index) for index in range(25, 19, -1)]
    assert collection.generation == 2
    assert not collection.is_loading


@pytest.mark.asyncio
async def test_stale_response_finishing_last_is_discarded(client_rows):
    table = ScriptedCollection("clients", client_rows, script=[(0.1, False), (0.0, False)])
    collection = paged(table)
    stale = asyncio.create_task(collection.reset("company 1"))
    await asyncio.sleep(0.01)
    await collection.reset("company 2")
    assert ids(collection) == [str(index) for index in range(25, 19, -1)]
    await stale
    assert ids(collection) == [str(index) for index in range(25, 19, -1)]
    assert collection.page == 1


@pytest.mark.asyncio
async def test_stale_failure_posts_no_notice(client_rows):
    table = ScriptedCollection("clients", client_rows, script=[(0.1, True), (0.0, False)])
    collection = paged(table)
    stale = asyncio.create_task(collection.reset("company 1"))
    await asyncio.sleep(0.01)
    await collection.reset("company 2")
    await stale
    assert collection.notices.take() is None
    assert len(collection.items) == 6


@pytest.mark.asyncio
async def test_rapid_searches_trigger_one_fetch(client_table):
    collection = paged(client_table, debounce=0.05)
    tasks = []
    for term in ("c", "co", "company 2"):
        tasks.append(asyncio.create_task(collection.search(term)))
        await asyncio.sleep(0.01)
    results = await asyncio.gather(*tasks)
    assert results == [False, False, True]
    assert client_table.select_calls == 1
    assert collection.term == "company 2"
    assert len(collection.items) == 6


@pytest.mark.asyncio
async def test_close_cancels_pending_search(client_table):
    collection = paged(client_table, debounce=0.05)
    pending = asyncio.create_task(collection.search("company"))
    await asyncio.sleep(0.01)
    collection.close()
    assert await pending is False
    assert client_table.select_calls == 0


@pytest.mark.asyncio
async def test_prepend_shifts_next_page_offset(client_table):
    collection = paged(client_table)
    await collection.reset("")
    stored = decode_client(await client_table.insert({"company_name": "Newest", "email": "new@example.com"}))
    collection.prepend(stored)
    assert collection.total_count == 26
    await collection.load_next_page()
    assert len(collection.items) == 21
    assert len(set(ids(collection))) == 21
    assert ids(collection)[0] == stored.id


@pytest.mark.asyncio
async def test_discard_shifts_next_page_offset(client_table):
    collection = paged(client_table)
    await collection.reset("")
    await client_table.delete("25")
    assert collection.discard("25").company_name == "Company 25"
    assert collection.total_count == 24
    await collection.load_next_page()
    assert ids(collection) == [str(index) for index in range(24, 5, -1)]


def test_replace_patches_one_item():
    collection = paged(MemoryRemoteCollection("clients"))
    first, second = (decode_client(row) for row in make_clients(2))
    collection.prepend(first)
    collection.prepend(second)
    patched = decode_client({**make_clients(1)[0], "company_name": "Renamed"})
    assert collection.replace(patched)
    assert [client.company_name for client in collection.items] == ["Company 02", "Renamed"]
    assert collection.discard("missing") is None
