from unittest.mock import MagicMock

import pytest
from postgrest.exceptions import APIError

from document_ui.models.common import SearchQuery
from document_ui.models.errors import RemoteError
from document_ui.services.remote_collection import SelectOptions
from document_ui.services.remote_collection_supabase import SupabaseRemoteCollection, ilike_pattern, search_filter


def test_ilike_pattern_escapes_wildcards_and_quotes():
    assert ilike_pattern("PT Maju") == '"%PT Maju%"'
    assert ilike_pattern("100%_off") == '"%100\\\\%\\\\_off%"'
    assert ilike_pattern("5*") == '"%5\\\\*%"'
    assert ilike_pattern("a\\b") == '"%a\\\\\\\\b%"'
    assert ilike_pattern('a"b') == '"%a\\"b%"'


def test_search_filter_ors_fields():
    search = SearchQuery("  maju   jaya ", ("company_name", "email"))
    assert search_filter(search) == 'company_name.ilike."%maju jaya%",email.ilike."%maju jaya%"'


@pytest.fixture
def table_query():
    """Chainable stand-in for a PostgREST request builder."""
    query = MagicMock()
    for name in ("select", "eq", "or_", "order", "range", "insert", "update", "delete"):
        getattr(query, name).return_value = query
    return query


@pytest.fixture
def supabase_client(table_query):
    client = MagicMock()
    client.schema.return_value.table.return_value = table_query
    return client


@pytest.mark.asyncio
async def test_select_builds_filtered_ranged_query(supabase_client, table_query):
    table_query.execute.return_value = MagicMock(data=[{"id": "1"}], count=31)
    collection = SupabaseRemoteCollection("clients", client=supabase_client, schema="public")
    result = await collection.select(
        "*",
        SelectOptions(
            search=SearchQuery("maju", ("company_name", "email")),
            equals={"status": "paid"},
            range_from=10,
            range_to=19,
        ),
    )
    assert result.rows == [{"id": "1"}]
    assert result.total_count == 31
    supabase_client.schema.assert_called_once_with("public")
    supabase_client.schema.return_value.table.assert_called_once_with("clients")
    table_query.select.assert_called_once_with("*", count="exact")
    table_query.eq.assert_called_once_with("status", "paid")
    table_query.or_.assert_called_once_with('company_name.ilike."%maju%",email.ilike."%maju%"')
    table_query.order.assert_called_once_with("created_at", desc=True)
    table_query.range.assert_called_once_with(10, 19)


@pytest.mark.asyncio
async def test_select_skips_empty_search(supabase_client, table_query):
    table_query.execute.return_value = MagicMock(data=[], count=0)
    collection = SupabaseRemoteCollection("clients", client=supabase_client, schema="public")
    await collection.select("id", SelectOptions(search=SearchQuery("  ", ("company_name",)), count=False))
    table_query.or_.assert_not_called()
    table_query.range.assert_not_called()
    table_query.select.assert_called_once_with("id", count=None)


@pytest.mark.asyncio
async def test_api_errors_become_remote_errors(supabase_client, table_query):
    table_query.execute.side_effect = APIError({"message": "permission denied for table clients", "code": "42501"})
    collection = SupabaseRemoteCollection("clients", client=supabase_client, schema="public")
    with pytest.raises(RemoteError, match="permission denied"):
        await collection.delete("1")


@pytest.mark.asyncio
async def test_insert_without_returned_row_is_an_error(supabase_client, table_query):
    table_query.execute.return_value = MagicMock(data=[])
    collection = SupabaseRemoteCollection("clients", client=supabase_client, schema="public")
    with pytest.raises(RemoteError, match="returned no row"):
        await collection.insert({"company_name": "PT Contoh"})


@pytest.mark.asyncio
async def test_delete_where_filters_on_field(supabase_client, table_query):
    table_query.execute.return_value = MagicMock(data=[])
    collection = SupabaseRemoteCollection("document_items", client=supabase_client, schema="public")
    assert await collection.delete_where("document_id", "7") is True
    table_query.eq.assert_called_once_with("document_id", "7")
