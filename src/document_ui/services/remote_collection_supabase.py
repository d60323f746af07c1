"""
Supabase-backed implementation of RemoteCollection.

This module provides the production data access that:
- Reads and writes one Postgres table through the Supabase PostgREST API
- Translates SearchQuery into an `or` of `ilike` filters
- Requests exact counts so paged lists know when to stop
- Runs the blocking supabase client in the default executor

PostgREST errors are wrapped in RemoteError carrying the backend message.
"""

import asyncio
from typing import Any, Callable, Mapping, Sequence, TypeVar

from postgrest.exceptions import APIError
from supabase import Client

from document_ui.lib import clients, logs, objects
from document_ui.models.common import SearchQuery
from document_ui.models.errors import RemoteError
from document_ui.services.remote_collection import Record, RemoteCollection, SelectOptions, SelectResult

LOG = logs.logger(__file__)

T = TypeVar("T")


def ilike_pattern(term: str) -> str:
    """
    Build a quoted substring pattern usable inside a PostgREST `or` filter.

    LIKE wildcards typed by the user (including PostgREST's `*` alias for
    `%`) are escaped so they match literally, and the value is double-quoted
    so commas and parentheses survive. PostgREST unquotes the value by
    dropping one backslash level, so the LIKE escapes are written twice.
    """
    like = term.replace("\\", "\\\\")
    for wildcard in "%_*":
        like = like.replace(wildcard, "\\" + wildcard)
    escaped = like.replace("\\", "\\\\").replace('"', '\\"')
    return f'"%{escaped}%"'


def search_filter(search: SearchQuery) -> str:
    """Return the `or` filter expression for a search, e.g. a.ilike.x,b.ilike.x."""
    pattern = ilike_pattern(search.normalized)
    return ",".join(f"{name}.ilike.{pattern}" for name in search.fields)


class SupabaseRemoteCollection(RemoteCollection):
    """
    Remote collection for one Supabase table.

    Attributes:
        name: Table name.
        schema: Postgres schema holding the table.
    """

    def __init__(self, name: str, client: Client | None = None, schema: str | None = None) -> None:
        super().__init__(name)
        self.schema = schema or clients.schema()
        self._client = client

    @property
    def client(self) -> Client:
        if self._client is None:
            self._client = clients.supabase()
        return self._client

    def _table(self):
        return self.client.schema(self.schema).table(self.name)

    async def select(self, fields: Sequence[str] | str = "*", options: SelectOptions | None = None) -> SelectResult:
        options = options or SelectOptions()
        columns = fields if isinstance(fields, str) else ", ".join(fields)

        def _select() -> SelectResult:
            query = self._table().select(columns, count="exact" if options.count else None)
            for key, value in options.equals.items():
                query = query.eq(key, value)
            if options.search is not None and not options.search.is_empty:
                query = query.or_(search_filter(options.search))
            if options.order_by:
                query = query.order(options.order_by, desc=options.descending)
            if options.range_to is not None:
                query = query.range(options.range_from, options.range_to)
            response = query.execute()
            return SelectResult(rows=list(response.data or []), total_count=response.count)

        return await self._run("select", _select)

    async def insert(self, record: Mapping[str, Any]) -> Record:
        def _insert() -> Record:
            response = self._table().insert(dict(record)).execute()
            if not response.data:
                raise RemoteError(f"Insert into {self.name} returned no row")
            return response.data[0]

        return await self._run("insert", _insert)

    async def update(self, record_id: str, changes: Mapping[str, Any]) -> Record:
        def _update() -> Record:
            response = self._table().update(dict(changes)).eq("id", record_id).execute()
            if not response.data:
                raise RemoteError(f"No {self.name} record with id {record_id}")
            return response.data[0]

        return await self._run("update", _update)

    async def delete(self, record_id: str) -> bool:
        def _delete() -> bool:
            self._table().delete().eq("id", record_id).execute()
            return True

        return await self._run("delete", _delete)

    async def delete_where(self, field_name: str, value: Any) -> bool:
        def _delete() -> bool:
            self._table().delete().eq(field_name, value).execute()
            return True

        return await self._run("delete_where", _delete)

    async def _run(self, operation: str, call: Callable[[], T]) -> T:
        """Run a blocking client call off the event loop and normalize errors."""
        LOG.info("%s %s", operation, self.name)
        loop = asyncio.get_running_loop()
        try:
            return await loop.run_in_executor(None, call)
        except RemoteError:
            raise
        except APIError as exc:
            LOG.warning("%s %s failed: %s", operation, self.name, objects.to_json(exc.json()), exc_info=True)
            raise RemoteError(exc.message or str(exc)) from exc
        except Exception as exc:
            LOG.error("%s %s failed", operation, self.name, exc_info=True)
            raise RemoteError(str(exc) or type(exc).__name__) from exc
