"""
In-memory implementation of RemoteCollection.

This collection is useful for:
- Local development without a Supabase project
- Testing the collection and entity services with realistic data
- Demonstrating the application without cloud dependencies

Rows are kept in a plain list. Search, equality filters, ordering, range
windows and counts behave like the PostgREST equivalents the Supabase
adapter uses, so screens behave the same in both modes.
"""

import asyncio
import itertools
from copy import deepcopy
from datetime import datetime, timezone
from typing import Any, Iterable, Mapping, Sequence

from document_ui.lib import logs
from document_ui.models.errors import RemoteError
from document_ui.services.remote_collection import Record, RemoteCollection, SelectOptions, SelectResult

LOG = logs.logger(__file__)


def _sort_key(value: Any) -> tuple:
    # numbers, then text, then missing values
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return (0, value, "")
    if value is None:
        return (2, 0, "")
    return (1, 0, str(value))


class MemoryRemoteCollection(RemoteCollection):
    """
    Remote collection backed by a list of dictionaries.

    Attributes:
        latency: Simulated round-trip delay in seconds.
    """

    def __init__(self, name: str, rows: Iterable[Mapping[str, Any]] | None = None, latency: float = 0.0) -> None:
        super().__init__(name)
        self.latency = latency
        self._rows: list[Record] = [dict(row) for row in rows or ()]
        start = max((int(row["id"]) for row in self._rows if str(row.get("id", "")).isdigit()), default=0) + 1
        self._ids = itertools.count(start)
        self.select_calls = 0

    @property
    def rows(self) -> list[Record]:
        return deepcopy(self._rows)

    async def select(self, fields: Sequence[str] | str = "*", options: SelectOptions | None = None) -> SelectResult:
        options = options or SelectOptions()
        self.select_calls += 1
        await self._round_trip()

        rows = [row for row in self._rows if self._matches(row, options)]
        if options.order_by:
            rows.sort(key=lambda row: _sort_key(row.get(options.order_by)), reverse=options.descending)
        total = len(rows)
        stop = None if options.range_to is None else options.range_to + 1
        window = rows[options.range_from : stop]
        return SelectResult(
            rows=[self._project(row, fields) for row in window],
            total_count=total if options.count else None,
        )

    async def insert(self, record: Mapping[str, Any]) -> Record:
        await self._round_trip()
        row = dict(record)
        row.setdefault("id", str(next(self._ids)))
        row.setdefault("created_at", datetime.now(timezone.utc).isoformat())
        self._rows.append(row)
        LOG.debug("Inserted %s.%s", self.name, row["id"])
        return dict(row)

    async def update(self, record_id: str, changes: Mapping[str, Any]) -> Record:
        await self._round_trip()
        row = self._find(record_id)
        if row is None:
            raise RemoteError(f"No {self.name} record with id {record_id}")
        row.update(changes)
        return dict(row)

    async def delete(self, record_id: str) -> bool:
        await self._round_trip()
        if self._find(record_id) is None:
            raise RemoteError(f"No {self.name} record with id {record_id}")
        self._rows = [row for row in self._rows if str(row.get("id")) != str(record_id)]
        return True

    async def delete_where(self, field_name: str, value: Any) -> bool:
        await self._round_trip()
        self._rows = [row for row in self._rows if str(row.get(field_name)) != str(value)]
        return True

    async def _round_trip(self) -> None:
        if self.latency:
            await asyncio.sleep(self.latency)

    def _find(self, record_id: str) -> Record | None:
        return next((row for row in self._rows if str(row.get("id")) == str(record_id)), None)

    @staticmethod
    def _matches(row: Record, options: SelectOptions) -> bool:
        if any(str(row.get(key)) != str(value) for key, value in options.equals.items()):
            return False
        return options.search is None or options.search.matches(row)

    @staticmethod
    def _project(row: Record, fields: Sequence[str] | str) -> Record:
        if fields == "*" or not fields:
            return dict(row)
        names = [name.strip() for name in fields.split(",")] if isinstance(fields, str) else list(fields)
        return {name: row.get(name) for name in names}
