"""
Abstract base class defining the remote data access contract.

Every table the application reads or writes is reached through a
RemoteCollection. The contract mirrors a PostgREST-style API: select with
filter/order/range/count, insert, update by id and delete by id.

Implementations:
- MemoryRemoteCollection: In-memory rows for demo mode and tests
- SupabaseRemoteCollection: Supabase (PostgREST) table access
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from document_ui.models.common import SearchQuery

Record = dict[str, Any]


@dataclass(frozen=True, slots=True)
class SelectOptions:
    """
    Options for a select call.

    Attributes:
        search: Optional case-insensitive substring search across fields.
        equals: Exact-match filters, AND-ed together.
        order_by: Column to order by.
        descending: Newest first when ordering by created_at.
        range_from: Zero-based inclusive start of the window.
        range_to: Zero-based inclusive end of the window, None for no limit.
        count: Ask the backend for the total number of matching rows.
    """

    search: SearchQuery | None = None
    equals: Mapping[str, Any] = field(default_factory=dict)
    order_by: str = "created_at"
    descending: bool = True
    range_from: int = 0
    range_to: int | None = None
    count: bool = True


@dataclass(slots=True)
class SelectResult:
    """Rows returned by a select, plus the total count when requested."""

    rows: list[Record]
    total_count: int | None = None


class RemoteCollection(ABC):
    """
    Abstract base class for one remote table.

    All methods are coroutines. Implementations raise RemoteError on
    failure; they never return partial writes.

    Attributes:
        name: Table name, used in log lines and error messages.
    """

    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    async def select(self, fields: Sequence[str] | str = "*", options: SelectOptions | None = None) -> SelectResult:
        """
        Return rows matching the options.

        Args:
            fields: Column names to return, or "*" for all.
            options: Filter, order, range and count options.
        """

    @abstractmethod
    async def insert(self, record: Mapping[str, Any]) -> Record:
        """Insert a record and return it as stored (with id and created_at)."""

    @abstractmethod
    async def update(self, record_id: str, changes: Mapping[str, Any]) -> Record:
        """Apply a partial update to one record and return it as stored."""

    @abstractmethod
    async def delete(self, record_id: str) -> bool:
        """Delete one record by id."""

    @abstractmethod
    async def delete_where(self, field_name: str, value: Any) -> bool:
        """Delete every record whose field equals value."""

    async def get(self, record_id: str) -> Record | None:
        """Return one record by id, or None when it does not exist."""
        result = await self.select("*", SelectOptions(equals={"id": record_id}, range_to=0, count=False))
        return result.rows[0] if result.rows else None
