"""
Common models shared by the collection, ledger and screen states.

This module defines the small value objects that flow between the core
and the UI layer:

- Notice: one user-visible message in the single-slot notice channel
- NoticeSlot: the channel itself (latest notice wins, not a queue)
- SearchQuery: free-text term plus the fields it is matched against
- CollectionPage: one fetched window of a remote collection
"""

from dataclasses import dataclass, field
from typing import Any, Generic, Sequence, TypeVar

T = TypeVar("T")

NOTICE_INFO = "info"
NOTICE_SUCCESS = "success"
NOTICE_ERROR = "error"


@dataclass(frozen=True, slots=True)
class Notice:
    """
    A single notification for the user.

    Attributes:
        title: Short headline.
        description: Detail text, usually the backend message on failures.
        level: One of "info", "success" or "error".
    """

    title: str
    description: str = ""
    level: str = NOTICE_INFO

    @classmethod
    def error(cls, title: str, description: str = "") -> "Notice":
        return cls(title=title, description=description, level=NOTICE_ERROR)

    @classmethod
    def success(cls, title: str, description: str = "") -> "Notice":
        return cls(title=title, description=description, level=NOTICE_SUCCESS)

    @property
    def is_error(self) -> bool:
        return self.level == NOTICE_ERROR


class NoticeSlot:
    """
    Single-slot notification channel.

    Posting replaces whatever was there; the UI takes the notice once and
    renders it. One notice per operation, never a backlog.
    """

    def __init__(self) -> None:
        self._notice: Notice | None = None

    @property
    def current(self) -> Notice | None:
        return self._notice

    def post(self, notice: Notice) -> None:
        self._notice = notice

    def take(self) -> Notice | None:
        """Return the current notice and clear the slot."""
        notice, self._notice = self._notice, None
        return notice


@dataclass(frozen=True, slots=True)
class SearchQuery:
    """
    Free-text search against a fixed set of record fields.

    The term is matched case-insensitively as a substring, OR-ed across
    fields. An empty term matches everything.
    """

    term: str = ""
    fields: Sequence[str] = ()

    @property
    def normalized(self) -> str:
        """The term with surrounding and repeated whitespace collapsed."""
        return " ".join(self.term.split())

    @property
    def is_empty(self) -> bool:
        return not self.normalized or not self.fields

    def matches(self, record: dict[str, Any]) -> bool:
        """Return True if the record matches; used by in-memory stores."""
        if self.is_empty:
            return True
        needle = self.normalized.lower()
        return any(needle in str(record.get(name) or "").lower() for name in self.fields)


@dataclass(slots=True)
class CollectionPage(Generic[T]):
    """
    Represents a single fetched window of a remote collection.

    Attributes:
        page: Zero-based page index.
        page_size: Number of records requested per page.
        items: Decoded records returned for this page.
        total_count: Total matching records, if the backend reported one.
    """

    page: int
    page_size: int
    items: list[T] = field(default_factory=list)
    total_count: int | None = None

    @property
    def offset(self) -> int:
        return self.page * self.page_size

    @property
    def range_to(self) -> int:
        """Inclusive upper bound of the requested range."""
        return self.offset + self.page_size - 1
