"""
Paginated, searchable view over one remote collection.

A PagedCollection accumulates decoded records page by page for the current
search term and filters. It is the shared engine behind the client list,
the catalog list and picker, and the document history.

Rules it keeps:
- At most one page fetch is outstanding; load_next_page() is a no-op while
  a fetch is in flight or when no more pages remain.
- reset() starts a new search session (new generation) and fetches page 0
  immediately, even if an older fetch is still running. Responses tagged
  with a superseded generation are discarded rather than merged.
- search() debounces keystrokes and only the last term in a burst resets.
- reset() keeps the previous items on screen until page 0 of the new
  session arrives, then swaps them out in one step.
- Fetch failures leave the accumulated items untouched and post exactly
  one notice; nothing is raised to the caller.
"""

from typing import Any, Callable, Generic, Mapping, Sequence, TypeVar

from document_ui import config
from document_ui.lib import logs
from document_ui.lib.debounce import Debouncer
from document_ui.models.common import CollectionPage, Notice, NoticeSlot, SearchQuery
from document_ui.models.errors import DocumentUIError
from document_ui.services.remote_collection import Record, RemoteCollection, SelectOptions

LOG = logs.logger(__file__)

T = TypeVar("T")

# Filter values that mean "no filter" when they come from a select box.
_UNFILTERED = (None, "", "all")


def _key(item: Any) -> str:
    return str(item.id)


class PagedCollection(Generic[T]):
    """
    Accumulating, paged list of records from a RemoteCollection.

    Attributes:
        source: The remote collection to read from.
        search_fields: Record fields the search term is matched against.
        page_size: Fixed number of records requested per page.
        notices: Single-slot channel that receives failure notices.
    """

    def __init__(
        self,
        source: RemoteCollection,
        decode: Callable[[Record], T],
        search_fields: Sequence[str],
        page_size: int = config.PAGE_SIZE,
        debounce: float = config.SEARCH_DEBOUNCE,
        fields: Sequence[str] | str = "*",
        order_by: str = "created_at",
        notices: NoticeSlot | None = None,
        key: Callable[[T], str] = _key,
    ) -> None:
        self.source = source
        self.search_fields = tuple(search_fields)
        self.page_size = max(page_size, 1)
        self.fields = fields
        self.order_by = order_by
        self.notices = notices or NoticeSlot()
        self._decode = decode
        self._key = key
        self._debouncer = Debouncer(self.reset, debounce)

        self._items: list[T] = []
        self._page = 0
        self._shift = 0
        self._total: int | None = None
        self._last_page_size: int | None = None
        self._term = ""
        self._filters: dict[str, Any] = {}
        self._generation = 0
        self._in_flight: int | None = None
        # Set by reset() until page 0 of the new session replaces the items.
        self._replace = False

    @property
    def items(self) -> list[T]:
        return list(self._items)

    @property
    def term(self) -> str:
        return self._term

    @property
    def filters(self) -> dict[str, Any]:
        return dict(self._filters)

    @property
    def page(self) -> int:
        """Index of the next page to fetch."""
        return self._page

    @property
    def total_count(self) -> int | None:
        return self._total

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def is_loading(self) -> bool:
        return self._in_flight is not None

    @property
    def has_more(self) -> bool:
        """
        Whether another page can be requested for the current search.

        Uses the backend's total count when known, otherwise assumes more
        pages exist while pages keep coming back full.
        """
        if self._replace or self._last_page_size is None:
            return True
        if self._last_page_size == 0:
            return False
        if self._total is not None:
            return len(self._items) < self._total
        return self._last_page_size == self.page_size

    async def reset(self, term: str | None = None, filters: Mapping[str, Any] | None = None) -> bool:
        """
        Start a new session and fetch page 0 for the given term and filters.

        The accumulated items stay in place until page 0 arrives. When the
        fetch fails they are kept, and the next load_next_page() retries
        page 0.

        Args:
            term: New search term, or None to keep the current one.
            filters: New equality filters, or None to keep the current ones.

        Returns:
            True if page 0 of this session replaced the items.
        """
        if term is not None:
            self._term = term
        if filters is not None:
            self._filters = {name: value for name, value in filters.items() if value not in _UNFILTERED}
        self._generation += 1
        self._page = 0
        self._shift = 0
        self._replace = True
        LOG.info(
            "Reset %s - term:%r filters:%s generation:%s",
            self.source.name,
            self._term,
            self._filters,
            self._generation,
        )
        return await self._fetch(self._generation)

    async def load_next_page(self) -> bool:
        """
        Fetch and append the next page.

        Returns:
            True if a fetch was issued, False if the call was a no-op.
        """
        if self.is_loading or not self.has_more:
            LOG.debug(
                "Skip load %s - loading:%s has_more:%s",
                self.source.name,
                self.is_loading,
                self.has_more,
            )
            return False
        await self._fetch(self._generation)
        return True

    async def search(self, term: str) -> bool:
        """
        Debounced reset for search-as-you-type.

        Returns:
            True if this term triggered the reset, False if a later
            keystroke (or close()) superseded it.
        """
        return await self._debouncer(term)

    def close(self) -> None:
        """Cancel any pending debounced search; call on teardown."""
        self._debouncer.cancel()

    def find(self, key: str) -> T | None:
        return next((item for item in self._items if self._key(item) == str(key)), None)

    def prepend(self, item: T) -> None:
        """Insert a newly created record at the top of the list."""
        self._items.insert(0, item)
        self._shift += 1
        if self._total is not None:
            self._total += 1

    def replace(self, item: T) -> bool:
        """Patch the one item with the same key in place."""
        key = self._key(item)
        for index, existing in enumerate(self._items):
            if self._key(existing) == key:
                self._items[index] = item
                return True
        return False

    def position(self, key: str) -> int | None:
        return next((index for index, item in enumerate(self._items) if self._key(item) == str(key)), None)

    def restore(self, item: T, index: int | None = None) -> None:
        """Put a discarded item back where it was."""
        self._items.insert(len(self._items) if index is None else index, item)
        self._shift += 1
        if self._total is not None:
            self._total += 1

    def discard(self, key: str) -> T | None:
        """Remove an item from the accumulated list and return it."""
        item = self.find(key)
        if item is None:
            return None
        self._items.remove(item)
        self._shift -= 1
        if self._total is not None:
            self._total = max(self._total - 1, 0)
        return item

    def _options(self, page: CollectionPage) -> SelectOptions:
        offset = max(page.offset + self._shift, 0)
        # local prepends and discards move the window, not its size
        return SelectOptions(
            search=SearchQuery(self._term, self.search_fields),
            equals=dict(self._filters),
            order_by=self.order_by,
            descending=True,
            range_from=offset,
            range_to=page.range_to + offset - page.offset,
            count=True,
        )

    async def _fetch(self, generation: int) -> bool:
        page: CollectionPage[T] = CollectionPage(page=self._page, page_size=self.page_size)
        self._in_flight = generation
        try:
            result = await self.source.select(self.fields, self._options(page))
            page.items = [self._decode(row) for row in result.rows]
            page.total_count = result.total_count
        except Exception as exc:
            if generation != self._generation:
                LOG.info("Ignoring failure of superseded %s fetch: %s", self.source.name, exc)
                return False
            LOG.error("Failed to load %s page %s", self.source.name, page.page, exc_info=True)
            description = exc.description if isinstance(exc, DocumentUIError) else str(exc)
            self.notices.post(Notice.error("Failed to load data", description))
            return False
        finally:
            if self._in_flight == generation:
                self._in_flight = None

        if generation != self._generation:
            LOG.info(
                "Discarding stale %s page %s (generation %s, current %s)",
                self.source.name,
                page.page,
                generation,
                self._generation,
            )
            return False

        if self._replace:
            self._items = list(page.items)
            self._shift = 0
            self._replace = False
        else:
            self._items = self._items + page.items
        self._page += 1
        self._total = page.total_count
        self._last_page_size = len(page.items)
        LOG.info(
            "Loaded %s page %s - items:%s total:%s has_more:%s",
            self.source.name,
            page.page,
            len(self._items),
            self._total,
            self.has_more,
        )
        return True
