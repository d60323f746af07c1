"""
Shared Reflex state plumbing for paged, searchable lists.

PagedListState is a mixin: every screen that shows a list (clients,
catalog, history, the pickers on the document editor) gets its own copy of
the paging vars and handlers, and supplies the PagedCollection it drives.
The collection objects live in backend-only vars, so the app runs with the
in-memory state manager (see rxconfig.py).
"""

from typing import Any

import reflex as rx

from document_ui.lib import logs
from document_ui.models.common import NOTICE_SUCCESS, Notice
from document_ui.services.paged_collection import PagedCollection

LOG = logs.logger(__file__)


def notice_event(notice: Notice | None) -> Any:
    """Turn a notice into a toast event, or None when there is nothing to show."""
    if notice is None:
        return None
    if notice.is_error:
        return rx.toast.error(notice.title, description=notice.description)
    if notice.level == NOTICE_SUCCESS:
        return rx.toast.success(notice.title, description=notice.description)
    return rx.toast.info(notice.title, description=notice.description)


class PagedListState(rx.State, mixin=True):
    """
    Paging, search and teardown handlers for one PagedCollection.

    Subclasses implement _collection() and _sync_items().
    """

    query: str = ""
    total: int = 0
    has_more: bool = True
    is_loading: bool = False

    @rx.var
    def result_summary(self) -> str:
        """Generate summary text for the current list."""
        noun = "result" if self.total == 1 else "results"
        base = f"{self.total} {noun} found"
        if self.query and self.query.strip():
            return f'{base} for "{self.query.strip()}"'
        return base

    @rx.var
    def is_empty(self) -> bool:
        return self.total == 0 and not self.is_loading

    def _collection(self) -> PagedCollection:
        raise NotImplementedError

    def _sync_items(self) -> None:
        raise NotImplementedError

    def _filters(self) -> dict[str, str] | None:
        """Equality filters for reset; None keeps the collection's current ones."""
        return None

    def _sync(self) -> None:
        """Copy the collection's current view into the frontend vars."""
        collection = self._collection()
        self._sync_items()
        self.total = collection.total_count if collection.total_count is not None else len(collection.items)
        self.has_more = collection.has_more
        self.is_loading = collection.is_loading

    def _take_notice(self) -> Any:
        return notice_event(self._collection().notices.take())

    @rx.event
    async def on_load(self):
        """Load the first page for the current query."""
        self.is_loading = True
        yield
        await self._collection().reset(self.query, self._filters())
        self._sync()
        yield self._take_notice()

    @rx.event
    async def load_more(self):
        """
        Event handler for infinite scroll pagination.

        A no-op while a page is loading or when everything is loaded.
        """
        collection = self._collection()
        LOG.info("Load more - has_more: %s length:%s", collection.has_more, len(collection.items))
        if not await collection.load_next_page():
            return
        self._sync()
        yield self._take_notice()

    @rx.event(background=True)
    async def search(self, query: str):
        """
        Debounced search-as-you-type.

        Only the last keystroke in a burst resets the list; earlier calls
        return without touching state.
        """
        async with self:
            self.query = query
            collection = self._collection()
        if not await collection.search(query.strip()):
            return
        async with self:
            self._sync()
            toast = self._take_notice()
        if toast is not None:
            yield toast

    @rx.event
    def teardown(self):
        """Cancel pending searches when the page unmounts."""
        self._collection().close()
