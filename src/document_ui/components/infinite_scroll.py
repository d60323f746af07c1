"""
Binding for react-infinite-scroll-component.

The list asks for the next page through `next` once the user has scrolled
past `scroll_threshold` of it. PagedListState.load_more ignores calls while
a page is loading, so repeated triggers are harmless.
"""

import reflex as rx


class InfiniteScroll(rx.NoSSRComponent):
    """Infinitely scrolling container for a paged list."""

    library = "react-infinite-scroll-component@6.1.0"
    tag = "InfiniteScroll"
    is_default = True

    # number of rendered rows; the component re-arms `next` when it changes
    data_length: int
    next: rx.EventHandler
    has_more: bool

    loader: rx.Component | None = None
    end_message: rx.Component | None = None
    scroll_threshold: float | None = None
