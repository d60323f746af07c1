"""
Paged list display shared by every searchable screen.

Handles the result summary, the infinite-scroll body, and the loading and
empty states for any PagedListState.
"""

from typing import Callable

import reflex as rx

from document_ui import config
from document_ui.components.infinite_scroll import InfiniteScroll


def paged_list(
    state: type,
    items: rx.Var,
    render: Callable[[rx.Var], rx.Component],
    noun: str,
    header: rx.Component | None = None,
) -> rx.Component:
    """
    Build a paged, infinitely scrolling list.

    Args:
        state: PagedListState subclass that owns the list.
        items: The list var to render.
        render: Builds one row from an item var.
        noun: Plural noun used in the empty and end messages.
        header: Optional header row rendered above the items.

    Returns:
        The list container component.
    """
    return rx.box(
        rx.cond(
            state.is_empty,
            _empty(state, noun),
            _results(state, items, render, noun, header),
        ),
        class_name="results",
    )


def _results(state, items, render, noun, header) -> rx.Component:
    return rx.box(
        rx.box(
            rx.text(state.result_summary, class_name="muted"),
            class_name="results-summary",
        ),
        header if header is not None else rx.fragment(),
        InfiniteScroll.create(
            rx.foreach(items, render),
            data_length=items.length(),
            next=state.load_more,
            has_more=state.has_more,
            loader=_loader(noun),
            end_message=_end_message(noun),
            scroll_threshold=config.SCROLL_THRESHOLD,
        ),
    )


def _empty(state, noun: str) -> rx.Component:
    return rx.box(
        rx.icon("file-x", class_name="empty-icon", size=48),
        rx.heading(f"No {noun} found", size="3", as_="h3"),
        rx.cond(
            state.query != "",
            rx.text(
                rx.text.span('No results match "'),
                rx.text.span(state.query),
                rx.text.span('". Try a different search term.'),
                class_name="muted",
            ),
            rx.text(f"No {noun} yet.", class_name="muted"),
        ),
        class_name="card empty-state",
    )


def _loader(noun: str) -> rx.Component:
    return rx.box(
        rx.box(class_name="spinner"),
        rx.text(f"Loading {noun}...", class_name="muted"),
        class_name="loading-state",
    )


def _end_message(noun: str) -> rx.Component:
    return rx.box(
        rx.text(f"All {noun} loaded", class_name="load-more-hint end"),
        class_name="load-more-container",
    )
