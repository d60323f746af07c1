"""Search input bound to a PagedListState."""

import reflex as rx


def search_panel(state: type, placeholder: str) -> rx.Component:
    """
    Build a search box for a paged list.

    Keystrokes go straight to the state's background search handler, which
    debounces on the server; the pending search is cancelled on unmount.
    """
    return rx.box(
        rx.box(
            rx.icon("search", class_name="input-icon"),
            rx.input(
                placeholder=placeholder,
                value=state.query,
                on_change=state.search,
                class_name="search-input",
            ),
            class_name="input-with-icon",
        ),
        class_name="card search-card",
        on_unmount=state.teardown,
    )
