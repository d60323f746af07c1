"""
Page shell for the Document UI.

Every page is rendered inside the same sidebar layout; the sidebar links
mirror the routes registered in app.py.
"""

import reflex as rx

from document_ui import config

NAV_ITEMS = [
    ("Dashboard", "/", "layout-dashboard"),
    ("Create Document", "/create", "file-plus"),
    ("History", "/history", "history"),
    ("Clients", "/clients", "users"),
    ("Items", "/items", "package"),
]


def _nav_link(label: str, href: str, icon: str) -> rx.Component:
    return rx.link(
        rx.hstack(rx.icon(icon, size=18), rx.text(label), spacing="2", align="center"),
        href=href,
        class_name="nav-link",
        underline="none",
    )


def sidebar() -> rx.Component:
    return rx.box(
        rx.box(
            rx.heading(config.APP_TITLE, size="4"),
            rx.text(config.APP_SUBTITLE, class_name="muted", size="1"),
            class_name="sidebar-brand",
        ),
        rx.vstack(*[_nav_link(*item) for item in NAV_ITEMS], spacing="1"),
        class_name="sidebar",
    )


def shell(*children: rx.Component) -> rx.Component:
    """Wrap page content in the sidebar layout."""
    return rx.box(
        sidebar(),
        rx.box(*children, class_name="app-container"),
        class_name="app-shell",
    )
