"""
Reflex application entry point for the Document UI.

This module initializes the Reflex app and registers one page per screen.
"""

import reflex as rx

from document_ui import config, pages
from document_ui.lib import logs
from document_ui.state import (
    CatalogState,
    ClientsState,
    CreateDocumentState,
    DashboardState,
    DocumentDetailState,
    HistoryState,
)

LOG = logs.logger(__file__)

LOG.info("Document store: %s", config.SERVICE_KIND)
LOG.info("Tables: %s", config.TABLES)

_FONT_URL = "https://fonts.googleapis.com/css2?family=Inter:wght@300;400;500;600;700&display=swap"


# Create the Reflex app
app = rx.App(
    theme=rx.theme(
        appearance="light",
        has_background=True,
        radius="large",
    ),
    stylesheets=[
        _FONT_URL,
        "/styles.css",
    ],
)

app.add_page(pages.dashboard, route="/", title=config.APP_TITLE, on_load=DashboardState.on_load)
app.add_page(pages.clients, route="/clients", title="Clients", on_load=ClientsState.on_load)
app.add_page(pages.items, route="/items", title="Items", on_load=CatalogState.on_load)
app.add_page(pages.history, route="/history", title="History", on_load=HistoryState.on_load)
app.add_page(pages.create_document, route="/create", title="Create Document", on_load=CreateDocumentState.on_load)
app.add_page(
    pages.document_detail,
    route="/documents/[document_id]",
    title="Document",
    on_load=DocumentDetailState.on_load,
)


def main() -> None:
    """Entrypoint used by `document_ui` console script."""
    import subprocess
    import sys

    subprocess.run([sys.executable, "-m", "reflex", "run", "--port", str(config.APP_PORT)])


if __name__ == "__main__":
    main()
