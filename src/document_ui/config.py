"""
Environment configuration for the Document UI.

Values are read once at import time. A local .env file is loaded first so
developers can keep Supabase credentials out of their shell profile.
"""

import os

from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


def _number(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, "") or default)
    except ValueError:
        return default


APP_PORT = int(os.getenv("APP_PORT", "8000"))
APP_TITLE = os.getenv("DOCUMENT_UI_TITLE", "Business Documents")
APP_SUBTITLE = "Manage clients, catalog items and commercial documents."

# "demo" keeps everything in memory, "supabase" talks to a real project
SERVICE_KIND = os.getenv("DOCUMENT_UI_SERVICE", "demo").lower()
DEMO_LATENCY = _number("DOCUMENT_UI_DEMO_LATENCY", 0.2)

PAGE_SIZE = max(int(_number("DOCUMENT_UI_PAGE_SIZE", 10)), 1)
SEARCH_DEBOUNCE = _number("DOCUMENT_UI_SEARCH_DEBOUNCE_MS", 400) / 1000
# fraction of the list height scrolled before the next page is requested
SCROLL_THRESHOLD = min(max(_number("DOCUMENT_UI_SCROLL_THRESHOLD", 0.8), 0.1), 1.0)
DEFAULT_TAX_PCT = _number("DOCUMENT_UI_DEFAULT_TAX", 11)
CURRENCY = os.getenv("DOCUMENT_UI_CURRENCY", "IDR")
USE_GROUPING_DOTS = _flag("DOCUMENT_UI_GROUPING_DOTS", "true")

TABLES = {
    name: os.getenv(f"DOCUMENT_UI_TABLE_{name.upper()}", default)
    for name, default in {
        "clients": "clients",
        "catalog": "order_item",
        "documents": "documents",
        "document_items": "document_items",
    }.items()
}
