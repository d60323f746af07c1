"""Utility functions shared across the document UI package."""

from document_ui.utils.formatting import format_currency, format_date, parse_date, today_iso

__all__ = [
    "format_currency",
    "format_date",
    "parse_date",
    "today_iso",
]
