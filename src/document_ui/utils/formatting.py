"""Helper functions for money and date formatting."""

from datetime import date, datetime

from document_ui import config


def format_currency(value: float, currency: str = config.CURRENCY) -> str:
    """
    Format an amount for display.

    Rupiah amounts are shown the Indonesian way, without decimals and with
    dots as thousands separators (e.g. "Rp 7.381.500"). Other currencies get
    the code prefix and two decimals (e.g. "USD 1,234.56").
    """
    if currency.upper() == "IDR":
        grouped = f"{round(value or 0):,}"
        if config.USE_GROUPING_DOTS:
            grouped = grouped.replace(",", ".")
        return f"Rp {grouped}"
    return f"{currency} {value or 0:,.2f}"


def parse_date(date_str: str | None) -> date | None:
    """
    Parse an ISO date or timestamp string.

    Returns:
        date object if parsing succeeds, None otherwise
    """
    if date_str:
        date_str = date_str.strip()
    if not date_str:
        return None
    try:
        return datetime.fromisoformat(date_str).date()
    except ValueError:
        pass
    try:
        return datetime.strptime(date_str, "%m/%d/%Y").date()
    except ValueError:
        return None


def format_date(date_str: str | None) -> str:
    """Return a date string formatted for display, or N/A."""
    parsed = parse_date(date_str)
    return parsed.strftime("%b %d, %Y") if parsed else "N/A"


def today_iso() -> str:
    return date.today().isoformat()
