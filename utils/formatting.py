"""Display helpers for catalog values (labels, icons, prices, dates)."""
import datetime as dt
from typing import Optional

from domain.constants import (
    CATEGORY_LABELS, CATEGORY_ICONS, DEFAULT_CATEGORY_ICON, DEFAULT_CATEGORY_LABEL, ALL_CATEGORIES,
)


def category_label(category: Optional[str]) -> str:
    if not category or category == ALL_CATEGORIES:
        return DEFAULT_CATEGORY_LABEL
    return CATEGORY_LABELS.get(category, DEFAULT_CATEGORY_LABEL)


def category_icon(category: Optional[str]) -> str:
    return CATEGORY_ICONS.get(category or '', DEFAULT_CATEGORY_ICON)


def format_price(value) -> str:
    try:
        amount = float(value or 0)
    except (TypeError, ValueError):
        amount = 0.0
    if amount == int(amount):
        return f"¥{int(amount)}"
    return f"¥{amount:.2f}"


def format_total(value) -> str:
    """Totals always show cents."""
    return f"¥{float(value or 0):.2f}"


def format_date(value: Optional[str]) -> str:
    """ISO timestamp -> YYYY/M/D (the backend returns timestamptz strings)."""
    if not value:
        return '—'
    try:
        parsed = dt.datetime.fromisoformat(str(value).replace('Z', '+00:00'))
    except ValueError:
        return str(value)[:10]
    return f"{parsed.year}/{parsed.month}/{parsed.day}"
