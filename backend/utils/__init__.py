"""
Daily News Viewer - Utilities Module

Contains shared utilities for civil date resolution and item filtering.
"""

from .dates import (
    civil_date_key,
    resolve_date_key,
    today_key,
    yesterday_key,
    utc_now,
)
from .processing import (
    filter_items,
    matches_query,
    normalize_text,
)

__all__ = [
    "civil_date_key",
    "resolve_date_key",
    "today_key",
    "yesterday_key",
    "utc_now",
    "filter_items",
    "matches_query",
    "normalize_text",
]
