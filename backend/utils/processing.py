"""
Filtering and search utilities for classified news items.
"""

import logging
from typing import Iterable, List, Optional

from backend._types import ClassifiedItem

logger = logging.getLogger(__name__)


def normalize_text(text: Optional[str]) -> str:
    """
    Normalizes text for case-insensitive matching.

    Args:
        text: Raw text to normalize

    Returns:
        str: Normalized text (lowercase, stripped whitespace)
    """
    return (text or "").lower().strip()


def matches_query(item: ClassifiedItem, query: str) -> bool:
    """True if the query occurs in headline, teaser or source name."""
    needle = normalize_text(query)
    if not needle:
        return True
    haystack = " ".join(
        (item.item.headline, item.item.teaser, item.item.source_name)
    ).lower()
    return needle in haystack


def filter_items(
    items: Iterable[ClassifiedItem],
    group: Optional[str] = None,
    sub: Optional[str] = None,
    query: Optional[str] = None,
) -> List[ClassifiedItem]:
    """
    Filters classified items by group, sub-category and search text.

    Args:
        items: Classified items
        group: Keep only this display group
        sub: Keep only this sub-category (requires group)
        query: Case-insensitive search text

    Returns:
        List[ClassifiedItem]: Matching items in original order
    """
    items = list(items)
    filtered = items

    if group:
        filtered = [i for i in filtered if i.group == group]
        if sub:
            filtered = [i for i in filtered if i.sub == sub]

    if query and query.strip():
        filtered = [i for i in filtered if matches_query(i, query)]

    if len(filtered) < len(items):
        logger.debug(
            f"Filtered {len(items)} items down to {len(filtered)} "
            f"(group={group}, sub={sub}, query={query})"
        )

    return filtered
