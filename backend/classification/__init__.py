"""
Category classification for news items.

Provides:
- classify: Map a raw category and source URL onto the fixed taxonomy
- classify_item / classify_items: Classify whole NewsItem records
- is_football / prioritize: Football-first ordering inside sport runs
- group_items: Group classified items in display order
"""

from backend.classification.prioritization import (
    classify_item,
    classify_items,
    group_items,
    is_football,
    prioritize,
    sort_group_names,
    sort_subs,
)
from backend.classification.rules import (
    CATEGORY_RULES,
    CategoryRule,
    classify,
    is_at_domain,
    resolve_austria_sub,
)
from backend.classification.taxonomy import (
    AUSTRIA_GROUP,
    AUSTRIA_SUBCATEGORIES,
    GROUP_PRIORITY,
)

__all__ = [
    "classify",
    "classify_item",
    "classify_items",
    "is_football",
    "prioritize",
    "group_items",
    "sort_group_names",
    "sort_subs",
    "is_at_domain",
    "resolve_austria_sub",
    "CATEGORY_RULES",
    "CategoryRule",
    "AUSTRIA_GROUP",
    "AUSTRIA_SUBCATEGORIES",
    "GROUP_PRIORITY",
]
