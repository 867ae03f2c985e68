"""
Classification of whole items, football detection and group ordering.
"""

from typing import Dict, Iterable, List, Optional

from backend._types import ClassifiedItem, NewsGroup, NewsItem
from backend.classification.rules import classify
from backend.classification.taxonomy import (
    AUSTRIA_GROUP,
    AUSTRIA_SUBCATEGORIES,
    DEFAULT_GROUP,
    FOOTBALL_EMOJI,
    FOOTBALL_KEYWORDS,
    GROUP_PRIORITY,
)


def is_football(item: NewsItem) -> bool:
    """
    Detect football content.

    The football emoji decides on its own; otherwise headline and teaser
    are scanned for club, competition and generic football keywords.
    """
    if item.emoji and FOOTBALL_EMOJI in item.emoji:
        return True
    text = f"{item.headline} {item.teaser}".lower()
    return any(k in text for k in FOOTBALL_KEYWORDS)


def classify_item(item: NewsItem, catch_all_group: Optional[str] = None) -> ClassifiedItem:
    """Attach taxonomy entry and football flag to a news item."""
    taxonomy = classify(item.category or DEFAULT_GROUP, item.source_url, catch_all_group)
    return ClassifiedItem(item=item, taxonomy=taxonomy, is_football=is_football(item))


def classify_items(
    items: Iterable[NewsItem],
    catch_all_group: Optional[str] = None,
) -> List[ClassifiedItem]:
    """Classify items in order, skipping those flagged with ignore."""
    return [classify_item(i, catch_all_group) for i in items if not i.is_ignored]


def prioritize(items: List[ClassifiedItem]) -> List[ClassifiedItem]:
    """
    Move football items ahead of other sport items.

    Each maximal run of adjacent sport items is stably sorted football-first
    on its own. Non-sport items keep their exact positions and nothing moves
    across them.
    """
    out: List[ClassifiedItem] = []
    run: List[ClassifiedItem] = []
    for it in items:
        if it.is_sport:
            run.append(it)
            continue
        out.extend(sorted(run, key=lambda r: not r.is_football))
        run = []
        out.append(it)
    out.extend(sorted(run, key=lambda r: not r.is_football))
    return out


def sort_group_names(names: Iterable[str]) -> List[str]:
    """Order groups by fixed display priority, then alphabetically."""
    present = set(names)
    fixed = [g for g in GROUP_PRIORITY if g in present]
    others = sorted(g for g in present if g not in GROUP_PRIORITY)
    return fixed + others


def sort_subs(subs: Iterable[str]) -> List[str]:
    """Order Österreich subs by list position; unknown subs follow alphabetically."""
    subs = set(subs)
    known = [s for s in AUSTRIA_SUBCATEGORIES if s in subs]
    unknown = sorted(s for s in subs if s not in AUSTRIA_SUBCATEGORIES)
    return known + unknown


def group_items(items: Iterable[ClassifiedItem]) -> List[NewsGroup]:
    """
    Group classified items by display group.

    Args:
        items: Classified items in merge order

    Returns:
        List[NewsGroup]: Groups in display order, each with prioritized items
    """
    buckets: Dict[str, List[ClassifiedItem]] = {}
    for it in items:
        buckets.setdefault(it.group or DEFAULT_GROUP, []).append(it)

    groups = []
    for name in sort_group_names(buckets):
        members = buckets[name]
        subs = sort_subs(it.sub for it in members if it.sub) if name == AUSTRIA_GROUP else []
        groups.append(NewsGroup(name=name, subs=subs, items=prioritize(members)))
    return groups
