"""
Rule-based category classification.

Maps a free-form category string and source URL onto the fixed taxonomy.
Sources on the .at domain always land in Österreich; everything else is
matched against an ordered rule table where the first matching rule wins.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from backend._types import TaxonomyEntry
from backend.classification.taxonomy import (
    ALLGEMEIN_KEYWORDS,
    AUSTRIA_GROUP,
    AUSTRIA_SUB_FALLBACKS,
    AUSTRIA_SUBCATEGORIES,
    CHRONIK_KEYWORDS,
    DEFAULT_GROUP,
    DEFAULT_SUB,
    GESELLSCHAFT_KEYWORDS,
    HOME_COUNTRY_KEYWORDS,
    POLITIK_KEYWORDS,
    POLITIK_MEDIA_EXCLUDE,
    POLITIK_MEDIA_KEYWORD,
    SPORT_KEYWORDS,
    WETTER_KEYWORDS,
    WIRTSCHAFT_KEYWORDS,
    WISSENSCHAFT_KEYWORDS,
)

logger = logging.getLogger(__name__)


def _contains_any(text: str, keywords: Iterable[str]) -> bool:
    return any(k in text for k in keywords)


def _keywords(*keywords: str) -> Callable[[str], bool]:
    return lambda lower: _contains_any(lower, keywords)


def _is_politik(lower: str) -> bool:
    if _contains_any(lower, POLITIK_KEYWORDS):
        return True
    return POLITIK_MEDIA_KEYWORD in lower and POLITIK_MEDIA_EXCLUDE not in lower


@dataclass(frozen=True)
class CategoryRule:
    """Maps a lowercased raw category to a group when the predicate holds."""

    group: str
    predicate: Callable[[str], bool]
    name: str = ""

    def matches(self, lower: str) -> bool:
        return self.predicate(lower)


# Evaluated top to bottom for non-.at sources
CATEGORY_RULES: List[CategoryRule] = [
    CategoryRule("Wissenschaft", _keywords(*WISSENSCHAFT_KEYWORDS), "wissenschaft"),
    CategoryRule("Politik", _is_politik, "politik"),
    CategoryRule("Wirtschaft", _keywords(*WIRTSCHAFT_KEYWORDS), "wirtschaft"),
    CategoryRule("Gesellschaft", _keywords(*GESELLSCHAFT_KEYWORDS), "gesellschaft"),
    CategoryRule("Sport", _keywords(*SPORT_KEYWORDS), "sport"),
    CategoryRule("Wetter", _keywords(*WETTER_KEYWORDS), "wetter"),
    CategoryRule("Chronik", _keywords(*CHRONIK_KEYWORDS), "chronik"),
    CategoryRule(DEFAULT_GROUP, _keywords(*ALLGEMEIN_KEYWORDS), "allgemein"),
    CategoryRule(DEFAULT_GROUP, _keywords(*HOME_COUNTRY_KEYWORDS), "home-country"),
]


def is_at_domain(source_url: Optional[str]) -> bool:
    """True when the URL points into the .at top-level domain."""
    if not source_url:
        return False
    return ".at/" in source_url or source_url.endswith(".at")


def resolve_austria_sub(lower: str) -> str:
    """Pick the Österreich sub-category for a lowercased raw category."""
    for sub in AUSTRIA_SUBCATEGORIES:
        if sub.lower() in lower:
            return sub
    for keywords, sub in AUSTRIA_SUB_FALLBACKS:
        if _contains_any(lower, keywords):
            return sub
    return DEFAULT_SUB


def match_rule(lower: str, rules: Optional[List[CategoryRule]] = None) -> Optional[CategoryRule]:
    """Return the first rule matching the lowercased category, if any."""
    for rule in rules if rules is not None else CATEGORY_RULES:
        if rule.matches(lower):
            return rule
    return None


def classify(
    raw_category: Optional[str],
    source_url: Optional[str] = None,
    catch_all_group: Optional[str] = None,
) -> TaxonomyEntry:
    """
    Classify a raw category into a taxonomy entry.

    Args:
        raw_category: Category string as delivered by the scraper (may be None)
        source_url: Link to the article; .at sources are always Österreich
        catch_all_group: If given, used instead of the raw category when no rule matches

    Returns:
        TaxonomyEntry with group, sub (Österreich only) and the original string
    """
    original = raw_category or ""
    lower = original.lower()

    if is_at_domain(source_url):
        return TaxonomyEntry(AUSTRIA_GROUP, resolve_austria_sub(lower), original)

    if not original:
        return TaxonomyEntry(DEFAULT_GROUP, None, "")

    rule = match_rule(lower)
    if rule is not None:
        return TaxonomyEntry(rule.group, None, original)

    logger.debug(f"No rule matched category '{original}', using it as group")
    return TaxonomyEntry(catch_all_group or original, None, original)
