"""
News service: resolution, classification and grouping for one request.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from backend._types import NewsGroup, NewsItem
from backend.classification import classify_items, group_items
from backend.settings import settings
from backend.storage import NewsResolver, create_storage_backend
from backend.utils.processing import filter_items

logger = logging.getLogger(__name__)


@dataclass
class GroupedNews:
    """Grouped, prioritized news for one date."""

    date: str
    count: int
    groups: List[NewsGroup]

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "count": self.count,
            "groups": [g.to_dict() for g in self.groups],
        }


class NewsService:
    """
    Combines the shard resolver with classification and grouping.

    Stateless between calls; safe to share across requests.
    """

    def __init__(self, resolver: NewsResolver, catch_all_group: Optional[str] = None):
        self.resolver = resolver
        self.catch_all_group = catch_all_group

    def raw_items(self, requested_date: Optional[str] = None) -> List[NewsItem]:
        """Raw items in merge order, ignored records included."""
        return self.resolver.resolve(requested_date)

    def grouped(
        self,
        requested_date: Optional[str] = None,
        group: Optional[str] = None,
        sub: Optional[str] = None,
        query: Optional[str] = None,
    ) -> GroupedNews:
        """
        Resolve, classify, filter and group the news for a date.

        Args:
            requested_date: None/"today", "yesterday" or YYYY-MM-DD
            group: Only keep this display group
            sub: Only keep this Österreich sub-category
            query: Case-insensitive search over headline, teaser and source

        Returns:
            GroupedNews with groups in display order
        """
        date_key = self.resolver.date_key(requested_date)
        raw = self.resolver.resolve(date_key)

        classified = classify_items(raw, self.catch_all_group)
        skipped = len(raw) - len(classified)
        if skipped:
            logger.info(f"Skipped {skipped} ignored items for {date_key}")

        selected = filter_items(classified, group=group, sub=sub, query=query)
        return GroupedNews(
            date=date_key,
            count=len(selected),
            groups=group_items(selected),
        )


def create_news_service() -> NewsService:
    """Build a NewsService from global settings."""
    storage = create_storage_backend(
        settings.data.backend,
        data_dir=settings.data.data_dir,
    )
    resolver = NewsResolver(
        storage,
        timezone=settings.data.timezone,
        permanent_prefix=settings.data.permanent_prefix,
        extension=settings.data.extension,
        max_workers=settings.data.max_workers,
    )
    return NewsService(resolver, catch_all_group=settings.data.catch_all_group)
