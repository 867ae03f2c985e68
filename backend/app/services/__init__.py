"""
Services backing the API endpoints.
"""

from .news import GroupedNews, NewsService, create_news_service

__all__ = [
    "GroupedNews",
    "NewsService",
    "create_news_service",
]
