"""
Daily News Viewer - Common Type Definitions

Centralized type definitions used throughout the backend.
"""

from .news import (
    NewsItem,
    TaxonomyEntry,
    ClassifiedItem,
    NewsGroup,
)
from .api import (
    ErrorResponse,
    GroupData,
    GroupedNewsResponse,
    CategoriesResponse,
    HealthCheckResponse,
)

__all__ = [
    # News types
    "NewsItem",
    "TaxonomyEntry",
    "ClassifiedItem",
    "NewsGroup",
    # API types
    "ErrorResponse",
    "GroupData",
    "GroupedNewsResponse",
    "CategoriesResponse",
    "HealthCheckResponse",
]
