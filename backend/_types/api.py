"""
API response models for FastAPI endpoints.

Pydantic models for HTTP response serialization.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Body of every non-2xx response."""

    message: str


class GroupData(BaseModel):
    """One display group in the grouped news response."""

    name: str
    subs: List[str]
    items: List[Dict[str, Any]]  # NewsItem fields plus group, sub, original


class GroupedNewsResponse(BaseModel):
    """Response for grouped news request."""

    date: str
    count: int
    groups: List[GroupData]


class CategoriesResponse(BaseModel):
    """Response listing the fixed taxonomy."""

    groups: List[str]
    austria_subcategories: List[str]


class HealthCheckResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: str
    data_dir: Optional[str] = None
