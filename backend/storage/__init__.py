"""
Shard storage and resolution for the Daily News Viewer.

Provides:
- NewsResolver: Date -> merged list of news items
- StorageBackend: Abstract interface for shard directories
- Storage backends: LocalStorageBackend, InMemoryStorageBackend
- select_shards / order_shards / parse_shard: Merge pipeline steps
"""

from backend.storage.core import StorageBackend
from backend.storage.factory import create_storage_backend
from backend.storage.providers import (
    InMemoryStorageBackend,
    LocalStorageBackend,
)
from backend.storage.resolver import (
    NewsResolver,
    order_shards,
    parse_shard,
    select_shards,
)

__all__ = [
    "NewsResolver",
    "StorageBackend",
    "create_storage_backend",
    "LocalStorageBackend",
    "InMemoryStorageBackend",
    "order_shards",
    "parse_shard",
    "select_shards",
]
