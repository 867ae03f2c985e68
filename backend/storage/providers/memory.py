"""
In-memory storage backend for testing/development.
"""

from typing import Dict, List, Optional

from backend.storage.core import StorageBackend


class InMemoryStorageBackend(StorageBackend):
    """
    In-memory shard storage for testing/development.

    Shards are held in a name -> text mapping. Setting `unavailable`
    simulates a directory that cannot be listed.
    """

    def __init__(self, shards: Optional[Dict[str, str]] = None, unavailable: bool = False):
        self.shards: Dict[str, str] = dict(shards or {})
        self.unavailable = unavailable

    def list_shards(self) -> List[str]:
        """List shard names."""
        if self.unavailable:
            raise OSError("In-memory shard directory marked unavailable")
        return list(self.shards)

    def read_shard(self, name: str) -> str:
        """Return shard text."""
        try:
            return self.shards[name]
        except KeyError:
            raise FileNotFoundError(name) from None

    def describe(self) -> str:
        return f"memory ({len(self.shards)} shards)"
