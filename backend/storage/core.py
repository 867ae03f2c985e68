"""
Core interface for shard storage.

Defines:
- StorageBackend: Abstract listing/reading capability over a shard directory
"""

from abc import ABC, abstractmethod
from typing import List


class StorageBackend(ABC):
    """Abstract base class for shard storage backends.

    Implementations raise OSError when the directory or a shard cannot be
    accessed; translating that into domain errors is the resolver's job.
    """

    @abstractmethod
    def list_shards(self) -> List[str]:
        """Return the names of all files in the shard directory."""
        pass

    @abstractmethod
    def read_shard(self, name: str) -> str:
        """Return the raw text content of a shard."""
        pass

    def describe(self) -> str:
        """Short human-readable location, used in logs and health output."""
        return self.__class__.__name__
