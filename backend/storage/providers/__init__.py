"""
Storage backend implementations.
"""

from .local import LocalStorageBackend
from .memory import InMemoryStorageBackend

__all__ = [
    "LocalStorageBackend",
    "InMemoryStorageBackend",
]
