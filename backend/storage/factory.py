"""
Factory for creating storage backends based on configuration.
"""

import logging

from backend.storage.core import StorageBackend
from backend.storage.providers import (
    InMemoryStorageBackend,
    LocalStorageBackend,
)

logger = logging.getLogger(__name__)


def create_storage_backend(
    backend_type: str,
    data_dir: str = "./data",
) -> StorageBackend:
    """
    Factory function to create appropriate storage

    Args:
        backend_type: Type of backend ('local', 'memory')
        data_dir: Shard directory path (local backend)

    Returns:
        StorageBackend instance
    """
    backend_type = backend_type.lower()

    if backend_type == "local":
        logger.info(f"Using LocalStorageBackend: {data_dir}")
        return LocalStorageBackend(data_dir=data_dir)

    elif backend_type == "memory":
        logger.info("Using InMemoryStorageBackend")
        return InMemoryStorageBackend()

    else:
        logger.warning(
            f"Unknown storage backend: {backend_type}, defaulting to local"
        )
        return LocalStorageBackend(data_dir=data_dir)
