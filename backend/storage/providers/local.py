"""
Local file system storage
"""

import logging
from pathlib import Path
from typing import List

from backend.storage.core import StorageBackend

logger = logging.getLogger(__name__)


class LocalStorageBackend(StorageBackend):
    """
    Local file system storage

    Reads shards from {data_dir}/*. The directory is never written.
    """

    def __init__(self, data_dir: str = "./data"):
        self.data_dir = Path(data_dir)

    def list_shards(self) -> List[str]:
        """List file names in the data directory."""
        try:
            return [p.name for p in self.data_dir.iterdir() if p.is_file()]
        except OSError as e:
            logger.error(f"Failed to list data directory {self.data_dir}: {e}")
            raise

    def read_shard(self, name: str) -> str:
        """Read a shard as UTF-8 text."""
        shard_path = self.data_dir / name
        with open(shard_path, "r", encoding="utf-8") as f:
            return f.read()

    def write_shard(self, name: str, content: str) -> None:
        """Overwrite a shard. Used by maintenance jobs only."""
        shard_path = self.data_dir / name
        with open(shard_path, "w", encoding="utf-8") as f:
            f.write(content)
        logger.info(f"Wrote shard: {shard_path}")

    def describe(self) -> str:
        return str(self.data_dir)
