"""
Daily shard resolution and merge.

Turns a requested date into the ordered concatenation of every shard that
contributes to it: permanent shards first, then the primary <date>.json,
then the remaining shards for that date.
"""

import concurrent.futures as _fut
import json
import logging
from datetime import datetime
from typing import Any, Callable, Iterable, List, Optional

from pydantic import ValidationError

from backend._types import NewsItem
from backend.exceptions import (
    DirectoryUnavailableError,
    MalformedShardError,
    NewsNotFoundError,
)
from backend.storage.core import StorageBackend
from backend.utils.dates import resolve_date_key, utc_now

logger = logging.getLogger(__name__)

BOM = "\ufeff"
DEFAULT_PERMANENT_PREFIX = "permanent"
DEFAULT_EXTENSION = ".json"


def select_shards(
    names: Iterable[str],
    date_key: str,
    permanent_prefix: str = DEFAULT_PERMANENT_PREFIX,
    extension: str = DEFAULT_EXTENSION,
) -> List[str]:
    """Keep data files named after the date or carrying the permanent prefix."""
    return [
        n for n in names
        if n.lower().endswith(extension)
        and (n.startswith(date_key) or n.startswith(permanent_prefix))
    ]


def order_shards(
    names: Iterable[str],
    date_key: str,
    permanent_prefix: str = DEFAULT_PERMANENT_PREFIX,
    extension: str = DEFAULT_EXTENSION,
) -> List[str]:
    """
    Order shards by merge precedence.

    Permanent shards (alphabetical), then the exact <date><extension>
    shard, then the other date shards (alphabetical).
    """
    primary_name = f"{date_key}{extension}"
    permanent, primary, others = [], [], []
    for n in names:
        if n.startswith(permanent_prefix):
            permanent.append(n)
        elif n == primary_name:
            primary.append(n)
        else:
            others.append(n)
    return sorted(permanent) + primary + sorted(others)


def parse_shard(name: str, text: str) -> List[NewsItem]:
    """
    Parse shard text into news items.

    A leading UTF-8 BOM is ignored. Entries that are not objects or fail
    validation are skipped.

    Raises:
        MalformedShardError: If the text is not decodable JSON or not a top-level list
    """
    if text.startswith(BOM):
        text = text[len(BOM):]
    try:
        data: Any = json.loads(text)
    except (ValueError, RecursionError) as e:
        raise MalformedShardError(name, str(e)) from e

    if not isinstance(data, list):
        raise MalformedShardError(name, f"top-level value is {type(data).__name__}, not a list")

    items = []
    for idx, record in enumerate(data):
        if not isinstance(record, dict):
            logger.debug(f"Skipping non-object entry {idx} in {name}")
            continue
        try:
            items.append(NewsItem.model_validate(record))
        except ValidationError as e:
            logger.warning(f"Skipping invalid entry {idx} in {name}: {e.error_count()} errors")
    return items


class NewsResolver:
    """
    Resolves a requested date into the merged list of raw news items.

    Shards are read concurrently and merged in precedence order.
    """

    def __init__(
        self,
        storage: StorageBackend,
        timezone: str = "Europe/Vienna",
        permanent_prefix: str = DEFAULT_PERMANENT_PREFIX,
        extension: str = DEFAULT_EXTENSION,
        max_workers: int = 4,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.storage = storage
        self.timezone = timezone
        self.permanent_prefix = permanent_prefix
        self.extension = extension
        self.max_workers = max(1, int(max_workers))
        self.clock = clock

    def date_key(self, requested: Optional[str] = None) -> str:
        """Resolve 'today'/'yesterday'/YYYY-MM-DD into a date key."""
        return resolve_date_key(requested, self.timezone, self.clock())

    def shards_for(self, date_key: str) -> List[str]:
        """
        List the shards contributing to a date, in merge order.

        Raises:
            DirectoryUnavailableError: If the shard directory cannot be listed
            NewsNotFoundError: If no shard matches
        """
        try:
            names = self.storage.list_shards()
        except OSError as e:
            logger.error(f"Cannot list shards in {self.storage.describe()}: {e}")
            raise DirectoryUnavailableError() from e

        selected = select_shards(names, date_key, self.permanent_prefix, self.extension)
        if not selected:
            logger.info(f"No shards found for {date_key} in {self.storage.describe()}")
            raise NewsNotFoundError(date_key)

        return order_shards(selected, date_key, self.permanent_prefix, self.extension)

    def load_shard(self, name: str) -> List[NewsItem]:
        """Read and parse one shard; any failure yields an empty list."""
        try:
            text = self.storage.read_shard(name)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to read shard {name}: {e}")
            return []

        try:
            return parse_shard(name, text)
        except MalformedShardError as e:
            logger.warning(f"Ignoring malformed shard {name}: {e.reason}")
            return []

    def load_shards(self, names: List[str]) -> List[NewsItem]:
        """Read shards concurrently and concatenate them in the given order."""
        if self.max_workers == 1 or len(names) <= 1:
            parts = [self.load_shard(n) for n in names]
        else:
            workers = min(self.max_workers, len(names))
            with _fut.ThreadPoolExecutor(max_workers=workers) as ex:
                parts = list(ex.map(self.load_shard, names))

        merged: List[NewsItem] = []
        for part in parts:
            merged.extend(part)
        return merged

    def resolve(self, requested: Optional[str] = None) -> List[NewsItem]:
        """
        Resolve a requested date into the merged list of raw items.

        Args:
            requested: None/"today", "yesterday" or YYYY-MM-DD

        Returns:
            List[NewsItem]: Items in shard precedence order, then file order

        Raises:
            InvalidDateError: If the requested date cannot be parsed
            DirectoryUnavailableError: If the shard directory cannot be listed
            NewsNotFoundError: If no shard matches the date
        """
        date_key = self.date_key(requested)
        names = self.shards_for(date_key)
        logger.info(f"Resolving news for {date_key} from {len(names)} shards: {names}")

        items = self.load_shards(names)
        logger.info(f"Merged {len(items)} items for {date_key}")
        return items
