"""
Verify news shards in the data directory and optionally strip UTF-8 BOMs.

Intended to run after the scrapers have written a new shard.
"""

import argparse
import json
import logging
from dataclasses import dataclass
from typing import List, Optional

from backend.settings import settings
from backend.storage import LocalStorageBackend, select_shards
from backend.storage.resolver import BOM
from backend.utils.dates import resolve_date_key

logger = logging.getLogger(__name__)

CONTEXT_CHARS = 20


@dataclass
class ShardReport:
    """Outcome of checking one shard."""

    name: str
    ok: bool
    item_count: Optional[int] = None
    had_bom: bool = False
    error: Optional[str] = None
    context: Optional[str] = None


def error_context(text: str, pos: int, width: int = CONTEXT_CHARS) -> str:
    """Return the text surrounding a parse error position."""
    start = max(0, pos - width)
    end = min(len(text), pos + width)
    return text[start:end]


def check_shard(name: str, text: str) -> ShardReport:
    """Check that a shard parses and holds a top-level list."""
    had_bom = text.startswith(BOM)
    body = text[len(BOM):] if had_bom else text

    try:
        data = json.loads(body)
    except json.JSONDecodeError as e:
        return ShardReport(
            name=name,
            ok=False,
            had_bom=had_bom,
            error=e.msg,
            context=error_context(body, e.pos),
        )
    except (ValueError, RecursionError) as e:
        return ShardReport(name=name, ok=False, had_bom=had_bom, error=str(e))

    if not isinstance(data, list):
        return ShardReport(name=name, ok=False, had_bom=had_bom, error="Not an array")

    return ShardReport(name=name, ok=True, item_count=len(data), had_bom=had_bom)


def verify_shards(
    storage: LocalStorageBackend,
    date_key: Optional[str] = None,
    strip_bom: bool = False,
) -> List[ShardReport]:
    """
    Check every shard (or those for one date) and strip BOMs on request.

    Args:
        storage: Local shard directory
        date_key: Only check shards for this date (permanent shards included)
        strip_bom: Rewrite shards that start with a BOM without it

    Returns:
        List[ShardReport]: One report per checked shard, sorted by name
    """
    names = storage.list_shards()
    if date_key:
        names = select_shards(
            names, date_key, settings.data.permanent_prefix, settings.data.extension
        )
    else:
        names = [n for n in names if n.lower().endswith(settings.data.extension)]

    reports = []
    for name in sorted(names):
        try:
            text = storage.read_shard(name)
        except (OSError, UnicodeDecodeError) as e:
            reports.append(ShardReport(name=name, ok=False, error=str(e)))
            continue

        report = check_shard(name, text)
        if report.had_bom and strip_bom:
            storage.write_shard(name, text[len(BOM):])
            logger.info(f"BOM removed from {name}")
        reports.append(report)
    return reports


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")

    parser = argparse.ArgumentParser(description="Verify news shards and strip UTF-8 BOMs")
    parser.add_argument("--data-dir", type=str, default=settings.data.data_dir, help="Shard directory")
    parser.add_argument(
        "--date",
        type=str,
        default=None,
        help="Only check shards for 'today', 'yesterday' or YYYY-MM-DD",
    )
    parser.add_argument(
        "--strip-bom",
        action="store_true",
        help="Rewrite shards that start with a UTF-8 BOM",
    )
    args = parser.parse_args(argv)

    date_key = resolve_date_key(args.date, settings.data.timezone) if args.date else None
    storage = LocalStorageBackend(args.data_dir)

    try:
        reports = verify_shards(storage, date_key=date_key, strip_bom=args.strip_bom)
    except OSError as e:
        logger.error(f"Cannot list {args.data_dir}: {e}")
        return 1

    if not reports:
        logger.warning("No shards found")
        return 0

    failed = 0
    for r in reports:
        if r.ok:
            bom = " (BOM)" if r.had_bom else ""
            logger.info(f"{r.name}: OK, {r.item_count} items{bom}")
        else:
            failed += 1
            logger.error(f"{r.name}: {r.error}")
            if r.context is not None:
                logger.error(f"  Context: {r.context!r}")

    logger.info(f"Checked {len(reports)} shards, {failed} invalid")
    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
