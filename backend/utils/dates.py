"""
Civil date helpers.

All date keys are derived in a fixed civil timezone so that the serving
host's local offset never shifts the day boundary.
"""

import re
from datetime import date, datetime, time, timedelta, timezone
from typing import Optional
from zoneinfo import ZoneInfo

from backend.exceptions import InvalidDateError

DATE_KEY_FORMAT = "%Y-%m-%d"
DATE_KEY_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

TODAY = "today"
YESTERDAY = "yesterday"


def utc_now() -> datetime:
    """Default clock: the current instant as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def civil_date_key(instant: datetime, tz_name: str) -> str:
    """Format an instant as YYYY-MM-DD in the given civil timezone."""
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(ZoneInfo(tz_name)).strftime(DATE_KEY_FORMAT)


def today_key(tz_name: str, now: Optional[datetime] = None) -> str:
    """Return today's civil date key."""
    return civil_date_key(now or utc_now(), tz_name)


def yesterday_key(tz_name: str, now: Optional[datetime] = None) -> str:
    """
    Return yesterday's civil date key.

    Today is resolved in the civil zone first, then one day is subtracted
    from noon of that day so DST transitions cannot skip or repeat a date.
    """
    zone = ZoneInfo(tz_name)
    today = datetime.strptime(today_key(tz_name, now), DATE_KEY_FORMAT).date()
    noon = datetime.combine(today, time(12, 0), tzinfo=zone)
    return civil_date_key(noon - timedelta(days=1), tz_name)


def parse_date_key(value: str) -> date:
    """Validate an explicit YYYY-MM-DD key."""
    if not DATE_KEY_PATTERN.match(value):
        raise InvalidDateError(f"Ungültiges Datum: {value}")
    try:
        return datetime.strptime(value, DATE_KEY_FORMAT).date()
    except ValueError as exc:
        raise InvalidDateError(f"Ungültiges Datum: {value}") from exc


def resolve_date_key(
    requested: Optional[str],
    tz_name: str,
    now: Optional[datetime] = None,
) -> str:
    """
    Resolve a requested date into a canonical key.

    Args:
        requested: None/"" or "today", "yesterday", or an explicit YYYY-MM-DD
        tz_name: Civil timezone name (e.g. 'Europe/Vienna')
        now: Current instant (defaults to the system clock)

    Returns:
        str: Date key in YYYY-MM-DD format

    Raises:
        InvalidDateError: If the value is neither a keyword nor a valid date
    """
    value = (requested or "").strip().lower()
    if not value or value == TODAY:
        return today_key(tz_name, now)
    if value == YESTERDAY:
        return yesterday_key(tz_name, now)
    return parse_date_key(value).strftime(DATE_KEY_FORMAT)
