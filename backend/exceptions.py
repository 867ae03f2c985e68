"""
Error taxonomy for news resolution.

Each error carries the short, user-facing message returned by the API and
the HTTP status code the boundary maps it to.
"""

from typing import Optional


class NewsError(Exception):
    """Base class for all news resolution errors."""

    status_code = 500
    default_message = "Interner Fehler"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NewsNotFoundError(NewsError):
    """Raised when no shard exists for the requested date."""

    status_code = 404
    default_message = "Keine Nachrichten für dieses Datum verfügbar"

    def __init__(self, date_key: str, message: Optional[str] = None):
        self.date_key = date_key
        super().__init__(message)


class InvalidDateError(NewsError):
    """Raised when the requested date is neither a keyword nor YYYY-MM-DD."""

    status_code = 400
    default_message = "Ungültiges Datum"


class DirectoryUnavailableError(NewsError):
    """Raised when the shard directory cannot be listed."""

    status_code = 500
    default_message = "Nachrichten sind vorübergehend nicht verfügbar"


class MalformedShardError(NewsError):
    """Raised when a shard cannot be parsed into a list of records.

    Never escapes the resolver; the shard contributes an empty list instead.
    """

    def __init__(self, shard_name: str, reason: str):
        self.shard_name = shard_name
        self.reason = reason
        super().__init__(f"Malformed shard {shard_name}: {reason}")
