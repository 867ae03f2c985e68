"""
Configuration settings for the Daily News Viewer backend.

Manages the shard data directory, the civil timezone used to resolve
dates, and FastAPI server options via environment variables with
sensible defaults.
"""

import os
from dataclasses import dataclass, field
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


@dataclass
class DataSettings:
    """
    Settings for the news shard directory.

    Supported backends:
    - 'local': JSON shards in a directory on the local file system
    - 'memory': In-memory shards (testing/development)
    """

    # Storage backend type: 'local' or 'memory'
    backend: str = os.getenv("NEWS_STORAGE_BACKEND", "local")

    # Directory containing the daily JSON shards
    data_dir: str = os.getenv("NEWS_DATA_DIR", "./data")

    # Civil timezone used to derive "today" and "yesterday"
    timezone: str = os.getenv("NEWS_TIMEZONE", "Europe/Vienna")

    # Shards with this prefix are merged into every date
    permanent_prefix: str = "permanent"

    # Only files with this extension count as shards
    extension: str = ".json"

    # Thread pool size for concurrent shard reads
    max_workers: int = int(os.getenv("NEWS_MAX_WORKERS", "4"))

    # If set, groups produced by the raw-category fallback collapse into this bucket
    catch_all_group: Optional[str] = os.getenv("NEWS_CATCH_ALL_GROUP") or None


@dataclass
class APISettings:
    """Settings for FastAPI server."""

    # Server host and port
    host: str = os.getenv("API_HOST", "0.0.0.0")
    port: int = int(os.getenv("API_PORT", "3000"))

    # Deployment environment; 'production' enables the HTTPS redirect
    environment: str = os.getenv("APP_ENV", "development")

    # Enable CORS
    enable_cors: bool = os.getenv(
        "API_ENABLE_CORS", "true"
    ).lower() == "true"

    # Allowed CORS origins
    cors_origins: list = field(default_factory=lambda: [
        "http://localhost:3000",
        "http://localhost:5173",  # Vite dev server
    ])

    # API title and description
    title: str = "Daily News Viewer API"
    description: str = "REST API serving daily news snapshots grouped by category"
    version: str = "1.0.0"


class Settings:
    """
    Global settings container combining all configuration sections.

    Usage:
        from backend.settings import settings
        print(settings.data.data_dir)
        print(settings.api.port)
    """

    def __init__(self):
        self.data = DataSettings()
        self.api = APISettings()

    @property
    def is_production(self) -> bool:
        return self.api.environment.lower() == "production"

    def validate(self) -> list[str]:
        """
        Validates configuration and returns list of warnings/errors.

        Returns:
            list[str]: List of configuration issues (empty if all valid)
        """
        issues = []

        if self.data.backend not in ("local", "memory"):
            issues.append(
                f"WARNING: Unknown storage backend '{self.data.backend}', local will be used"
            )

        if self.data.backend == "local" and not os.path.isdir(self.data.data_dir):
            issues.append(
                f"WARNING: Data directory not found: {self.data.data_dir}"
            )

        try:
            ZoneInfo(self.data.timezone)
        except (ZoneInfoNotFoundError, ValueError):
            issues.append(
                f"ERROR: Unknown timezone '{self.data.timezone}'"
            )

        if self.data.max_workers < 1:
            issues.append(
                f"ERROR: NEWS_MAX_WORKERS must be >= 1, got {self.data.max_workers}"
            )

        return issues


# Global settings instance
settings = Settings()
