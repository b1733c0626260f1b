"""
Configuration settings using dataclasses.
"""
import os
from dataclasses import dataclass, field
from typing import List, Optional
from . import defaults


def _split_origins(value: str) -> List[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


@dataclass
class PharmacoDBSettings:
    """Central configuration for the PharmacoDB API."""

    # Database settings
    db_path: str = field(default=defaults.DEFAULT_DB_PATH)
    pool_size: int = field(default=defaults.DEFAULT_POOL_SIZE)
    read_only: bool = field(default=defaults.DEFAULT_READ_ONLY)

    # Pagination
    default_page_limit: int = field(default=defaults.DEFAULT_PAGE_LIMIT)
    max_page_limit: int = field(default=defaults.MAX_PAGE_LIMIT)

    # Error monitoring (empty DSN disables Sentry)
    sentry_dsn: Optional[str] = field(default=defaults.DEFAULT_SENTRY_DSN)
    log_level: str = field(default=defaults.DEFAULT_LOG_LEVEL)

    # HTTP
    cors_origins: List[str] = field(default_factory=lambda: list(defaults.DEFAULT_CORS_ORIGINS))

    @classmethod
    def load_from_env(cls) -> 'PharmacoDBSettings':
        """Load settings from environment variables."""
        return cls(
            db_path=os.getenv("PHARMACODB_DB_PATH", defaults.DEFAULT_DB_PATH),
            pool_size=int(os.getenv("PHARMACODB_POOL_SIZE", defaults.DEFAULT_POOL_SIZE)),
            read_only=os.getenv("PHARMACODB_READ_ONLY", str(defaults.DEFAULT_READ_ONLY)).lower() == "true",
            default_page_limit=int(os.getenv("PHARMACODB_DEFAULT_PAGE_LIMIT", defaults.DEFAULT_PAGE_LIMIT)),
            max_page_limit=int(os.getenv("PHARMACODB_MAX_PAGE_LIMIT", defaults.MAX_PAGE_LIMIT)),
            sentry_dsn=os.getenv("PHARMACODB_SENTRY_DSN", defaults.DEFAULT_SENTRY_DSN),
            log_level=os.getenv("PHARMACODB_LOG_LEVEL", defaults.DEFAULT_LOG_LEVEL),
            cors_origins=_split_origins(os.getenv("PHARMACODB_CORS_ORIGINS", ",".join(defaults.DEFAULT_CORS_ORIGINS))),
        )
