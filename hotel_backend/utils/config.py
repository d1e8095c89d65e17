"""Environment-driven application settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Immutable runtime configuration.

    Tests and scripts derive variants with ``dataclasses.replace`` instead of
    mutating the cached instance.
    """

    app_name: str
    app_version: str
    api_prefix: str
    database_path: Path
    log_level: str
    seed_demo_data: bool
    host: str
    port: int


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(
        app_name=os.getenv("HOTEL_APP_NAME", "Hotel Room Allocation Service"),
        app_version=os.getenv("HOTEL_APP_VERSION", "1.0.0"),
        api_prefix=os.getenv("HOTEL_API_PREFIX", "/api/v1"),
        database_path=Path(os.getenv("HOTEL_DATABASE_PATH", "data/hotel.db")),
        log_level=os.getenv("HOTEL_LOG_LEVEL", "INFO"),
        seed_demo_data=_env_bool("HOTEL_SEED_DEMO_DATA", True),
        host=os.getenv("HOTEL_HOST", "127.0.0.1"),
        port=int(os.getenv("HOTEL_PORT", "8000")),
    )
