"""
Configuration helpers for the roster backend.

Settings are read once from environment variables so that routers/services do
not fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

DEFAULT_DATA_FILE = Path(__file__).resolve().parents[2] / "data.json"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    data_file: str
    database_url: str
    storage_key: str
    notice_duration_ms: int
    notice_fade_ms: int


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        data_file=os.getenv("DATA_FILE") or str(DEFAULT_DATA_FILE),
        database_url=(os.getenv("DATABASE_URL") or "").strip(),
        storage_key=os.getenv("STORAGE_KEY") or "students",
        notice_duration_ms=max(0, _int(os.getenv("NOTICE_DURATION_MS", "1800"), 1800)),
        notice_fade_ms=max(0, _int(os.getenv("NOTICE_FADE_MS", "300"), 300)),
    )
