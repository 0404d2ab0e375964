"""
Persistence adapters.

Storage backends (JSON file today, SQL when DATABASE_URL is set) share the
small KeyValueStorage contract; services depend on StudentRepository rather
than touching a backend directly.
"""

from __future__ import annotations

from typing import Protocol

from roster.core.config import Settings


class KeyValueStorage(Protocol):
    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...


def build_storage(settings: Settings) -> KeyValueStorage:
    """Pick the storage backend for the current settings."""
    if settings.database_url:
        from roster.db.create_tables import create_all
        from roster.repositories.sql_repository import SQLStorage

        create_all(settings.database_url)
        return SQLStorage(settings.database_url)
    from roster.repositories.json_storage import JsonFileStorage

    return JsonFileStorage(settings.data_file)
