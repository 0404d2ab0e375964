"""Key-value storage backed by the SQL `storage_entries` table."""
from __future__ import annotations

from datetime import datetime, timezone

from roster.db.models import StorageEntry
from roster.db.session import get_session


class SQLStorage:
    """Same contract as JsonFileStorage, one row per key."""

    def __init__(self, database_url: str | None = None) -> None:
        self.database_url = database_url

    def get_item(self, key: str) -> str | None:
        with get_session(self.database_url) as session:
            entry = session.get(StorageEntry, key)
            return entry.value if entry else None

    def set_item(self, key: str, value: str) -> None:
        now = datetime.now(timezone.utc)
        with get_session(self.database_url) as session:
            entry = session.get(StorageEntry, key)
            if not entry:
                session.add(StorageEntry(key=key, value=value, updated_at=now))
            else:
                entry.value = value
                entry.updated_at = now
            session.commit()
