"""
JSON file key-value storage.

The file holds a single JSON object mapping keys to string values, mirroring
how a browser's local storage keeps serialized blobs under fixed keys.
"""

from __future__ import annotations

from pathlib import Path
import json
import logging
import os

logger = logging.getLogger(__name__)


class JsonFileStorage:
    """Key-value storage backed by one JSON document on disk."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _read_all(self) -> dict:
        if not self.path.exists():
            return {}
        with self.path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} does not contain a JSON object")
        return data

    def get_item(self, key: str) -> str | None:
        value = self._read_all().get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            raise ValueError(f"Value stored under {key!r} is not a string")
        return value

    def set_item(self, key: str, value: str) -> None:
        try:
            data = self._read_all()
        except ValueError as exc:
            logger.warning("Rewriting unreadable storage file %s: %s", self.path, exc)
            data = {}
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_name(self.path.name + ".tmp")
        tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        os.replace(tmp, self.path)
