"""
Persistence adapter for the student collection.

The whole roster is serialized as one JSON array under a fixed storage key and
rewritten after every mutation.
"""

from __future__ import annotations

import json
import logging
from typing import Iterable, List

from roster.domain.students import Student
from roster.repositories import KeyValueStorage

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "students"


class StudentRepository:
    def __init__(self, storage: KeyValueStorage, key: str = DEFAULT_STORAGE_KEY) -> None:
        self.storage = storage
        self.key = key

    def load(self) -> List[Student]:
        """Return the stored roster; absent or corrupt data yields an empty list."""
        try:
            raw = self.storage.get_item(self.key)
            if raw is None:
                return []
            data = json.loads(raw)
            if not isinstance(data, list):
                raise ValueError(f"Expected a JSON array, got {type(data).__name__}")
            return [Student.from_dict(item) for item in data]
        except ValueError as exc:
            logger.error("Failed to load students from storage key %r: %s", self.key, exc)
            return []

    def save(self, students: Iterable[Student]) -> None:
        payload = json.dumps([s.to_dict() for s in students], ensure_ascii=False)
        self.storage.set_item(self.key, payload)
