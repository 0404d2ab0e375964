"""Transient status notices shown after each roster action."""
from __future__ import annotations

import itertools
import time
from dataclasses import dataclass
from typing import Callable, List

SUCCESS = "success"
ERROR = "error"
INFO = "info"


@dataclass
class Notice:
    id: int
    message: str
    level: str
    created_at: float
    display_ms: int
    fade_ms: int

    @property
    def expires_at(self) -> float:
        return self.created_at + (self.display_ms + self.fade_ms) / 1000.0

    def expired(self, now: float) -> bool:
        return now >= self.expires_at


class NotificationCenter:
    """
    Queue of notices waiting to be shown.

    Each push creates its own notice with its own expiry; nothing is merged.
    Notices that expire before a page picks them up are dropped.
    """

    def __init__(self, display_ms: int = 1800, fade_ms: int = 300, clock: Callable[[], float] = time.monotonic) -> None:
        self.display_ms = display_ms
        self.fade_ms = fade_ms
        self._clock = clock
        self._ids = itertools.count(1)
        self._queue: List[Notice] = []

    def push(self, message: str, level: str = INFO) -> Notice:
        notice = Notice(
            id=next(self._ids),
            message=message,
            level=level,
            created_at=self._clock(),
            display_ms=self.display_ms,
            fade_ms=self.fade_ms,
        )
        self._queue.append(notice)
        return notice

    def __call__(self, message: str, level: str = INFO) -> Notice:
        return self.push(message, level)

    def pending(self) -> List[Notice]:
        """Hand out the notices that are still live and empty the queue."""
        now = self._clock()
        live = [n for n in self._queue if not n.expired(now)]
        self._queue = []
        return live
