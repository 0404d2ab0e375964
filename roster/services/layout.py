"""Scrollable table viewport sizing."""
from __future__ import annotations

from typing import Optional

DEFAULT_HEADER_HEIGHT = 120
DEFAULT_FORM_HEIGHT = 320
RESERVED_HEIGHT = 140
MIN_TABLE_HEIGHT = 150
MAX_TABLE_HEIGHT = 900


def table_max_height(
    viewport_height: float,
    header_height: Optional[float] = None,
    form_height: Optional[float] = None,
) -> int:
    """Height left for the table once header, form and margins are taken out."""
    header = DEFAULT_HEADER_HEIGHT if header_height is None else header_height
    form = DEFAULT_FORM_HEIGHT if form_height is None else form_height
    target = viewport_height - (header + form + RESERVED_HEIGHT)
    return int(min(max(target, MIN_TABLE_HEIGHT), MAX_TABLE_HEIGHT))
