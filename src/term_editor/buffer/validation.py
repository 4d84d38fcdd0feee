"""Clamping helpers shared across buffer services."""

from __future__ import annotations

from .document import BufferDocument
from .state import Cursor


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


def clamp_cursor(document: BufferDocument, line_index: int, char_index: int) -> Cursor:
    """Saturate a logical position to the nearest valid one."""

    count = document.line_count
    if count == 0:
        return (0, 0)
    line_index = clamp(line_index, 0, count)
    if line_index == count:
        return (line_index, 0)
    return (line_index, clamp(char_index, 0, document.get_line(line_index).size))


__all__ = ["clamp", "clamp_cursor"]
