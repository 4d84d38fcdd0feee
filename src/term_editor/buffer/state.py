"""Logical cursor state for buffers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Cursor = Tuple[int, int]  # (line_index, char_index)


@dataclass(slots=True)
class BufferState:
    """Logical cursor; ``line_index == line_count`` means past the last line."""

    line_index: int = 0
    char_index: int = 0

    @property
    def cursor(self) -> Cursor:
        return (self.line_index, self.char_index)

    def set_cursor(self, line_index: int, char_index: int) -> None:
        self.line_index = line_index
        self.char_index = char_index
