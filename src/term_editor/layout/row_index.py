"""Soft-wrap index mapping buffer lines onto fixed-width screen rows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from term_editor.buffer import Buffer


@dataclass(frozen=True, slots=True)
class RowEntry:
    """One screen row's slice of a line's render form."""

    line_index: int
    offset: int
    width: int

    @property
    def end(self) -> int:
        return self.offset + self.width


class RowIndex:
    """Derived row table; rebuild after any buffer mutation or resize.

    Rules per line:

    * an empty render occupies one row of width 0;
    * longer renders are split into ``viewport_width`` chunks;
    * a render whose length is a non-zero multiple of the width gets one more
      width-0 row so the cursor can sit after the final character.
    """

    def __init__(self) -> None:
        self._entries: List[RowEntry] = []
        self._buffer: Optional[Buffer] = None
        self._width = 0

    @property
    def entries(self) -> Sequence[RowEntry]:
        return tuple(self._entries)

    @property
    def viewport_width(self) -> int:
        return self._width

    def rebuild(self, buffer: Buffer, viewport_width: int) -> None:
        self._buffer = buffer
        self._width = viewport_width
        entries: List[RowEntry] = []
        if viewport_width > 0:
            for line_index, line in enumerate(buffer.document):
                length = line.render_length
                if length == 0:
                    entries.append(RowEntry(line_index, 0, 0))
                    continue
                for offset in range(0, length, viewport_width):
                    width = min(viewport_width, length - offset)
                    entries.append(RowEntry(line_index, offset, width))
                if length % viewport_width == 0:
                    entries.append(RowEntry(line_index, length, 0))
        self._entries = entries

    def row_count(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def is_empty(self) -> bool:
        return not self._entries

    def entry(self, row: int) -> RowEntry:
        """Entry at ``row``, saturated to the valid range."""

        if not self._entries:
            raise IndexError("row index is empty")
        return self._entries[max(0, min(row, len(self._entries) - 1))]

    def width_of(self, row: int) -> int:
        """Drawable width of ``row`` computed from the current line contents."""

        if row < 0 or row >= len(self._entries) or self._buffer is None:
            return 0
        if self._buffer.line_count == 0:
            return 0
        entry = self._entries[row]
        line = self._buffer.line_at(entry.line_index)
        remaining = max(0, line.render_length - entry.offset)
        return min(remaining, self._width)

    def cached_width(self, row: int) -> int:
        """Width recorded at the last rebuild."""

        if row < 0 or row >= len(self._entries):
            return 0
        return self._entries[row].width

    def is_last_row_of_line(self, row: int) -> bool:
        if row + 1 >= len(self._entries):
            return True
        return self._entries[row + 1].line_index != self._entries[row].line_index

    def rows_for_line(self, line_index: int) -> List[int]:
        return [
            row
            for row, entry in enumerate(self._entries)
            if entry.line_index == line_index
        ]


__all__ = ["RowEntry", "RowIndex"]
