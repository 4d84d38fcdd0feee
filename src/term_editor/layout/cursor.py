"""Translation between logical buffer positions and the screen cursor."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from term_editor.buffer import Buffer, Cursor, clamp

from .row_index import RowIndex


class Motion(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"


@dataclass(slots=True)
class ScreenCursor:
    """Viewport-relative cursor plus the index row shown at the top."""

    column: int = 0
    row: int = 0
    view_offset_y: int = 0

    @property
    def absolute_row(self) -> int:
        return self.row + self.view_offset_y


class CursorMapper:
    """Keeps the logical buffer cursor and the screen cursor in agreement.

    A render offset that falls exactly on the end of a wrapped row belongs to
    the start of the following row, except on a line's last row where it
    stays put. Moving Right off the last column of a full row therefore
    lands on column 0 of the next row.

    Left from column 0 of a continuation row steps back one raw character,
    landing on the previous row's last column rather than its end; the end
    position would canonicalize straight back to where the cursor started.
    """

    def __init__(
        self,
        buffer: Buffer,
        *,
        width: int = 0,
        height: int = 0,
        index: Optional[RowIndex] = None,
    ) -> None:
        self.buffer = buffer
        self.index = index or RowIndex()
        self.cursor = ScreenCursor()
        self.width = max(0, width)
        self.height = max(0, height)

    def resize(self, width: int, height: int) -> None:
        self.width = max(0, width)
        self.height = max(0, height)
        self.refresh()

    def refresh(self) -> None:
        self.index.rebuild(self.buffer, self.width)

    @property
    def absolute_row(self) -> int:
        return self.cursor.absolute_row

    def logical_to_screen(
        self, line_index: Optional[int] = None, char_index: Optional[int] = None
    ) -> ScreenCursor:
        """Place the screen cursor over a logical position, scrolling if needed.

        Defaults to the buffer's own cursor. A position past the last line is
        shown at the end of the final row.
        """

        self.refresh()
        if self.index.is_empty():
            self.cursor = ScreenCursor()
            return self.cursor

        current_line, current_char = self.buffer.cursor
        if line_index is None:
            line_index = current_line
        if char_index is None:
            char_index = current_char

        if line_index >= self.buffer.line_count:
            last = self.index.row_count() - 1
            self._place(last, self.index.width_of(last))
            return self.cursor

        line_index = max(0, line_index)
        render_offset = self.buffer.line_at(line_index).render_offset(char_index)
        self._place(*self._locate(line_index, render_offset))
        return self.cursor

    def screen_to_logical(self) -> Cursor:
        """Resolve the screen cursor to a raw position and store it on the buffer."""

        if self.index.is_empty():
            if self.buffer.line_count == 0:
                return self.buffer.set_cursor(0, 0)
            return self.buffer.cursor

        entry = self.index.entry(self.cursor.absolute_row)
        line = self.buffer.line_at(entry.line_index)
        char_index = line.char_index_at(entry.offset + self.cursor.column)
        return self.buffer.set_cursor(entry.line_index, char_index)

    def move(self, motion: Motion) -> ScreenCursor:
        self.refresh()
        if self.index.is_empty():
            self.cursor = ScreenCursor()
            self.screen_to_logical()
            return self.cursor

        max_row = self.index.row_count() - 1
        self.cursor.view_offset_y = clamp(self.cursor.view_offset_y, 0, max_row)
        row = clamp(self.cursor.absolute_row, 0, max_row)
        column = self.cursor.column
        page = max(1, self.height)

        if motion is Motion.LEFT:
            row, column = self._step_left(row, column)
        elif motion is Motion.RIGHT:
            row, column = self._step_right(row, column)
        elif motion is Motion.UP:
            if row > 0:
                row -= 1
        elif motion is Motion.DOWN:
            if row < max_row:
                row += 1
        elif motion is Motion.PAGE_UP:
            row = max(0, row - page)
        elif motion is Motion.PAGE_DOWN:
            row = min(max_row, row + page)
        elif motion is Motion.HOME:
            column = 0
        elif motion is Motion.END:
            column = self.index.width_of(row)

        self._place(row, clamp(column, 0, self.index.width_of(row)))
        self.screen_to_logical()
        return self.cursor

    def _locate(self, line_index: int, render_offset: int) -> Tuple[int, int]:
        fallback: Optional[Tuple[int, int]] = None
        for row, entry in enumerate(self.index.entries):
            if entry.line_index != line_index:
                continue
            width = self.index.width_of(row)
            end = entry.offset + width
            last = self.index.is_last_row_of_line(row)
            if render_offset < end or (render_offset == end and last):
                return row, clamp(render_offset - entry.offset, 0, width)
            fallback = (row, width)
        if fallback is not None:
            return fallback
        last_row = self.index.row_count() - 1
        return last_row, self.index.width_of(last_row)

    def _place(self, row: int, column: int) -> None:
        span = max(1, self.height)
        offset = self.cursor.view_offset_y
        if row < offset:
            offset = row
        elif row >= offset + span:
            offset = row - span + 1
        self.cursor = ScreenCursor(
            column=column, row=row - offset, view_offset_y=offset
        )

    def _starts_line(self, row: int) -> bool:
        if row == 0:
            return True
        entries = self.index.entries
        return entries[row - 1].line_index != entries[row].line_index

    def _step_left(self, row: int, column: int) -> Tuple[int, int]:
        if column == 0 and self._starts_line(row):
            if row == 0:
                return row, 0
            return row - 1, self.index.width_of(row - 1)

        entry = self.index.entry(row)
        line = self.buffer.line_at(entry.line_index)
        target = entry.offset + column
        char_index = line.char_index_at(target)
        start = line.render_offset(char_index)
        if start >= target:
            start = line.render_offset(char_index - 1)
        return self._locate(entry.line_index, start)

    def _step_right(self, row: int, column: int) -> Tuple[int, int]:
        width = self.index.width_of(row)
        if column >= width:
            if row + 1 < self.index.row_count():
                return row + 1, 0
            return row, width

        entry = self.index.entry(row)
        line = self.buffer.line_at(entry.line_index)
        char_index = line.char_index_at(entry.offset + column)
        return self._locate(entry.line_index, line.render_offset(char_index + 1))


__all__ = ["CursorMapper", "Motion", "ScreenCursor"]
