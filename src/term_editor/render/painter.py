"""Turns a session's row index into a screen frame."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from term_editor.session import EditorSession

from .ansi import (
    CLEAR_LINE,
    HIDE_CURSOR,
    INVERT_COLOUR,
    NORMAL_COLOUR,
    RESET_CURSOR,
    SHOW_CURSOR,
    place_cursor,
)


@dataclass(slots=True)
class ScreenFrame:
    """Everything a host needs to draw one refresh."""

    rows: List[str]
    status_bar: str
    message_bar: str
    cursor: Tuple[int, int]  # (column, row) within the text area


class ScreenPainter:
    """Builds frames from the session's current index and cursor."""

    def compose(self, session: EditorSession) -> ScreenFrame:
        mapper = session.mapper
        width = mapper.width
        return ScreenFrame(
            rows=self._text_rows(session),
            status_bar=self.status_bar(session, width),
            message_bar=session.visible_status()[: max(0, width)],
            cursor=(mapper.cursor.column, mapper.cursor.row),
        )

    def _text_rows(self, session: EditorSession) -> List[str]:
        mapper = session.mapper
        index = mapper.index
        banner_row = mapper.height // 3 if session.buffer.line_count == 0 else -1
        banner = self.welcome(session.settings.welcome_text, mapper.width)
        rows: List[str] = []
        for view_row in range(mapper.height):
            absolute = mapper.cursor.view_offset_y + view_row
            if absolute >= index.row_count():
                if view_row == banner_row:
                    rows.append(banner)
                else:
                    rows.append("~")
                continue
            entry = index.entry(absolute)
            render = session.buffer.line_at(entry.line_index).render
            rows.append(render[entry.offset : entry.offset + index.width_of(absolute)])
        return rows

    @staticmethod
    def welcome(text: str, width: int) -> str:
        message = text[: max(0, width)]
        padding = (width - len(message)) // 2
        if padding <= 0:
            return message
        return "~" + " " * (padding - 1) + message

    @staticmethod
    def status_bar(session: EditorSession, width: int) -> str:
        name = session.file_name or "[ no name ]"
        count = session.buffer.line_count
        modified = "[ modified ]" if session.dirty else ""
        left = f"{name} - {count} lines {modified}"[: max(0, width)]
        right = f"{session.buffer.cursor[0] + 1}/{count}"
        gap = width - len(left)
        if gap >= len(right):
            return left + " " * (gap - len(right)) + right
        return left + " " * max(0, gap)

    @staticmethod
    def to_ansi(frame: ScreenFrame) -> str:
        parts = [HIDE_CURSOR, RESET_CURSOR]
        for row in frame.rows:
            parts.append(CLEAR_LINE)
            parts.append(row)
            parts.append("\r\n")
        parts.extend([INVERT_COLOUR, frame.status_bar, NORMAL_COLOUR, "\r\n"])
        parts.extend([CLEAR_LINE, frame.message_bar])
        parts.append(place_cursor(*frame.cursor))
        parts.append(SHOW_CURSOR)
        return "".join(parts)


__all__ = ["ScreenFrame", "ScreenPainter"]
