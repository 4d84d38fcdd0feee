"""High-level buffer façade combining the document and the logical cursor."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import ContextManager, Iterable, Optional

from term_editor.runtime import telemetry

from .document import BufferDocument
from .line import Line
from .state import BufferState, Cursor
from .sync import BufferMirror
from .validation import clamp_cursor


class Buffer:
    """Document plus a cursor that always satisfies the clamping rules."""

    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[BufferDocument] = None,
        state: Optional[BufferState] = None,
    ) -> None:
        self.name = name
        self.document = document or BufferDocument()
        self.state = state or BufferState()
        self._reclamp()

    @classmethod
    def from_lines(cls, raw_lines: Iterable[str], *, name: str = "default") -> "Buffer":
        buffer = cls(name=name, document=BufferDocument.from_lines(raw_lines))
        buffer.mark_clean()
        return buffer

    @property
    def line_count(self) -> int:
        return self.document.line_count

    @property
    def cursor(self) -> Cursor:
        return self.state.cursor

    def line_at(self, index: int) -> Line:
        return self.document.get_line(index)

    def set_cursor(self, line_index: int, char_index: int) -> Cursor:
        self.state.set_cursor(*clamp_cursor(self.document, line_index, char_index))
        return self.state.cursor

    def load(self, raw_lines: Iterable[str]) -> None:
        with Transaction(self, "load"):
            self.document.replace_all(raw_lines)
            self.state.set_cursor(0, 0)
        self.mark_clean()

    def insert_line(self, index: int, content: str = "") -> None:
        with Transaction(self, "insert_line"):
            self.document.insert_line(index, content)

    def delete_line(self, index: int) -> None:
        with Transaction(self, "delete_line"):
            self.document.delete_line(index)

    def insert_char(self, ch: str, *, cursor: Optional[Cursor] = None) -> Cursor:
        if len(ch) != 1:
            raise ValueError(f"insert_char expects one character, got {ch!r}")
        if cursor is not None:
            self.set_cursor(*cursor)
        with Transaction(self, "insert_char"):
            state = self.state
            if state.line_index == self.line_count:
                self.document.insert_line(self.line_count, "")
            self.line_at(state.line_index).insert_char(state.char_index, ch)
            state.char_index += 1
        return self.state.cursor

    def delete_char_before(self, *, cursor: Optional[Cursor] = None) -> Cursor:
        """Backspace: remove the character left of the cursor.

        At the start of a line the line is joined onto the previous one; at
        ``(0, 0)`` and past the last line nothing happens.
        """

        if cursor is not None:
            self.set_cursor(*cursor)
        state = self.state
        if state.line_index >= self.line_count:
            return state.cursor
        if state.char_index == 0:
            return self.merge_line_into_previous()
        with Transaction(self, "delete_char"):
            self.line_at(state.line_index).delete_char(state.char_index - 1)
            state.char_index -= 1
        return state.cursor

    def merge_line_into_previous(self) -> Cursor:
        state = self.state
        if state.line_index == 0 or state.line_index >= self.line_count:
            return state.cursor
        with Transaction(self, "merge_line"):
            current = self.line_at(state.line_index)
            previous = self.line_at(state.line_index - 1)
            join_point = previous.size
            previous.append(current.chars)
            self.document.delete_line(state.line_index)
            state.set_cursor(state.line_index - 1, join_point)
        return state.cursor

    def split_line_at_cursor(self) -> Cursor:
        state = self.state
        with Transaction(self, "split_line"):
            if state.char_index == 0:
                self.document.insert_line(state.line_index, "")
            else:
                tail = self.line_at(state.line_index).truncate(state.char_index)
                self.document.insert_line(state.line_index + 1, tail)
            state.set_cursor(state.line_index + 1, 0)
        return state.cursor

    def insert_text(self, text: str) -> Cursor:
        """Append ``text`` at the end of the document, splitting on newlines."""

        if self.line_count == 0:
            self.insert_line(0, "")
        last = self.line_count - 1
        self.set_cursor(last, self.line_at(last).size)
        for ch in text:
            if ch == "\r":
                continue
            if ch == "\n":
                self.split_line_at_cursor()
            else:
                self.insert_char(ch)
        return self.state.cursor

    def dump(self) -> str:
        return self.document.dump()

    def text(self) -> str:
        return self.document.text()

    def dirty_count(self) -> int:
        return self.document.dirty_count()

    def mark_clean(self) -> None:
        self.document.mark_clean()

    def mirror(
        self,
        *,
        file_name: Optional[str] = None,
        attributes: Optional[dict[str, str]] = None,
    ) -> BufferMirror:
        return BufferMirror(
            text=self.text(),
            cursor=self.state.cursor,
            line_count=self.line_count,
            dirty=self.dirty_count(),
            file_name=file_name,
            attributes=dict(attributes or {}),
        )

    def _reclamp(self) -> None:
        self.state.set_cursor(
            *clamp_cursor(self.document, self.state.line_index, self.state.char_index)
        )


class Transaction(AbstractContextManager["Transaction"]):
    """Wraps one mutation in a telemetry span and re-clamps the cursor."""

    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component="buffer",
            metadata={"buffer": self.buffer.name, "cursor": self.buffer.cursor},
        )
        self._span_cm.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.buffer._reclamp()
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


__all__ = ["Buffer", "Transaction"]
