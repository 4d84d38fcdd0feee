"""Ordered line storage for term_editor buffers."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence

from .line import Line
from .sync import EmptyBufferError


class BufferDocument:
    """List-of-lines model with a document-level modification counter.

    Dirty state is the document counter plus every line's own counter. Index
    arguments saturate instead of raising; only dereferencing a line while the
    document is empty is an error.
    """

    def __init__(self, lines: Iterable[Line] = ()) -> None:
        self._lines: List[Line] = list(lines)
        self.dirty = 0

    @classmethod
    def from_lines(cls, raw_lines: Iterable[str]) -> "BufferDocument":
        return cls(Line(text) for text in raw_lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def snapshot(self) -> Sequence[str]:
        """Return the raw line contents without exposing the Line objects."""

        return tuple(line.chars for line in self._lines)

    def get_line(self, index: int) -> Line:
        if not self._lines:
            raise EmptyBufferError(index=index)
        index = max(0, min(index, len(self._lines) - 1))
        return self._lines[index]

    def insert_line(self, index: int, content: str = "") -> Line:
        index = max(0, min(index, len(self._lines)))
        line = Line(content)
        self._lines.insert(index, line)
        self.dirty += 1
        return line

    def delete_line(self, index: int) -> Line | None:
        if not self._lines:
            return None
        index = max(0, min(index, len(self._lines) - 1))
        line = self._lines.pop(index)
        self.dirty += 1
        return line

    def replace_all(self, raw_lines: Iterable[str]) -> None:
        self._lines = [Line(text) for text in raw_lines]
        self.dirty += 1

    def dump(self) -> str:
        """Serialize with one newline after every line, including the last."""

        return "".join(f"{line.chars}\n" for line in self._lines)

    def text(self) -> str:
        return "\n".join(line.chars for line in self._lines)

    def dirty_count(self) -> int:
        return self.dirty + sum(line.dirty for line in self._lines)

    def mark_clean(self) -> None:
        self.dirty = 0
        for line in self._lines:
            line.dirty = 0


__all__ = ["BufferDocument"]
