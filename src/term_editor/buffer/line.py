"""Single logical line with its tab-expanded render form."""

from __future__ import annotations

TAB_WIDTH = 8


def expand_tabs(chars: str) -> str:
    """Expand every tab in ``chars`` to the next multiple of ``TAB_WIDTH``."""

    if "\t" not in chars:
        return chars
    out: list[str] = []
    column = 0
    for ch in chars:
        if ch == "\t":
            pad = TAB_WIDTH - (column % TAB_WIDTH)
            out.append(" " * pad)
            column += pad
        else:
            out.append(ch)
            column += 1
    return "".join(out)


class Line:
    """Raw characters plus a render string that is never stale.

    ``chars`` is only changed through the mutators below, each of which
    recomputes ``render`` before returning and bumps ``dirty``.
    """

    __slots__ = ("_chars", "_render", "dirty")

    def __init__(self, chars: str = "") -> None:
        self._chars = chars
        self._render = expand_tabs(chars)
        self.dirty = 0

    def __repr__(self) -> str:
        return f"Line({self._chars!r})"

    @property
    def chars(self) -> str:
        return self._chars

    @property
    def render(self) -> str:
        return self._render

    @property
    def size(self) -> int:
        return len(self._chars)

    @property
    def render_length(self) -> int:
        return len(self._render)

    def _set(self, chars: str) -> None:
        self._chars = chars
        self._render = expand_tabs(chars)
        self.dirty += 1

    def insert_char(self, index: int, ch: str) -> None:
        if index < 0 or index > self.size:
            index = self.size
        self._set(self._chars[:index] + ch + self._chars[index:])

    def delete_char(self, index: int) -> None:
        if index < 0 or index >= self.size:
            return
        self._set(self._chars[:index] + self._chars[index + 1 :])

    def append(self, text: str) -> None:
        self._set(self._chars + text)

    def truncate(self, index: int) -> str:
        """Cut the line at ``index`` and return the removed tail."""

        index = max(0, min(index, self.size))
        tail = self._chars[index:]
        self._set(self._chars[:index])
        return tail

    def render_offset(self, char_index: int) -> int:
        """Render column at which raw character ``char_index`` starts."""

        char_index = max(0, min(char_index, self.size))
        column = 0
        for ch in self._chars[:char_index]:
            if ch == "\t":
                column += (TAB_WIDTH - 1) - (column % TAB_WIDTH)
            column += 1
        return column

    def char_index_at(self, render_column: int) -> int:
        """Raw index of the character covering ``render_column``.

        Tabs occupy several render columns but a single raw index; columns past
        the end resolve to ``size``.
        """

        column = 0
        for index, ch in enumerate(self._chars):
            step = 1
            if ch == "\t":
                step += (TAB_WIDTH - 1) - (column % TAB_WIDTH)
            if column + step > render_column:
                return index
            column += step
        return self.size


__all__ = ["Line", "TAB_WIDTH", "expand_tabs"]
