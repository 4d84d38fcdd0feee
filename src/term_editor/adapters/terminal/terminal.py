"""Raw-mode POSIX terminal used as the editor's byte source and sink.

Raw mode is set with ``VMIN=0`` / ``VTIME=1`` so ``read`` returns one byte,
or nothing after 100 ms, which keeps the redraw loop responsive to resizes.
"""

from __future__ import annotations

import os
import sys
import termios
from typing import List, Optional, Tuple

from term_editor.render.ansi import (
    CLEAR_SCREEN,
    ENTER_ALT_BUFFER,
    LEAVE_ALT_BUFFER,
    RESET_CURSOR,
)
from term_editor.runtime import telemetry

FALLBACK_SIZE = (80, 24)


class RawTerminal:
    """Owns terminal attributes for the lifetime of a ``with`` block."""

    def __init__(
        self,
        input_fd: Optional[int] = None,
        output_fd: Optional[int] = None,
        *,
        read_timeout_ds: int = 1,
    ) -> None:
        self.input_fd = sys.stdin.fileno() if input_fd is None else input_fd
        self.output_fd = sys.stdout.fileno() if output_fd is None else output_fd
        self.read_timeout_ds = read_timeout_ds
        self._original: Optional[list] = None
        self._pending: List[str] = []

    def __enter__(self) -> "RawTerminal":
        self.enable_raw()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.disable_raw()
        return False

    def enable_raw(self) -> None:
        if self._original is not None:
            return
        original = termios.tcgetattr(self.input_fd)
        attrs = termios.tcgetattr(self.input_fd)
        attrs[0] &= ~(
            termios.BRKINT
            | termios.ICRNL
            | termios.INPCK
            | termios.ISTRIP
            | termios.IXON
        )
        attrs[1] &= ~termios.OPOST
        attrs[2] |= termios.CS8
        attrs[3] &= ~(termios.ECHO | termios.ICANON | termios.IEXTEN | termios.ISIG)
        attrs[6][termios.VMIN] = 0
        attrs[6][termios.VTIME] = self.read_timeout_ds
        termios.tcsetattr(self.input_fd, termios.TCSAFLUSH, attrs)
        self._original = original
        self.write(ENTER_ALT_BUFFER + CLEAR_SCREEN + RESET_CURSOR)
        self.flush()
        telemetry.record_event("terminal.raw_enabled", level="debug")

    def disable_raw(self) -> None:
        if self._original is None:
            return
        self.write(CLEAR_SCREEN + RESET_CURSOR + LEAVE_ALT_BUFFER)
        self.flush()
        termios.tcsetattr(self.input_fd, termios.TCSAFLUSH, self._original)
        self._original = None
        telemetry.record_event("terminal.raw_disabled", level="debug")

    def read(self, size: int = 1) -> bytes:
        """Return zero or one byte; an expired timeout yields ``b""``."""

        del size
        try:
            return os.read(self.input_fd, 1)
        except (BlockingIOError, InterruptedError):
            return b""

    def size(self) -> Tuple[int, int]:
        """Current ``(columns, rows)``, falling back to 80x24."""

        try:
            measured = os.get_terminal_size(self.output_fd)
        except (ValueError, OSError):
            return FALLBACK_SIZE
        if measured.columns <= 0 or measured.lines <= 0:
            return FALLBACK_SIZE
        return measured.columns, measured.lines

    def write(self, data: str) -> None:
        self._pending.append(data)

    def flush(self) -> None:
        if not self._pending:
            return
        payload = "".join(self._pending).encode("utf-8", errors="surrogateescape")
        self._pending.clear()
        view = memoryview(payload)
        while view:
            written = os.write(self.output_fd, view)
            view = view[written:]


__all__ = ["FALLBACK_SIZE", "RawTerminal"]
