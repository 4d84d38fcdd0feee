"""Snapshot and error types shared at the buffer boundary."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .state import Cursor


@dataclass(slots=True)
class BufferMirror:
    """Read-only snapshot handed to observers and host adapters."""

    text: str
    cursor: Cursor
    line_count: int
    dirty: int
    file_name: Optional[str] = None
    attributes: dict[str, str] = field(default_factory=dict)


class EmptyBufferError(IndexError):
    """Raised when a line is dereferenced while the buffer has no lines."""

    def __init__(
        self, message: str = "no lines to reference", *, index: int | None = None
    ) -> None:
        super().__init__(message)
        self.index = index


__all__ = ["BufferMirror", "EmptyBufferError"]
