"""Line buffer, logical cursor, and persistence helpers."""

from .buffer import Buffer, Transaction
from .document import BufferDocument
from .line import TAB_WIDTH, Line, expand_tabs
from .persistence import load_lines, resolve_save_path, save_text
from .state import BufferState, Cursor
from .sync import BufferMirror, EmptyBufferError
from .validation import clamp, clamp_cursor

__all__ = [
    "Buffer",
    "BufferDocument",
    "BufferMirror",
    "BufferState",
    "Cursor",
    "EmptyBufferError",
    "Line",
    "TAB_WIDTH",
    "Transaction",
    "clamp",
    "clamp_cursor",
    "expand_tabs",
    "load_lines",
    "resolve_save_path",
    "save_text",
]
