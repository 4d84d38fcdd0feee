"""Line wrapping and cursor mapping between buffer and screen."""

from .cursor import CursorMapper, Motion, ScreenCursor
from .row_index import RowEntry, RowIndex

__all__ = [
    "CursorMapper",
    "Motion",
    "RowEntry",
    "RowIndex",
    "ScreenCursor",
]
