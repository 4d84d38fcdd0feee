"""Key values and the raw byte-stream decoder."""

from .decoder import ByteSource, BytesSource, KeyDecoder, decode_bytes
from .models import (
    ENTER,
    TAB,
    Key,
    KeyCode,
    byte_char,
    ctrl,
    describe,
    is_high_byte,
    is_printable,
    normalize,
)

__all__ = [
    "ByteSource",
    "BytesSource",
    "ENTER",
    "Key",
    "KeyCode",
    "KeyDecoder",
    "TAB",
    "byte_char",
    "ctrl",
    "decode_bytes",
    "describe",
    "is_high_byte",
    "is_printable",
    "normalize",
]
