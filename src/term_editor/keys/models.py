"""Logical key values produced by the decoder."""

from __future__ import annotations

from enum import IntEnum
from typing import Union


class Key(IntEnum):
    """Named keys.

    Backspace and Escape share their raw byte values so a decoded byte and
    the named key compare equal; the navigation keys live above the byte
    range.
    """

    ESCAPE = 0x1B
    BACKSPACE = 127
    ARROW_LEFT = 1000
    ARROW_RIGHT = 1001
    ARROW_UP = 1002
    ARROW_DOWN = 1003
    DELETE = 1004
    HOME = 1005
    END = 1006
    PAGE_UP = 1007
    PAGE_DOWN = 1008


KeyCode = Union[int, Key]

ENTER = ord("\r")
TAB = ord("\t")


def ctrl(ch: str) -> int:
    """Byte sent by the terminal for Ctrl+``ch``."""

    return ord(ch) & 0x1F


def normalize(code: int) -> KeyCode:
    if code in (Key.ESCAPE, Key.BACKSPACE):
        return Key(code)
    return code


def is_printable(code: KeyCode) -> bool:
    if isinstance(code, Key):
        return False
    return 32 <= code < 127


def is_high_byte(code: KeyCode) -> bool:
    """Bytes 128-255: pieces of multi-byte characters typed in the terminal."""

    if isinstance(code, Key):
        return False
    return 128 <= code <= 255


def byte_char(code: int) -> str:
    """The character a raw byte is stored as in a line.

    High bytes use the same ``surrogateescape`` form as loaded files, so a
    typed UTF-8 sequence is written back byte for byte.
    """

    return bytes([code]).decode("utf-8", errors="surrogateescape")


def describe(code: KeyCode) -> str:
    if isinstance(code, Key):
        return code.name
    if code < 32:
        return f"CTRL+{chr(code + 64)}"
    if code >= 128:
        return f"0x{code:02X}"
    return chr(code)


__all__ = [
    "ENTER",
    "Key",
    "KeyCode",
    "TAB",
    "byte_char",
    "ctrl",
    "describe",
    "is_high_byte",
    "is_printable",
    "normalize",
]
