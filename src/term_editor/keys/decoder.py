"""Decode a raw terminal byte stream into logical keys."""

from __future__ import annotations

from typing import Iterator, List, Optional, Protocol

from .models import Key, KeyCode, normalize

_TILDE_KEYS = {
    ord("1"): Key.HOME,
    ord("3"): Key.DELETE,
    ord("4"): Key.END,
    ord("5"): Key.PAGE_UP,
    ord("6"): Key.PAGE_DOWN,
    ord("7"): Key.HOME,
    ord("8"): Key.END,
}

_CSI_KEYS = {
    ord("A"): Key.ARROW_UP,
    ord("B"): Key.ARROW_DOWN,
    ord("C"): Key.ARROW_RIGHT,
    ord("D"): Key.ARROW_LEFT,
    ord("H"): Key.HOME,
    ord("F"): Key.END,
}

_SS3_KEYS = {
    ord("H"): Key.HOME,
    ord("F"): Key.END,
}


class ByteSource(Protocol):
    """Returns at most ``size`` bytes; ``b""`` once the read timeout expires."""

    def read(self, size: int = 1) -> bytes: ...


class BytesSource:
    """In-memory ``ByteSource`` that runs dry instead of blocking."""

    def __init__(self, data: bytes = b"") -> None:
        self._data = bytearray(data)
        self.consumed = 0

    def feed(self, data: bytes) -> None:
        self._data.extend(data)

    @property
    def remaining(self) -> int:
        return len(self._data)

    def read(self, size: int = 1) -> bytes:
        chunk = bytes(self._data[:size])
        del self._data[:size]
        self.consumed += len(chunk)
        return chunk


class KeyDecoder:
    """Turns one byte, or one escape sequence, into a single key per call.

    A short read anywhere inside an escape sequence means the user pressed
    Escape on its own; unrecognized sequences also degrade to ``Key.ESCAPE``.
    """

    def __init__(self, source: ByteSource) -> None:
        self.source = source

    def _next_byte(self) -> Optional[int]:
        chunk = self.source.read(1)
        if not chunk:
            return None
        return chunk[0]

    def read_key(self) -> Optional[KeyCode]:
        """Decode the next key, or ``None`` if no byte arrived in time."""

        first = self._next_byte()
        if first is None:
            return None
        if first != Key.ESCAPE:
            return normalize(first)
        return self._read_escape()

    def _read_escape(self) -> KeyCode:
        lead = self._next_byte()
        if lead is None:
            return Key.ESCAPE
        code = self._next_byte()
        if code is None:
            return Key.ESCAPE

        if lead == ord("["):
            if ord("0") <= code <= ord("9"):
                if self._next_byte() != ord("~"):
                    return Key.ESCAPE
                return _TILDE_KEYS.get(code, Key.ESCAPE)
            return _CSI_KEYS.get(code, Key.ESCAPE)
        if lead == ord("O"):
            return _SS3_KEYS.get(code, Key.ESCAPE)
        return Key.ESCAPE

    def iter_keys(self) -> Iterator[KeyCode]:
        """Yield keys lazily until the source has nothing more to offer."""

        while True:
            key = self.read_key()
            if key is None:
                return
            yield key


def decode_bytes(data: bytes) -> List[KeyCode]:
    return list(KeyDecoder(BytesSource(data)).iter_keys())


__all__ = ["ByteSource", "BytesSource", "KeyDecoder", "decode_bytes"]
