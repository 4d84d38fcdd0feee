"""Observer interface for extensions that react to processed keys."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from term_editor.buffer import BufferMirror
from term_editor.keys import KeyCode

if TYPE_CHECKING:  # pragma: no cover
    from .editor import EditorSession


class ExtensionHost:
    """What an extension may see and touch of the running session."""

    def __init__(self, session: "EditorSession") -> None:
        self._session = session

    @property
    def file_name(self) -> Optional[str]:
        return self._session.file_name

    def buffer_text(self) -> str:
        """All lines joined by newlines, without a trailing newline."""

        return self._session.buffer.text()

    def snapshot(self) -> BufferMirror:
        return self._session.buffer.mirror(file_name=self._session.file_name)

    def set_status(self, message: str) -> None:
        self._session.set_status(message)

    def insert_text(self, text: str) -> None:
        self._session.buffer.insert_text(text)


class Extension:
    """Base class for session observers."""

    name: str = "extension"

    def on_start(self, host: ExtensionHost) -> None:  # pragma: no cover - default no-op
        del host

    def on_key(self, key: KeyCode, host: ExtensionHost) -> None:
        raise NotImplementedError


__all__ = ["Extension", "ExtensionHost"]
