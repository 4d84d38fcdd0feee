"""Editor session: one key in, one mutation or motion, one refreshed view."""

from __future__ import annotations

import time
from pathlib import Path
from typing import Callable, List, Optional

from term_editor.actions import (
    Action,
    DeleteBackward,
    DeleteForward,
    InsertChar,
    Move,
    NoOp,
    Quit,
    Redraw,
    Save,
    SplitLine,
    resolve_action,
)
from term_editor.buffer import Buffer, load_lines, resolve_save_path, save_text
from term_editor.config import EditorSettings
from term_editor.keys import KeyCode, describe
from term_editor.layout import CursorMapper, Motion
from term_editor.runtime import telemetry

from .bus import EventBus
from .extensions import Extension, ExtensionHost
from .prompt import Prompt

DEFAULT_COLUMNS = 80
DEFAULT_ROWS = 24


class EditorSession:
    """Owns the buffer, the cursor mapper and all per-session state.

    Nothing here is shared between threads; every change happens inside
    ``process_key`` or one of the explicit commands (``open``, ``save``,
    ``resize``).
    """

    def __init__(
        self,
        buffer: Optional[Buffer] = None,
        *,
        settings: Optional[EditorSettings] = None,
        bus: Optional[EventBus] = None,
        file_name: Optional[str] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.settings = settings or EditorSettings()
        self.buffer = buffer or Buffer()
        self.mapper = CursorMapper(self.buffer)
        self.bus = bus or EventBus()
        self.file_name = file_name
        self.prompt: Optional[Prompt] = None
        self.quit_remaining = self.settings.quit_times
        self.quit_requested = False
        self.status_message = ""
        self._status_born = 0.0
        self._clock = clock
        self._extensions: List[Extension] = []
        self.host = ExtensionHost(self)
        self.resize(DEFAULT_COLUMNS, DEFAULT_ROWS)
        self.set_status("^Q to quit | ^S to save")

    @property
    def dirty(self) -> int:
        return self.buffer.dirty_count()

    def resize(self, columns: int, rows: int) -> None:
        """Adopt new terminal dimensions; the bars take ``status_bar_height`` rows."""

        self.mapper.resize(columns, rows - self.settings.status_bar_height)
        self.mapper.logical_to_screen()

    def set_status(self, message: str) -> None:
        self.status_message = message
        self._status_born = self._clock()
        self.bus.emit("status", message)

    def visible_status(self) -> str:
        if not self.status_message:
            return ""
        if self._clock() - self._status_born > self.settings.message_lifetime:
            return ""
        return self.status_message

    def register_extension(self, extension: Extension) -> None:
        self._extensions.append(extension)
        try:
            extension.on_start(self.host)
        except Exception as exc:
            self._extension_failed(extension, "on_start", exc)

    def process_key(self, key: KeyCode) -> Action:
        """Run one interaction cycle for ``key`` and return the action taken."""

        with telemetry.span(
            "session::cycle",
            component="session",
            metadata={"key": describe(key)},
        ) as handle:
            if self.prompt is not None:
                action: Action = NoOp()
                self._feed_prompt(key)
            else:
                action = resolve_action(key)
                self._dispatch(action)
            handle.add_metadata("action", type(action).__name__)
            self._notify_extensions(key)
            self.mapper.logical_to_screen()
        self.bus.emit("key.processed", {"key": key, "action": action})
        return action

    def _dispatch(self, action: Action) -> None:
        match action:
            case Quit():
                self._request_quit()
                return
            case Save():
                self.save()
            case Move(motion=motion):
                self.mapper.logical_to_screen()
                self.mapper.move(motion)
            case InsertChar(char=char):
                self.buffer.insert_char(char)
            case DeleteBackward():
                self.buffer.delete_char_before()
            case DeleteForward():
                self._delete_forward()
            case SplitLine():
                self.buffer.split_line_at_cursor()
            case Redraw() | NoOp():
                pass
            case _:
                raise TypeError(f"Unhandled action {action!r}")
        self.quit_remaining = self.settings.quit_times

    def _delete_forward(self) -> None:
        before = self.buffer.cursor
        self.mapper.logical_to_screen()
        self.mapper.move(Motion.RIGHT)
        if self.buffer.cursor != before:
            self.buffer.delete_char_before()

    def _request_quit(self) -> None:
        if self.dirty and self.quit_remaining > 0:
            self.set_status(
                "File has unsaved changes. "
                f"Press ^Q {self.quit_remaining} more times to quit."
            )
            telemetry.record_event(
                "session.quit_blocked",
                level="warning",
                data={"remaining": self.quit_remaining, "dirty": self.dirty},
            )
            self.quit_remaining -= 1
            return
        self.quit_requested = True
        telemetry.record_event("session.quit", data={"dirty": self.dirty})
        self.bus.emit("session.quit", {"dirty": self.dirty})

    def _feed_prompt(self, key: KeyCode) -> None:
        prompt = self.prompt
        assert prompt is not None
        result = prompt.feed(key)
        if result.status == "pending":
            self.set_status(prompt.message)
            return
        self.prompt = None
        if result.status == "cancel" or result.value is None:
            self.set_status("Save aborted")
            return
        self.file_name = resolve_save_path(result.value)
        self._write()

    def open(self, path: str | Path) -> bool:
        """Load ``path`` into the buffer; a missing file starts a new one."""

        resolved = resolve_save_path(str(path))
        try:
            lines = load_lines(resolved)
        except FileNotFoundError:
            self.file_name = resolved
            self.set_status(f"New file: {path}")
            telemetry.record_event("buffer.new_file", data={"path": resolved})
            return False
        except OSError as exc:
            self.set_status(f"open failed: {exc.strerror or exc}")
            telemetry.record_event(
                "buffer.open_failed", level="error", data={"path": resolved}
            )
            return False

        self.buffer.load(lines)
        self.file_name = resolved
        self.mapper.cursor.view_offset_y = 0
        self.mapper.logical_to_screen()
        self.bus.emit("buffer.opened", {"path": resolved, "lines": len(lines)})
        return True

    def save(self) -> bool:
        """Write the buffer to ``file_name``, prompting for one if unset."""

        if not self.file_name:
            self.prompt = Prompt("Save as: ", " (ESC to cancel)")
            self.set_status(self.prompt.message)
            return False
        return self._write()

    def _write(self) -> bool:
        assert self.file_name is not None
        try:
            written = save_text(self.file_name, self.buffer.dump())
        except OSError as exc:
            self.set_status(f"save failed: {exc.strerror or exc}")
            telemetry.record_event(
                "buffer.save_failed", level="error", data={"path": self.file_name}
            )
            return False
        self.buffer.mark_clean()
        self.set_status(f"{written} bytes written to disk")
        self.bus.emit("buffer.saved", {"path": self.file_name, "bytes": written})
        return True

    def _notify_extensions(self, key: KeyCode) -> None:
        for extension in list(self._extensions):
            try:
                extension.on_key(key, self.host)
            except Exception as exc:
                self._extension_failed(extension, "on_key", exc)

    def _extension_failed(
        self, extension: Extension, hook: str, exc: Exception
    ) -> None:
        telemetry.record_event(
            "extension.error",
            level="error",
            data={"extension": extension.name, "hook": hook, "error": repr(exc)},
        )


__all__ = ["EditorSession"]
