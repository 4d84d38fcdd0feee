"""Executable Textual app that hosts the editor session."""

from __future__ import annotations

import argparse
import os
from typing import Any, Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.widgets import Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use term_editor.adapters.textual.app"
    ) from exc

from term_editor.config import ENV_PREFIX, EditorSettings
from term_editor.render import ScreenFrame
from term_editor.runtime import telemetry
from term_editor.session import EditorSession

from .controller import TextualEditorAdapter, TextualUIHooks


def displayable(chunk: str) -> str:
    """Decode escaped bytes back to characters; stray pieces become U+FFFD."""

    return chunk.encode("utf-8", errors="surrogateescape").decode(
        "utf-8", errors="replace"
    )


def frame_text(frame: ScreenFrame) -> Text:
    """Render the text rows with the cursor cell shown in reverse video."""

    column, cursor_row = frame.cursor
    text = Text(no_wrap=True, overflow="crop")
    for index, row in enumerate(frame.rows):
        if index:
            text.append("\n")
        if index != cursor_row:
            text.append(displayable(row))
            continue
        text.append(displayable(row[:column]))
        text.append(displayable(row[column : column + 1]) or " ", style="reverse")
        text.append(displayable(row[column + 1 :]))
    return text


class TextualEditorApp(App[None]):
    """Textual UI embedding one editor session."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		content-align: left top;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
	}

	#message-line {
		height: 1;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        Binding("ctrl+q", "editor_key('ctrl+q')", "Quit", priority=True),
        Binding("ctrl+s", "editor_key('ctrl+s')", "Save", priority=True),
    ]

    def __init__(self, path: Optional[str] = None) -> None:
        super().__init__()
        self._path = path
        self.session: EditorSession | None = None
        self.adapter: TextualEditorAdapter | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None
        self._message_widget: Static | None = None
        self._logger = telemetry.get_logger("term_editor.textual")

    def compose(self) -> ComposeResult:
        self._buffer_widget = Static("", id="buffer-view")
        self._status_widget = Static("", id="status-line")
        self._message_widget = Static("", id="message-line")
        yield self._buffer_widget
        yield self._status_widget
        yield self._message_widget

    def on_mount(self) -> None:
        self.session = EditorSession(settings=EditorSettings.from_env())
        if self._path:
            self.session.open(self._path)
        hooks = TextualUIHooks(
            update_frame=self._update_frame,
            handle_event=self._handle_event,
            request_exit=self.exit,
            log=self._log_line,
        )
        self.adapter = TextualEditorAdapter(self.session, hooks)
        self.call_after_refresh(self._sync_size)

    def on_resize(self, event: events.Resize) -> None:
        self._sync_size()

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        if self.adapter.handle_textual_key(event.key, character=event.character):
            event.stop()
            event.prevent_default()

    def action_editor_key(self, key: str) -> None:
        if self.adapter:
            self.adapter.handle_textual_key(key)

    def _sync_size(self) -> None:
        if self.adapter:
            self.adapter.resize(self.size.width, self.size.height)

    def _update_frame(self, frame: ScreenFrame) -> None:
        if self._buffer_widget:
            self._buffer_widget.update(frame_text(frame))
        if self._status_widget:
            status = displayable(frame.status_bar)
            self._status_widget.update(Text(status, style="reverse"))
        if self._message_widget:
            self._message_widget.update(Text(displayable(frame.message_bar)))

    def _handle_event(self, name: str, payload: Any | None) -> None:
        if name == "buffer.saved" and isinstance(payload, dict):
            self.sub_title = str(payload.get("path", ""))

    def _log_line(self, line: str) -> None:
        self._logger.debug(line)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the editor inside Textual.")
    parser.add_argument("path", nargs="?", help="File to open (created on save)")
    parser.add_argument(
        "--log-file",
        default=os.environ.get(f"{ENV_PREFIX}LOG_FILE"),
        help="Write logs to this file (default: $TERM_EDITOR_LOG_FILE)",
    )
    parser.add_argument(
        "--log-preset",
        choices=("development", "production", "performance"),
        help="Use a named logging preset",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.log_file:
        os.environ[f"{ENV_PREFIX}LOG_FILE"] = args.log_file
    telemetry.configure(preset=args.log_preset)
    TextualEditorApp(args.path).run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
