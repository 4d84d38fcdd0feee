"""Textual adapter that feeds key names into an EditorSession and pushes frames back."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, Optional

from term_editor.actions import Action
from term_editor.keys import ENTER, TAB, Key, KeyCode, ctrl
from term_editor.render import ScreenFrame, ScreenPainter
from term_editor.session import EditorSession


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


TEXTUAL_KEYS: Mapping[str, KeyCode] = MappingProxyType(
    {
        "up": Key.ARROW_UP,
        "down": Key.ARROW_DOWN,
        "left": Key.ARROW_LEFT,
        "right": Key.ARROW_RIGHT,
        "home": Key.HOME,
        "end": Key.END,
        "pageup": Key.PAGE_UP,
        "pagedown": Key.PAGE_DOWN,
        "delete": Key.DELETE,
        "backspace": Key.BACKSPACE,
        "escape": Key.ESCAPE,
        "enter": ENTER,
        "tab": TAB,
    }
)


def translate_key(key: str, character: Optional[str] = None) -> List[KeyCode]:
    """Map a Textual key name (plus its character) onto editor key codes.

    A non-ASCII character becomes its UTF-8 bytes, the same input a raw
    terminal delivers. Unknown keys map to an empty list.
    """

    if key in TEXTUAL_KEYS:
        return [TEXTUAL_KEYS[key]]
    if key.startswith("ctrl+") and len(key) == 6 and key[-1].isalpha():
        return [ctrl(key[-1])]
    if character and len(character) == 1 and character.isprintable():
        return list(character.encode("utf-8"))
    return []


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_frame: Callable[[ScreenFrame], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    request_exit: Callable[[], None] = _noop
    # Optional realtime log callback a host may use to surface debug lines
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Bridges EditorSession + bus events to a Textual-friendly surface."""

    def __init__(
        self,
        session: EditorSession,
        hooks: TextualUIHooks,
        *,
        painter: Optional[ScreenPainter] = None,
    ) -> None:
        self.session = session
        self.hooks = hooks
        self.painter = painter or ScreenPainter()
        self._subscribe_events()
        self.refresh()

    def resize(self, columns: int, rows: int) -> None:
        self.session.resize(columns, rows)
        self.refresh()

    def handle_textual_key(
        self, key: str, *, character: Optional[str] = None
    ) -> Optional[Action]:
        """Translate a Textual key event and run a session cycle per key code."""

        codes = translate_key(key, character)
        if not codes:
            self._log_state("key ignored", key=key, character=character)
            return None
        self._log_state("key ->", key=key, codes=codes)
        for code in codes:
            action = self.session.process_key(code)
        self.refresh()
        self._log_state("action <-", action=type(action).__name__)
        if self.session.quit_requested:
            self.hooks.request_exit()
        return action

    def refresh(self) -> None:
        self.hooks.update_frame(self.painter.compose(self.session))

    def _subscribe_events(self) -> None:
        bus = self.session.bus
        for event in ("status", "buffer.opened", "buffer.saved", "session.quit"):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)
        if name == "status" and isinstance(payload, str):
            self.hooks.update_status(payload)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        session = self.session
        return {
            "cursor": session.buffer.cursor,
            "screen": (session.mapper.cursor.column, session.mapper.cursor.row),
            "dirty": session.dirty,
            "prompt": session.prompt is not None,
        }


__all__ = ["TEXTUAL_KEYS", "TextualEditorAdapter", "TextualUIHooks", "translate_key"]
