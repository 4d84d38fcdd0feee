"""Single-line input prompt shown in the message bar."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal, Optional

from term_editor.keys import ENTER, Key, KeyCode, ctrl

PromptStatus = Literal["pending", "submit", "cancel"]


@dataclass(slots=True)
class PromptResult:
    status: PromptStatus
    value: Optional[str] = None


class Prompt:
    """Collects typed characters until Enter (non-empty input) or Escape."""

    def __init__(self, label: str, suffix: str = "") -> None:
        self.label = label
        self.suffix = suffix
        self._typed: List[str] = []

    @property
    def text(self) -> str:
        return "".join(self._typed)

    @property
    def message(self) -> str:
        return f"{self.label}{self.text}{self.suffix}"

    def feed(self, key: KeyCode) -> PromptResult:
        if key in (Key.BACKSPACE, Key.DELETE, ctrl("h")):
            if self._typed:
                self._typed.pop()
            return PromptResult(status="pending")
        if key == ENTER:
            if self._typed:
                return PromptResult(status="submit", value=self.text)
            return PromptResult(status="pending")
        if key == Key.ESCAPE:
            return PromptResult(status="cancel")
        if not isinstance(key, Key) and 32 <= key < 127:
            self._typed.append(chr(key))
        return PromptResult(status="pending")


__all__ = ["Prompt", "PromptResult"]
