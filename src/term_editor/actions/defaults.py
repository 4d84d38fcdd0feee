"""Built-in key bindings."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from term_editor.keys import (
    ENTER,
    TAB,
    Key,
    KeyCode,
    byte_char,
    ctrl,
    is_high_byte,
    is_printable,
)
from term_editor.layout import Motion

from .models import (
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
)

DEFAULT_BINDINGS: Mapping[int, Action] = MappingProxyType(
    {
        ctrl("q"): Quit(),
        ctrl("s"): Save(),
        ctrl("l"): Redraw(),
        Key.ESCAPE: NoOp(),
        Key.BACKSPACE: DeleteBackward(),
        ctrl("h"): DeleteBackward(),
        Key.DELETE: DeleteForward(),
        ENTER: SplitLine(),
        Key.ARROW_LEFT: Move(Motion.LEFT),
        Key.ARROW_RIGHT: Move(Motion.RIGHT),
        Key.ARROW_UP: Move(Motion.UP),
        Key.ARROW_DOWN: Move(Motion.DOWN),
        Key.HOME: Move(Motion.HOME),
        Key.END: Move(Motion.END),
        Key.PAGE_UP: Move(Motion.PAGE_UP),
        Key.PAGE_DOWN: Move(Motion.PAGE_DOWN),
    }
)


def resolve_action(
    key: KeyCode, bindings: Mapping[int, Action] = DEFAULT_BINDINGS
) -> Action:
    """Map a decoded key to its action; unbound printable keys insert text.

    Bytes 128-255 are inserted in their ``surrogateescape`` form, the same
    form loaded files use.
    """

    bound = bindings.get(int(key))
    if bound is not None:
        return bound
    if key == TAB or is_printable(key):
        return InsertChar(chr(key))
    if is_high_byte(key):
        return InsertChar(byte_char(key))
    return NoOp()


__all__ = ["DEFAULT_BINDINGS", "resolve_action"]
