"""Editor actions and the default key table."""

from .defaults import DEFAULT_BINDINGS, resolve_action
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

__all__ = [
    "Action",
    "DEFAULT_BINDINGS",
    "DeleteBackward",
    "DeleteForward",
    "InsertChar",
    "Move",
    "NoOp",
    "Quit",
    "Redraw",
    "Save",
    "SplitLine",
    "resolve_action",
]
