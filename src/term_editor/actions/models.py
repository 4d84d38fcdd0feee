"""Closed set of editor actions produced from decoded keys."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from term_editor.layout import Motion


@dataclass(frozen=True, slots=True)
class Move:
    motion: Motion


@dataclass(frozen=True, slots=True)
class InsertChar:
    char: str


@dataclass(frozen=True, slots=True)
class DeleteBackward:
    pass


@dataclass(frozen=True, slots=True)
class DeleteForward:
    pass


@dataclass(frozen=True, slots=True)
class SplitLine:
    pass


@dataclass(frozen=True, slots=True)
class Save:
    pass


@dataclass(frozen=True, slots=True)
class Quit:
    pass


@dataclass(frozen=True, slots=True)
class Redraw:
    pass


@dataclass(frozen=True, slots=True)
class NoOp:
    pass


Action = Union[
    Move,
    InsertChar,
    DeleteBackward,
    DeleteForward,
    SplitLine,
    Save,
    Quit,
    Redraw,
    NoOp,
]

__all__ = [
    "Action",
    "DeleteBackward",
    "DeleteForward",
    "InsertChar",
    "Move",
    "NoOp",
    "Quit",
    "Redraw",
    "Save",
    "SplitLine",
]
