from __future__ import annotations

import random

import pytest

from term_editor.buffer import Buffer
from term_editor.keys import ENTER, TAB, Key, KeyCode
from term_editor.session import EditorSession

EDIT_KEYS: list[KeyCode] = [
    *(ord(ch) for ch in "ab z"),
    TAB,
    0xC3,
    ENTER,
    Key.BACKSPACE,
    Key.DELETE,
]
MOTION_KEYS: list[KeyCode] = [
    Key.ARROW_LEFT,
    Key.ARROW_RIGHT,
    Key.ARROW_UP,
    Key.ARROW_DOWN,
    Key.HOME,
    Key.END,
    Key.PAGE_UP,
    Key.PAGE_DOWN,
]


def assert_logical_cursor_valid(buffer: Buffer) -> None:
    line_index, char_index = buffer.cursor
    assert 0 <= line_index <= buffer.line_count
    if line_index == buffer.line_count:
        assert char_index == 0
    else:
        assert 0 <= char_index <= buffer.line_at(line_index).size


def assert_screen_cursor_valid(session: EditorSession) -> None:
    mapper = session.mapper
    index = mapper.index
    if index.is_empty():
        return
    cursor = mapper.cursor
    absolute = cursor.row + cursor.view_offset_y
    assert 0 <= absolute < index.row_count()
    assert 0 <= cursor.row < max(1, mapper.height)
    assert 0 <= cursor.column <= index.width_of(absolute)


@pytest.mark.parametrize("seed", range(20))
def test_buffer_edits_keep_cursor_clamped(seed: int) -> None:
    rng = random.Random(seed)
    buffer = Buffer.from_lines(["seed", "", "\tline"])

    for _ in range(300):
        choice = rng.random()
        if choice < 0.45:
            buffer.insert_char(rng.choice("xy\t "))
        elif choice < 0.7:
            buffer.delete_char_before()
        elif choice < 0.85:
            buffer.split_line_at_cursor()
        else:
            buffer.set_cursor(rng.randint(-3, 12), rng.randint(-3, 30))
        assert_logical_cursor_valid(buffer)


@pytest.mark.parametrize("seed", range(20))
def test_session_keys_and_resizes_keep_both_cursors_valid(seed: int) -> None:
    rng = random.Random(seed)
    session = EditorSession(Buffer.from_lines(["first line", "\tsecond", ""]))

    for _ in range(300):
        if rng.random() < 0.05:
            session.resize(rng.randint(1, 24), rng.randint(3, 9))
        elif rng.random() < 0.5:
            session.process_key(rng.choice(EDIT_KEYS))
        else:
            session.process_key(rng.choice(MOTION_KEYS))
        assert_logical_cursor_valid(session.buffer)
        assert_screen_cursor_valid(session)
