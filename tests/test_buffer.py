from __future__ import annotations

from pathlib import Path

import pytest

from term_editor.buffer import (
    Buffer,
    BufferDocument,
    EmptyBufferError,
    clamp_cursor,
    load_lines,
    resolve_save_path,
    save_text,
)


def make_buffer(*lines: str) -> Buffer:
    return Buffer.from_lines(lines)


def test_typing_into_empty_buffer_creates_first_line() -> None:
    buffer = Buffer()

    buffer.insert_char("x")

    assert buffer.document.snapshot() == ("x",)
    assert buffer.cursor == (0, 1)


def test_backspace_at_line_start_joins_lines() -> None:
    buffer = make_buffer("ab", "cd")
    buffer.set_cursor(1, 0)

    buffer.delete_char_before()

    assert buffer.document.snapshot() == ("abcd",)
    assert buffer.cursor == (0, 2)


def test_backspace_at_origin_and_past_end_is_noop() -> None:
    buffer = make_buffer("ab")

    buffer.delete_char_before(cursor=(0, 0))
    assert buffer.document.snapshot() == ("ab",)

    buffer.delete_char_before(cursor=(1, 0))
    assert buffer.document.snapshot() == ("ab",)
    assert buffer.cursor == (1, 0)


def test_backspace_removes_previous_character() -> None:
    buffer = make_buffer("abc")

    buffer.delete_char_before(cursor=(0, 2))

    assert buffer.document.snapshot() == ("ac",)
    assert buffer.cursor == (0, 1)


def test_enter_splits_line_at_cursor() -> None:
    buffer = make_buffer("hello")
    buffer.set_cursor(0, 2)

    buffer.split_line_at_cursor()

    assert buffer.document.snapshot() == ("he", "llo")
    assert buffer.cursor == (1, 0)


def test_enter_at_line_start_inserts_blank_line_above() -> None:
    buffer = make_buffer("hello")

    buffer.split_line_at_cursor()

    assert buffer.document.snapshot() == ("", "hello")
    assert buffer.cursor == (1, 0)


def test_typing_past_last_line_appends_a_line() -> None:
    buffer = make_buffer("a")
    buffer.set_cursor(1, 0)

    buffer.insert_char("b")

    assert buffer.document.snapshot() == ("a", "b")
    assert buffer.cursor == (1, 1)


def test_cursor_is_clamped_to_valid_positions() -> None:
    buffer = make_buffer("abc", "de")

    assert buffer.set_cursor(0, 99) == (0, 3)
    assert buffer.set_cursor(-4, -4) == (0, 0)
    assert buffer.set_cursor(7, 3) == (2, 0)
    assert Buffer().set_cursor(3, 3) == (0, 0)


def test_clamp_cursor_allows_line_after_last() -> None:
    document = BufferDocument.from_lines(["abc"])

    assert clamp_cursor(document, 1, 5) == (1, 0)
    assert clamp_cursor(document, 0, 5) == (0, 3)


def test_line_operations_clamp_indices() -> None:
    buffer = make_buffer("a", "b")

    buffer.insert_line(99, "z")
    buffer.insert_line(-3, "first")
    buffer.delete_line(50)

    assert buffer.document.snapshot() == ("first", "a", "b")


def test_dereferencing_a_line_of_empty_buffer_raises() -> None:
    buffer = Buffer()

    with pytest.raises(EmptyBufferError):
        buffer.line_at(0)

    assert isinstance(EmptyBufferError(), IndexError)
    buffer.delete_line(0)
    assert buffer.line_count == 0


def test_dirty_counts_mutations_and_resets_on_clean() -> None:
    buffer = make_buffer("abc")
    assert buffer.dirty_count() == 0

    buffer.insert_char("x")
    buffer.split_line_at_cursor()
    assert buffer.dirty_count() > 0

    buffer.mark_clean()
    assert buffer.dirty_count() == 0


def test_dump_terminates_every_line() -> None:
    buffer = make_buffer("one", "", "three")

    assert buffer.dump() == "one\n\nthree\n"
    assert buffer.text() == "one\n\nthree"
    assert Buffer().dump() == ""


def test_insert_text_appends_and_splits_on_newlines() -> None:
    buffer = make_buffer("start")
    buffer.set_cursor(0, 0)

    buffer.insert_text(" end\r\nnext")

    assert buffer.document.snapshot() == ("start end", "next")
    assert buffer.cursor == (1, 4)


def test_mirror_reports_state() -> None:
    buffer = make_buffer("ab")
    buffer.insert_char("c")

    mirror = buffer.mirror(file_name="notes.txt", attributes={"origin": "test"})

    assert mirror.text == "cab"
    assert mirror.cursor == (0, 1)
    assert mirror.line_count == 1
    assert mirror.dirty > 0
    assert mirror.file_name == "notes.txt"
    assert mirror.attributes == {"origin": "test"}


def test_load_strips_carriage_returns_and_final_newline(tmp_path: Path) -> None:
    target = tmp_path / "crlf.txt"
    target.write_bytes(b"alpha\r\nbeta\r\n\r\ngamma")

    assert load_lines(target) == ["alpha", "beta", "", "gamma"]


def test_save_then_load_reproduces_lines(tmp_path: Path) -> None:
    buffer = make_buffer("tab\there", "", "last")
    target = tmp_path / "out.txt"

    written = save_text(target, buffer.dump())

    assert written == len(buffer.dump().encode("utf-8"))
    assert load_lines(target) == ["tab\there", "", "last"]


def test_load_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_lines(tmp_path / "absent.txt")


def test_resolve_save_path_is_absolute(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    resolved = resolve_save_path("sub/../file.txt")

    assert Path(resolved).is_absolute()
    assert Path(resolved) == (tmp_path / "file.txt").resolve()
