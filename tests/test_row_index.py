from __future__ import annotations

import pytest

from term_editor.buffer import Buffer
from term_editor.layout import RowEntry, RowIndex


def make_index(width: int, *lines: str) -> tuple[RowIndex, Buffer]:
    buffer = Buffer.from_lines(lines)
    index = RowIndex()
    index.rebuild(buffer, width)
    return index, buffer


def spans(index: RowIndex) -> list[tuple[int, int, int]]:
    return [(e.line_index, e.offset, e.width) for e in index.entries]


def test_exact_multiple_gets_trailing_empty_row() -> None:
    index, _ = make_index(10, "a" * 20)

    assert spans(index) == [(0, 0, 10), (0, 10, 10), (0, 20, 0)]


def test_short_and_empty_lines_take_one_row_each() -> None:
    index, _ = make_index(10, "abc", "", "x" * 13)

    assert spans(index) == [(0, 0, 3), (1, 0, 0), (2, 0, 10), (2, 10, 3)]
    assert index.rows_for_line(2) == [2, 3]
    assert index.is_last_row_of_line(0)
    assert not index.is_last_row_of_line(2)
    assert index.is_last_row_of_line(3)


def test_tabs_are_wrapped_by_render_length() -> None:
    index, _ = make_index(8, "\t", "a\tb")

    assert spans(index) == [(0, 0, 8), (0, 8, 0), (1, 0, 8), (1, 8, 1)]


def test_empty_buffer_or_zero_width_yields_no_rows() -> None:
    index, _ = make_index(10)
    assert index.is_empty()
    assert index.row_count() == 0

    index, _ = make_index(0, "abc")
    assert len(index) == 0
    with pytest.raises(IndexError):
        index.entry(0)


def test_rebuild_is_idempotent() -> None:
    index, buffer = make_index(4, "abcdefghij", "", "xy")
    first = spans(index)

    index.rebuild(buffer, 4)

    assert spans(index) == first


def test_entry_lookup_saturates() -> None:
    index, _ = make_index(5, "abcdefg")

    assert index.entry(-3) == RowEntry(0, 0, 5)
    assert index.entry(99) == RowEntry(0, 5, 2)
    assert index.entry(1).end == 7


def test_width_of_tracks_edits_made_after_rebuild() -> None:
    index, buffer = make_index(4, "abcdef")

    buffer.line_at(0).delete_char(5)

    assert index.cached_width(1) == 2
    assert index.width_of(1) == 1
    assert index.width_of(7) == 0
    assert index.cached_width(-1) == 0
