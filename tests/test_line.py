from __future__ import annotations

from term_editor.buffer import TAB_WIDTH, Line, expand_tabs


def test_expand_tabs_pads_to_next_stop() -> None:
    assert TAB_WIDTH == 8
    assert expand_tabs("\t") == " " * 8
    assert expand_tabs("ab\tc") == "ab" + " " * 6 + "c"
    assert expand_tabs("12345678\tx") == "12345678" + " " * 8 + "x"
    assert expand_tabs("plain") == "plain"


def test_render_is_recomputed_after_every_mutation() -> None:
    line = Line("ab")

    line.insert_char(1, "\t")
    assert line.chars == "a\tb"
    assert line.render == "a" + " " * 7 + "b"

    line.delete_char(1)
    assert line.render == "ab"

    line.append("\t")
    assert line.render_length == 8

    tail = line.truncate(1)
    assert tail == "b\t"
    assert line.render == "a"


def test_out_of_range_edits_saturate() -> None:
    line = Line("abc")

    line.insert_char(99, "d")
    assert line.chars == "abcd"

    line.insert_char(-5, "z")
    assert line.chars == "abcdz"

    line.delete_char(10)
    line.delete_char(-1)
    assert line.chars == "abcdz"


def test_every_mutation_bumps_dirty() -> None:
    line = Line("x")
    assert line.dirty == 0

    line.insert_char(0, "y")
    line.append("z")
    line.truncate(1)

    assert line.dirty == 3


def test_render_offset_and_char_index_are_tab_aware() -> None:
    line = Line("a\tbc")

    assert [line.render_offset(i) for i in range(5)] == [0, 1, 8, 9, 10]
    # Every column covered by the tab maps back to the tab itself.
    assert {line.char_index_at(column) for column in range(1, 8)} == {1}
    assert line.char_index_at(8) == 2
    assert line.char_index_at(50) == line.size
