from __future__ import annotations

from term_editor import __version__
from term_editor.buffer import Buffer
from term_editor.keys import Key
from term_editor.render import ScreenPainter
from term_editor.render.ansi import INVERT_COLOUR, SHOW_CURSOR, place_cursor
from term_editor.session import EditorSession


def make_session(columns: int, rows: int, *lines: str) -> EditorSession:
    session = EditorSession(Buffer.from_lines(lines))
    session.resize(columns, rows)
    return session


def test_empty_buffer_shows_welcome_banner_and_tildes() -> None:
    session = make_session(80, 12)

    frame = ScreenPainter().compose(session)

    assert len(frame.rows) == 10
    banner = frame.rows[3]
    assert banner.startswith("~ ")
    assert banner.endswith(f"Term editor -- version {__version__}")
    assert all(row == "~" for i, row in enumerate(frame.rows) if i != 3)


def test_wrapped_line_is_drawn_row_by_row() -> None:
    session = make_session(10, 7, "a" * 15)

    frame = ScreenPainter().compose(session)

    assert frame.rows == ["a" * 10, "a" * 5, "~", "~", "~"]
    assert frame.cursor == (0, 0)


def test_tabs_are_drawn_expanded() -> None:
    session = make_session(20, 4, "\tx")

    frame = ScreenPainter().compose(session)

    assert frame.rows[0] == " " * 8 + "x"


def test_rows_follow_vertical_scroll() -> None:
    session = make_session(10, 5, *[f"l{n}" for n in range(6)])

    for _ in range(4):
        session.process_key(Key.ARROW_DOWN)
    frame = ScreenPainter().compose(session)

    assert frame.rows == ["l2", "l3", "l4"]
    assert frame.cursor == (0, 2)


def test_status_bar_shows_name_count_and_position() -> None:
    session = make_session(40, 6, "one", "two")
    session.file_name = "notes.txt"
    session.process_key(Key.ARROW_DOWN)

    clean = ScreenPainter.status_bar(session, 40)
    assert clean.startswith("notes.txt - 2 lines")
    assert clean.endswith("2/2")
    assert len(clean) == 40

    session.process_key(ord("!"))
    assert "[ modified ]" in ScreenPainter.status_bar(session, 40)


def test_status_bar_without_name() -> None:
    session = make_session(30, 6)

    assert ScreenPainter.status_bar(session, 30).startswith("[ no name ] - 0 lines")


def test_message_bar_is_cut_to_width() -> None:
    session = make_session(8, 6)

    frame = ScreenPainter().compose(session)

    assert frame.message_bar == "^Q to qu"


def test_ansi_output_ends_with_cursor_placement() -> None:
    session = make_session(10, 7, "abc")
    session.process_key(Key.END)
    painter = ScreenPainter()

    output = painter.to_ansi(painter.compose(session))

    assert INVERT_COLOUR in output
    assert output.endswith(place_cursor(3, 0) + SHOW_CURSOR)
    assert output.count("\r\n") == 6
