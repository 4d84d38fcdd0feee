"""ANSI control sequences used when drawing to a raw terminal."""

ENTER_ALT_BUFFER = "\x1b[?1049h"
LEAVE_ALT_BUFFER = "\x1b[?1049l"
CLEAR_SCREEN = "\x1b[2J"
RESET_CURSOR = "\x1b[H"
WIPE_SCROLLBACK = "\x1b[3J"
INVERT_COLOUR = "\x1b[7m"
NORMAL_COLOUR = "\x1b[m"
CLEAR_LINE = "\x1b[K"
HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"


def place_cursor(column: int, row: int) -> str:
    """Move to zero-based ``(column, row)``; terminals count from 1."""

    return f"\x1b[{row + 1};{column + 1}H"
