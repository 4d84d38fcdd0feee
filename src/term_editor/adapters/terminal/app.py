"""Console entry point running the editor directly on the terminal."""

from __future__ import annotations

import argparse
import os
from typing import Optional, Sequence

from term_editor import __version__
from term_editor.config import ENV_PREFIX, EditorSettings
from term_editor.keys import KeyDecoder
from term_editor.render import ScreenPainter
from term_editor.runtime import telemetry
from term_editor.session import EditorSession

from .terminal import RawTerminal


def run(
    session: EditorSession,
    terminal: RawTerminal,
    *,
    painter: Optional[ScreenPainter] = None,
) -> None:
    """Draw, read one key, process it; repeat until the session quits."""

    painter = painter or ScreenPainter()
    decoder = KeyDecoder(terminal)
    while not session.quit_requested:
        session.resize(*terminal.size())
        terminal.write(painter.to_ansi(painter.compose(session)))
        terminal.flush()
        key = decoder.read_key()
        if key is None:
            continue
        session.process_key(key)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="term-editor", description="Edit a text file in the terminal."
    )
    parser.add_argument("path", nargs="?", help="File to open (created on save)")
    parser.add_argument(
        "--log-file",
        default=os.environ.get(f"{ENV_PREFIX}LOG_FILE"),
        help="Write logs to this file (default: $TERM_EDITOR_LOG_FILE)",
    )
    parser.add_argument(
        "--log-preset",
        choices=("development", "production", "performance"),
        help="Use a named logging preset",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    if args.log_file:
        os.environ[f"{ENV_PREFIX}LOG_FILE"] = args.log_file
    telemetry.configure(preset=args.log_preset)

    session = EditorSession(settings=EditorSettings.from_env())
    if args.path:
        session.open(args.path)

    with RawTerminal() as terminal:
        run(session, terminal)
    return 0


if __name__ == "__main__":  # pragma: no cover - manual run
    raise SystemExit(main())
