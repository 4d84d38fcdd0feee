"""Reading and writing buffers to the filesystem."""

from __future__ import annotations

from pathlib import Path
from typing import List

from term_editor.runtime import telemetry


def load_lines(path: str | Path) -> List[str]:
    """Read ``path`` as raw lines.

    Lines are split on ``\\n`` and a trailing ``\\r`` is dropped from each, so
    a final newline does not produce an extra empty line. Raises
    ``FileNotFoundError`` or ``OSError``.
    """

    target = Path(path)
    with telemetry.span("persistence::load", metadata={"path": str(target)}):
        raw = target.read_bytes().decode("utf-8", errors="surrogateescape")
    lines = raw.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def save_text(path: str | Path, dump: str) -> int:
    """Write ``dump`` to ``path``, truncating it; return the bytes written."""

    target = Path(path)
    data = dump.encode("utf-8", errors="surrogateescape")
    with telemetry.span("persistence::save", metadata={"path": str(target)}) as handle:
        target.write_bytes(data)
        handle.add_metadata("bytes", len(data))
    return len(data)


def resolve_save_path(name: str) -> str:
    return str(Path(name).expanduser().absolute().resolve(strict=False))


__all__ = ["load_lines", "resolve_save_path", "save_text"]
