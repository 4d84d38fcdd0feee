"""Environment-driven editor settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

ENV_PREFIX = "TERM_EDITOR_"


def env_value(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def env_flag(name: str, default: bool) -> bool:
    raw = env_value(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, fallback: int) -> int:
    raw = env_value(name)
    if raw is None:
        return fallback
    try:
        return int(raw)
    except ValueError:
        return fallback


def _env_float(name: str, fallback: float) -> float:
    raw = env_value(name)
    if raw is None:
        return fallback
    try:
        return float(raw)
    except ValueError:
        return fallback


@dataclass(frozen=True, slots=True)
class EditorSettings:
    """Tunables shared by the session and the painters."""

    quit_times: int = 3
    status_bar_height: int = 2
    message_lifetime: float = 5.0
    welcome_text: str = ""

    def __post_init__(self) -> None:
        if not self.welcome_text:
            from term_editor import __version__

            object.__setattr__(
                self, "welcome_text", f"Term editor -- version {__version__}"
            )

    @classmethod
    def from_env(cls) -> "EditorSettings":
        return cls(
            quit_times=max(0, _env_int("QUIT_TIMES", 3)),
            message_lifetime=max(0.0, _env_float("MESSAGE_LIFETIME", 5.0)),
        )


__all__ = ["ENV_PREFIX", "EditorSettings", "env_flag", "env_value"]
