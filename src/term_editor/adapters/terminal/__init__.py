"""Raw terminal host for the editor."""

from .terminal import FALLBACK_SIZE, RawTerminal

__all__ = ["FALLBACK_SIZE", "RawTerminal"]
