"""Frame composition and ANSI output."""

from .painter import ScreenFrame, ScreenPainter

__all__ = ["ScreenFrame", "ScreenPainter"]
