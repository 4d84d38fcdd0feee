"""Textual host; ``app`` needs the ``textual`` package, ``controller`` does not."""

from .controller import (
    TEXTUAL_KEYS,
    TextualEditorAdapter,
    TextualUIHooks,
    translate_key,
)

__all__ = ["TEXTUAL_KEYS", "TextualEditorAdapter", "TextualUIHooks", "translate_key"]
