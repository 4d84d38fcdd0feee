"""Editor session, prompt, event bus, and extension hooks."""

from .bus import EventBus
from .editor import EditorSession
from .extensions import Extension, ExtensionHost
from .prompt import Prompt, PromptResult

__all__ = [
    "EditorSession",
    "EventBus",
    "Extension",
    "ExtensionHost",
    "Prompt",
    "PromptResult",
]
