"""Terminal text editor core with pluggable hosts."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "config",
    "keys",
    "layout",
    "render",
    "runtime",
    "session",
]

__version__ = "0.1.0"
