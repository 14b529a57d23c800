"""Cursor-aware markup insertion and live preview synchronization."""

__all__ = [
    "adapters",
    "buffer",
    "config",
    "errors",
    "markup",
    "preview",
    "runtime",
    "session",
    "toolbar",
]

__version__ = "0.1.0"
