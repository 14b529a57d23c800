"""Exception hierarchy shared across the editor core."""

from __future__ import annotations

from typing import Optional


class LiveMarkupError(RuntimeError):
    """Base class for every error raised by live_markup."""


class ParseError(LiveMarkupError):
    """Raised by a transform that rejects malformed or unsupported input."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ExportError(LiveMarkupError):
    """Raised when exporting the rendered preview fails."""

    def __init__(self, message: str, *, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class UnknownActionError(LiveMarkupError):
    """Raised when a toolbar or shortcut tag is not part of the closed set."""

    def __init__(self, tag: str) -> None:
        super().__init__(f"Unknown toolbar action: {tag}")
        self.tag = tag


class BufferValidationError(LiveMarkupError):
    """Raised when adapters provide an out-of-bounds offset or location."""

    def __init__(self, message: str, *, offset: int | None = None) -> None:
        super().__init__(message)
        self.offset = offset


__all__ = [
    "LiveMarkupError",
    "ParseError",
    "ExportError",
    "UnknownActionError",
    "BufferValidationError",
]
