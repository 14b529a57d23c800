"""Render cycle and diagnostics."""

from .debug import DebugEntry, DebugRecorder
from .renderer import (
    Failed,
    PreviewRenderer,
    Rendered,
    RenderResult,
    display_payload,
    error_block,
    normalize_input,
)

__all__ = [
    "DebugEntry",
    "DebugRecorder",
    "Failed",
    "PreviewRenderer",
    "Rendered",
    "RenderResult",
    "display_payload",
    "error_block",
    "normalize_input",
]
