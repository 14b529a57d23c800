"""Toolbar tags and keyboard shortcuts."""

from .actions import (
    EXPORT_COMMAND,
    SAVE_COMMAND,
    TOOLBAR_ACTIONS,
    TOOLBAR_TAGS,
    ToolbarAction,
    resolve_action,
)
from .shortcuts import DEFAULT_SHORTCUTS, Shortcut, resolve_shortcut

__all__ = [
    "EXPORT_COMMAND",
    "SAVE_COMMAND",
    "TOOLBAR_ACTIONS",
    "TOOLBAR_TAGS",
    "ToolbarAction",
    "resolve_action",
    "DEFAULT_SHORTCUTS",
    "Shortcut",
    "resolve_shortcut",
]
