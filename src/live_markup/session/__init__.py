"""Edit/persist/render coordination for a single document session."""

from .bus import (
    ACTION_UNKNOWN,
    CONTENT_CHANGED,
    EVENTS,
    EXPORT_ERROR,
    EXPORT_START,
    EXPORT_SUCCESS,
    PREVIEW_UPDATED,
    EventBus,
)
from .collaborators import Exporter, MemoryPersistence, Persistence, count_words
from .coordinator import ActionResult, ChangeCoordinator, PreviewUpdate, SessionState
from .timer import ResettableTimer

__all__ = [
    "ACTION_UNKNOWN",
    "CONTENT_CHANGED",
    "EVENTS",
    "EXPORT_ERROR",
    "EXPORT_START",
    "EXPORT_SUCCESS",
    "PREVIEW_UPDATED",
    "EventBus",
    "Exporter",
    "MemoryPersistence",
    "Persistence",
    "count_words",
    "ActionResult",
    "ChangeCoordinator",
    "PreviewUpdate",
    "SessionState",
    "ResettableTimer",
]
