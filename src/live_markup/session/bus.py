"""Minimal event bus for the coordinator's exposed events."""

from __future__ import annotations

from typing import Callable, Dict

CONTENT_CHANGED = "content-changed"
PREVIEW_UPDATED = "preview-updated"
EXPORT_START = "export-start"
EXPORT_SUCCESS = "export-success"
EXPORT_ERROR = "export-error"
ACTION_UNKNOWN = "action-unknown"

EVENTS = (
    CONTENT_CHANGED,
    PREVIEW_UPDATED,
    EXPORT_START,
    EXPORT_SUCCESS,
    EXPORT_ERROR,
    ACTION_UNKNOWN,
)

Subscriber = Callable[[object], None]


class EventBus:
    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Subscriber]] = {}

    def subscribe(self, event: str, callback: Subscriber) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def unsubscribe(self, event: str, callback: Subscriber) -> None:
        callbacks = self._subscribers.get(event, [])
        if callback in callbacks:
            callbacks.remove(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in list(self._subscribers.get(event, [])):
            callback(payload)


__all__ = [
    "EventBus",
    "Subscriber",
    "EVENTS",
    "CONTENT_CHANGED",
    "PREVIEW_UPDATED",
    "EXPORT_START",
    "EXPORT_SUCCESS",
    "EXPORT_ERROR",
    "ACTION_UNKNOWN",
]
