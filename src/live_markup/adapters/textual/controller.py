"""Textual adapter that wires ChangeCoordinator events into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from live_markup.buffer import Location, location_for_offset, offset_for_location
from live_markup.session import (
    ACTION_UNKNOWN,
    CONTENT_CHANGED,
    EXPORT_ERROR,
    EXPORT_START,
    EXPORT_SUCCESS,
    PREVIEW_UPDATED,
    ActionResult,
    ChangeCoordinator,
    PreviewUpdate,
)


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_preview: Callable[[str], None]
    update_editor: Callable[[str, Location, Location], None] = _noop
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class TextualPreviewAdapter:
    """Bridges a ChangeCoordinator to a Textual-friendly surface.

    Textual reports positions as ``(row, column)`` locations; the coordinator
    works with flat offsets, so every crossing converts.
    """

    def __init__(self, coordinator: ChangeCoordinator, hooks: TextualUIHooks) -> None:
        self.coordinator = coordinator
        self.hooks = hooks
        self._subscribe_events()

    def start(self) -> None:
        """Load persisted content and push it into the editor and preview."""

        self.coordinator.load()
        self._refresh_editor()

    def handle_text_changed(
        self, text: str, selection: Optional[tuple[Location, Location]] = None
    ) -> bool:
        offsets = None
        if selection is not None:
            start, end = selection
            offsets = (offset_for_location(text, start), offset_for_location(text, end))
        accepted = self.coordinator.handle_input(text, selection=offsets)
        if accepted:
            self._log_state("input ->", length=len(text))
        return accepted

    def handle_selection_changed(self, start: Location, end: Location) -> None:
        text = self.coordinator.buffer.content
        self.coordinator.set_selection(
            offset_for_location(text, start), offset_for_location(text, end)
        )

    def handle_blur(self, text: str) -> None:
        self.coordinator.handle_blur(text)

    def handle_toolbar(self, tag: str) -> ActionResult:
        self._log_state("toolbar ->", tag=tag)
        return self._after_action(self.coordinator.dispatch_action(tag))

    def handle_shortcut(self, key: str, *, modifiers: Iterable[str] = ()) -> ActionResult:
        normalized = tuple(str(mod).lower() for mod in modifiers)
        self._log_state("shortcut ->", key=key, mods=normalized)
        return self._after_action(
            self.coordinator.handle_shortcut(key, normalized)
        )

    def process_timeouts(self) -> None:
        """Forward the debounce poll; the preview hook fires on render."""

        self.coordinator.process_timeouts()

    def _after_action(self, result: ActionResult) -> ActionResult:
        if result.status == "markup":
            self._refresh_editor()
        if result.message or result.status:
            self.hooks.update_status(result.message or result.status)
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
        )
        return result

    def _subscribe_events(self) -> None:
        bus = self.coordinator.bus
        bus.subscribe(PREVIEW_UPDATED, self._handle_preview)
        for event in (
            CONTENT_CHANGED,
            EXPORT_START,
            EXPORT_SUCCESS,
            EXPORT_ERROR,
            ACTION_UNKNOWN,
        ):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_preview(self, payload: object) -> None:
        if isinstance(payload, PreviewUpdate):
            self.hooks.update_preview(payload.payload)
            self._log_state("preview <-", ok=type(payload.result).__name__)

    def _handle_event(self, name: str, payload: object | None) -> None:
        if name != CONTENT_CHANGED:
            self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)
        if name == EXPORT_START:
            self.hooks.update_status("exporting...")
        elif name == EXPORT_SUCCESS:
            self.hooks.update_status("export complete")
        elif name == EXPORT_ERROR:
            self.hooks.update_status("export failed")
        elif name == ACTION_UNKNOWN:
            self.hooks.update_status(f"unknown action: {payload}")

    def _refresh_editor(self) -> None:
        buffer = self.coordinator.buffer
        self.hooks.update_editor(
            buffer.content,
            location_for_offset(buffer.content, buffer.selection_start),
            location_for_offset(buffer.content, buffer.selection_end),
        )

    def _log_state(self, prefix: str, **fields: object) -> None:
        try:
            snapshot = self._state_metadata()
            snapshot.update({k: v for k, v in fields.items() if v is not None})
            parts = [prefix]
            for key, value in snapshot.items():
                parts.append(f"{key}={value!r}")
            self.hooks.log(" ".join(parts))
        except Exception:
            pass

    def _state_metadata(self) -> Dict[str, object]:
        coordinator = self.coordinator
        return {
            "state": coordinator.state.value,
            "selection": coordinator.buffer.selection,
            "pending_render": coordinator.timer.pending,
            "renders": coordinator.render_count,
        }


__all__ = ["TextualPreviewAdapter", "TextualUIHooks"]
