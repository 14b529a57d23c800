"""Sequences edits, persistence, and preview renders for one document."""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Mapping, Optional, Set

from live_markup.buffer import TextBuffer
from live_markup.config import DEFAULT_DEBOUNCE_MS
from live_markup.errors import ExportError, UnknownActionError
from live_markup.markup import CaretPolicy, InsertionResult, MarkupInserter, MarkupRule
from live_markup.preview import (
    DebugRecorder,
    PreviewRenderer,
    Rendered,
    RenderResult,
    display_payload,
    normalize_input,
)
from live_markup.preview.renderer import Sanitize, Transform
from live_markup.runtime import telemetry
from live_markup.toolbar import (
    DEFAULT_SHORTCUTS,
    EXPORT_COMMAND,
    SAVE_COMMAND,
    ToolbarAction,
    resolve_action,
    resolve_shortcut,
)

from .bus import (
    ACTION_UNKNOWN,
    CONTENT_CHANGED,
    EXPORT_ERROR,
    EXPORT_START,
    EXPORT_SUCCESS,
    PREVIEW_UPDATED,
    EventBus,
)
from .collaborators import Exporter, Persistence
from .timer import Clock, ResettableTimer


class SessionState(str, Enum):
    IDLE = "idle"
    DIRTY = "dirty"
    RENDERING = "rendering"


@dataclass(frozen=True, slots=True)
class PreviewUpdate:
    """Payload of ``preview-updated``: the result and what to display."""

    result: RenderResult
    payload: str
    content: str


@dataclass(slots=True)
class ActionResult:
    """Outcome of a toolbar tag or shortcut dispatch."""

    consumed: bool
    status: str = "ok"
    message: Optional[str] = None
    export: Optional["asyncio.Task[bool]"] = None


class ChangeCoordinator:
    """Owns the buffer and drives the ``idle -> dirty -> rendering`` cycle.

    Typed input is saved immediately and rendered once the debounce window
    has been quiet; hosts poll ``process_timeouts``. Markup insertions render
    right away.
    """

    def __init__(
        self,
        persistence: Persistence,
        transform: Transform,
        *,
        sanitize: Sanitize = normalize_input,
        exporter: Optional[Exporter] = None,
        recorder: Optional[DebugRecorder] = None,
        bus: Optional[EventBus] = None,
        debounce_ms: int = DEFAULT_DEBOUNCE_MS,
        clock: Clock = time.monotonic,
        caret_policy: CaretPolicy = CaretPolicy.AFTER_SUFFIX,
        default_content: str = "",
        shortcuts: Mapping[str, ToolbarAction] = DEFAULT_SHORTCUTS,
    ) -> None:
        self.persistence = persistence
        self.renderer = PreviewRenderer(transform, sanitize=sanitize)
        self.exporter = exporter
        self.recorder = recorder or DebugRecorder()
        self.bus = bus or EventBus()
        self.timer = ResettableTimer(debounce_ms, clock=clock)
        self.inserter = MarkupInserter(caret_policy=caret_policy)
        self.default_content = default_content
        self.shortcuts = shortcuts
        self.logger = telemetry.get_logger("live_markup.session")

        self.state = SessionState.IDLE
        self.buffer = TextBuffer()
        self.last_result: Optional[RenderResult] = None
        self.render_count = 0
        self._exports: Set["asyncio.Task[bool]"] = set()

    # -- edits -----------------------------------------------------------

    def load(self) -> RenderResult:
        content = self.persistence.load() or self.default_content
        self.buffer = TextBuffer.collapsed_at(content, len(content))
        self.persistence.update_word_count(content)
        self.timer.cancel()
        return self._render("load")

    def handle_input(
        self, text: str, *, selection: Optional[tuple[int, int]] = None
    ) -> bool:
        """Accept typed text; returns ``False`` when nothing changed."""

        if text == self.buffer.content:
            if selection is not None:
                self.set_selection(*selection)
            return False
        if selection is None:
            buffer = self.buffer.with_content(text)
        else:
            buffer = TextBuffer(text, *selection)
        self._accept(buffer)
        self._schedule_render()
        return True

    def handle_blur(self, text: str) -> None:
        if text != self.buffer.content:
            self._accept(self.buffer.with_content(text))
            self._schedule_render()
        else:
            self.persistence.save(self.buffer.content)

    def set_selection(self, start: int, end: Optional[int] = None) -> TextBuffer:
        self.buffer = self.buffer.with_selection(start, end)
        return self.buffer

    def save(self) -> None:
        self.persistence.save(self.buffer.content)

    def apply_rule(self, rule: MarkupRule) -> InsertionResult:
        with telemetry.span(
            "session::insert_markup",
            logger_name="live_markup.session",
            component="markup",
            metadata={"rule": rule.name or rule.prefix, "selection": self.buffer.selection},
        ):
            outcome = self.inserter.insert(self.buffer, rule)
        self._accept(outcome.buffer)
        self.timer.cancel()
        self._render("markup")
        return outcome

    def _accept(self, buffer: TextBuffer) -> None:
        self.buffer = buffer
        self.persistence.save(buffer.content)
        self.persistence.update_word_count(buffer.content)
        self.bus.emit(CONTENT_CHANGED, buffer.content)

    # -- actions ---------------------------------------------------------

    def dispatch_action(self, tag: str) -> ActionResult:
        try:
            action = resolve_action(tag)
        except UnknownActionError as exc:
            telemetry.record_event(
                "action.unknown",
                level="warning",
                data={"tag": tag},
                logger_name="live_markup.session",
            )
            self.bus.emit(ACTION_UNKNOWN, tag)
            return ActionResult(consumed=False, status="unknown_action", message=str(exc))
        return self._run_action(action)

    def handle_shortcut(self, key: str, modifiers: Iterable[str] = ()) -> ActionResult:
        action = resolve_shortcut(key, modifiers, table=self.shortcuts)
        if action is None:
            return ActionResult(consumed=False, status="unbound")
        return self._run_action(action)

    def _run_action(self, action: ToolbarAction) -> ActionResult:
        if action.rule is not None:
            self.apply_rule(action.rule)
            return ActionResult(consumed=True, status="markup", message=action.id)
        if action.command == SAVE_COMMAND:
            self.save()
            return ActionResult(consumed=True, status="saved", message=action.id)
        if action.command == EXPORT_COMMAND:
            return self._start_export()
        raise ValueError(f"Unhandled action '{action.id}'")  # pragma: no cover

    # -- rendering -------------------------------------------------------

    def _schedule_render(self) -> None:
        self.timer.arm()
        if self.state is not SessionState.RENDERING:
            self.state = SessionState.DIRTY

    def process_timeouts(self) -> Optional[RenderResult]:
        """Render if the debounce window elapsed since the last edit."""

        if self.timer.expired():
            return self._render("debounce")
        return None

    def flush(self) -> Optional[RenderResult]:
        if not self.timer.pending:
            return None
        self.timer.cancel()
        return self._render("flush")

    def _render(self, reason: str) -> RenderResult:
        self.state = SessionState.RENDERING
        content = self.buffer.content
        try:
            with telemetry.span(
                "session::render",
                logger_name="live_markup.session",
                component="preview",
                metadata={"reason": reason, "length": len(content)},
            ):
                result = self.renderer.render(content)
            self.last_result = result
            self.render_count += 1
            self.bus.emit(
                PREVIEW_UPDATED,
                PreviewUpdate(result=result, payload=display_payload(result), content=content),
            )
            if isinstance(result, Rendered):
                self.recorder.record("Preview updated", {"input": content, "html": result.html})
            else:
                self.recorder.record("Parser error", {"error": result.message})
        finally:
            self.state = SessionState.DIRTY if self.timer.pending else SessionState.IDLE
        return result

    # -- export ----------------------------------------------------------

    def _start_export(self) -> ActionResult:
        if self.exporter is None:
            self.persistence.notify("No exporter configured", "error")
            return ActionResult(consumed=True, status="export_unavailable")
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            telemetry.log_kv(self.logger, "warning", "export::no_event_loop")
            return ActionResult(
                consumed=False, status="export_unavailable", message="no running event loop"
            )
        task = loop.create_task(self.export())
        self._exports.add(task)
        task.add_done_callback(self._exports.discard)
        return ActionResult(consumed=True, status="export_started", export=task)

    async def export(self, exporter: Optional[Exporter] = None) -> bool:
        """Export the current preview; failures are reported, never raised."""

        target = exporter or self.exporter
        if target is None:
            self.persistence.notify("No exporter configured", "error")
            return False
        self.flush()
        rendered = self.last_result
        if rendered is None:
            rendered = self._render("export")

        self.bus.emit(EXPORT_START)
        try:
            await target.to_document(rendered)
        except Exception as exc:
            error = ExportError(str(exc) or type(exc).__name__, cause=exc)
            telemetry.record_event(
                "export.failed",
                level="error",
                data={"error": type(exc).__name__, "message": error.message},
                logger_name="live_markup.session",
            )
            self.persistence.notify(f"Export failed: {error.message}", "error")
            self.bus.emit(EXPORT_ERROR, {"error": error})
            return False

        telemetry.record_event("export.completed", logger_name="live_markup.session")
        self.persistence.notify("Export completed successfully")
        self.bus.emit(EXPORT_SUCCESS)
        return True

    @property
    def exports_in_flight(self) -> int:
        return len(self._exports)


__all__ = ["ActionResult", "ChangeCoordinator", "PreviewUpdate", "SessionState"]
