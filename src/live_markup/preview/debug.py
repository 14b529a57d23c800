"""Optional structured log of render cycles for diagnostics."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from live_markup import config
from live_markup.runtime import telemetry


@dataclass(frozen=True, slots=True)
class DebugEntry:
    message: str
    details: Any = None
    text: str = ""


class DebugRecorder:
    """Append-only session log, active only while debug mode is on."""

    def __init__(
        self,
        *,
        enabled: Optional[Callable[[], bool]] = None,
        sink: Optional[Callable[[str], None]] = None,
        logger_name: str = "live_markup.debug",
    ) -> None:
        self._enabled = enabled or config.is_debug_mode
        self.sink = sink
        self.logger = telemetry.get_logger(logger_name)
        self._entries: List[DebugEntry] = []

    @property
    def active(self) -> bool:
        return bool(self._enabled())

    @property
    def entries(self) -> tuple[DebugEntry, ...]:
        return tuple(self._entries)

    @property
    def text(self) -> str:
        return "".join(f"{entry.text}\n\n" for entry in self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def record(self, message: str, details: Any = None) -> None:
        try:
            if not self.active:
                return
            text = message
            if details is not None:
                text += "\n" + json.dumps(details, indent=2, default=str)
            self._entries.append(DebugEntry(message=message, details=details, text=text))
            self.logger.debug(message)
            if self.sink is not None:
                self.sink(text)
        except Exception as exc:
            # Rendering must go on even if diagnostics break.
            try:
                telemetry.log_kv(
                    self.logger, "warning", "debug::record_failed", reason=str(exc)
                )
            except Exception:
                pass


__all__ = ["DebugEntry", "DebugRecorder"]
