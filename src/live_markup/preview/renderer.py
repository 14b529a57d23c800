"""Preview rendering: sanitize, transform, and map failures to results."""

from __future__ import annotations

import html
from dataclasses import dataclass
from typing import Callable, Union

from live_markup.runtime import telemetry

Transform = Callable[[str], str]
Sanitize = Callable[[str], str]


@dataclass(frozen=True, slots=True)
class Rendered:
    html: str


@dataclass(frozen=True, slots=True)
class Failed:
    message: str


RenderResult = Union[Rendered, Failed]


def normalize_input(raw: str) -> str:
    """Default sanitizer: unify line endings and drop NUL characters."""

    return raw.replace("\r\n", "\n").replace("\r", "\n").replace("\x00", "")


def error_block(message: str) -> str:
    return f'<pre class="error">Error: {html.escape(message)}</pre>'


def display_payload(result: RenderResult) -> str:
    """HTML the preview surface shows for ``result``."""

    if isinstance(result, Rendered):
        return result.html
    return error_block(result.message)


def _failure_message(exc: BaseException) -> str:
    message = getattr(exc, "message", None) or str(exc)
    return message or type(exc).__name__


class PreviewRenderer:
    """Runs one render cycle; every failure degrades to ``Failed``."""

    def __init__(
        self,
        transform: Transform,
        *,
        sanitize: Sanitize = normalize_input,
        logger_name: str = "live_markup.preview",
    ) -> None:
        self.transform = transform
        self.sanitize = sanitize
        self.logger = telemetry.get_logger(logger_name)

    def render(self, raw_content: str) -> RenderResult:
        try:
            source = self.sanitize(raw_content)
            output = str(self.transform(source))
        except Exception as exc:
            message = _failure_message(exc)
            try:
                telemetry.log_kv(
                    self.logger,
                    "warning",
                    "preview::failed",
                    error=type(exc).__name__,
                    message=message,
                )
            except Exception:
                pass
            return Failed(message)
        return Rendered(output)


__all__ = [
    "Transform",
    "Sanitize",
    "Rendered",
    "Failed",
    "RenderResult",
    "PreviewRenderer",
    "normalize_input",
    "error_block",
    "display_payload",
]
