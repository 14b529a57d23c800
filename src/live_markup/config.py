"""Editor configuration, constants, and the process-wide debug flag."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from live_markup.markup.rules import CaretPolicy

ENV_PREFIX = "LIVE_MARKUP_"

DEFAULT_DEBOUNCE_MS = 300
DEFAULT_CONTENT = (
    "jf Welcome\n"
    "Type on the left, the preview follows on the right.\n"
    "ja First item\n"
    "ja Second item\n"
    "kl A quoted line\n"
)

_TRUTHY = {"1", "true", "yes", "on"}


def _env(environ: Mapping[str, str], name: str) -> Optional[str]:
    return environ.get(f"{ENV_PREFIX}{name}")


def _env_flag(environ: Mapping[str, str], name: str, default: bool) -> bool:
    raw = _env(environ, name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def _env_int(environ: Mapping[str, str], name: str, fallback: int) -> int:
    raw = _env(environ, name)
    if raw is None:
        return fallback
    try:
        value = int(raw)
    except ValueError:
        return fallback
    return value if value >= 0 else fallback


def _env_caret_policy(environ: Mapping[str, str]) -> CaretPolicy:
    raw = (_env(environ, "CARET_POLICY") or "").strip().lower()
    try:
        return CaretPolicy(raw)
    except ValueError:
        return CaretPolicy.AFTER_SUFFIX


@dataclass(slots=True)
class EditorSettings:
    """Settings the composition root passes to the coordinator and host."""

    debounce_ms: int = DEFAULT_DEBOUNCE_MS
    debug: bool = False
    default_content: str = DEFAULT_CONTENT
    caret_policy: CaretPolicy = CaretPolicy.AFTER_SUFFIX


def load_settings(environ: Optional[Mapping[str, str]] = None) -> EditorSettings:
    """Build settings from ``LIVE_MARKUP_*`` variables; bad values use defaults."""

    env = os.environ if environ is None else environ
    return EditorSettings(
        debounce_ms=_env_int(env, "DEBOUNCE_MS", DEFAULT_DEBOUNCE_MS),
        debug=_env_flag(env, "DEBUG", False),
        caret_policy=_env_caret_policy(env),
    )


_debug_mode = _env_flag(os.environ, "DEBUG", False)


def is_debug_mode() -> bool:
    return _debug_mode


def set_debug_mode(enabled: bool) -> None:
    global _debug_mode
    _debug_mode = bool(enabled)


__all__ = [
    "DEFAULT_CONTENT",
    "DEFAULT_DEBOUNCE_MS",
    "EditorSettings",
    "load_settings",
    "is_debug_mode",
    "set_debug_mode",
]
