"""Default keyboard shortcuts mapped onto toolbar actions."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from live_markup.markup.rules import DEFAULT_RULES

from .actions import SAVE_COMMAND, TOOLBAR_ACTIONS, ToolbarAction


def _normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = tuple(m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


@dataclass(frozen=True, slots=True)
class Shortcut:
    """Normalized key combination, e.g. ``Shortcut("b", ("ctrl",))``."""

    key: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "key", self.key.lower())
        object.__setattr__(self, "modifiers", _normalize_modifiers(self.modifiers))

    @property
    def token(self) -> str:
        if self.modifiers:
            return "+".join(self.modifiers) + f"+{self.key}"
        return self.key

    @classmethod
    def parse(cls, token: str) -> "Shortcut":
        *modifiers, key = token.split("+")
        return cls(key, tuple(modifiers))


def _ctrl(key: str) -> str:
    return Shortcut(key, ("ctrl",)).token


DEFAULT_SHORTCUTS: Mapping[str, ToolbarAction] = MappingProxyType(
    {
        _ctrl("b"): ToolbarAction(id="shortcut.bold", rule=DEFAULT_RULES["shortcut.bold"]),
        _ctrl("i"): ToolbarAction(
            id="shortcut.italic", rule=DEFAULT_RULES["shortcut.italic"]
        ),
        _ctrl("u"): ToolbarAction(
            id="shortcut.underline", rule=DEFAULT_RULES["shortcut.underline"]
        ),
        _ctrl("k"): TOOLBAR_ACTIONS["link"],
        _ctrl("q"): TOOLBAR_ACTIONS["quote"],
        _ctrl("s"): ToolbarAction(id="save", command=SAVE_COMMAND, description="Save"),
        _ctrl("e"): TOOLBAR_ACTIONS["export-pdf"],
    }
)


def resolve_shortcut(
    key: str,
    modifiers: Iterable[str] = (),
    *,
    table: Mapping[str, ToolbarAction] = DEFAULT_SHORTCUTS,
) -> Optional[ToolbarAction]:
    return table.get(Shortcut(key, tuple(modifiers)).token)


__all__ = ["Shortcut", "DEFAULT_SHORTCUTS", "resolve_shortcut"]
