"""Closed set of toolbar actions and their markup rules or commands."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from live_markup.errors import UnknownActionError
from live_markup.markup.rules import DEFAULT_RULES, MarkupRule

EXPORT_COMMAND = "export"
SAVE_COMMAND = "save"
COMMANDS = (EXPORT_COMMAND, SAVE_COMMAND)


@dataclass(frozen=True, slots=True)
class ToolbarAction:
    """Either inserts ``rule`` or runs the named ``command``."""

    id: str
    rule: Optional[MarkupRule] = None
    command: Optional[str] = None
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ToolbarAction id cannot be empty")
        if (self.rule is None) == (self.command is None):
            raise ValueError("ToolbarAction needs exactly one of rule or command")
        if self.command is not None and self.command not in COMMANDS:
            raise ValueError(f"Unknown command '{self.command}'")


def _markup(tag: str, description: str) -> ToolbarAction:
    return ToolbarAction(id=tag, rule=DEFAULT_RULES[tag], description=description)


TOOLBAR_ACTIONS: Mapping[str, ToolbarAction] = MappingProxyType(
    {
        action.id: action
        for action in (
            _markup("h1", "Heading 1"),
            _markup("h2", "Heading 2"),
            _markup("h3", "Heading 3"),
            _markup("bold", "Bold"),
            _markup("italic", "Italic"),
            _markup("underline", "Underline"),
            _markup("ulist", "Bulleted list"),
            _markup("olist", "Numbered list"),
            _markup("link", "Link"),
            _markup("image", "Image"),
            _markup("code", "Code block"),
            _markup("quote", "Quote"),
            _markup("nested-quote", "Nested quote"),
            _markup("hr", "Horizontal rule"),
            ToolbarAction(
                id="export-pdf", command=EXPORT_COMMAND, description="Export"
            ),
        )
    }
)

TOOLBAR_TAGS = frozenset(TOOLBAR_ACTIONS)


def resolve_action(tag: str) -> ToolbarAction:
    try:
        return TOOLBAR_ACTIONS[tag]
    except KeyError as exc:
        raise UnknownActionError(tag) from exc


__all__ = [
    "COMMANDS",
    "EXPORT_COMMAND",
    "SAVE_COMMAND",
    "ToolbarAction",
    "TOOLBAR_ACTIONS",
    "TOOLBAR_TAGS",
    "resolve_action",
]
