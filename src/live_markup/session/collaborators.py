"""Contracts for the collaborators the coordinator is composed with."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Tuple

from live_markup.preview.renderer import RenderResult


class Persistence(Protocol):
    def save(self, content: str) -> None:
        ...

    def load(self) -> str:
        ...

    def update_word_count(self, content: str) -> None:
        ...

    def notify(self, message: str, level: str = "info") -> None:
        ...


class Exporter(Protocol):
    async def to_document(self, rendered: RenderResult) -> None:
        """Write ``rendered`` out as a document; raise on I/O failures."""
        ...


def count_words(content: str) -> int:
    return len(content.split())


@dataclass
class MemoryPersistence:
    """In-process persistence keeping the last save and notifications."""

    content: Optional[str] = None
    word_count: int = 0
    save_count: int = 0
    notifications: List[Tuple[str, str]] = field(default_factory=list)

    def save(self, content: str) -> None:
        self.content = content
        self.save_count += 1

    def load(self) -> str:
        return self.content or ""

    def update_word_count(self, content: str) -> None:
        self.word_count = count_words(content)

    def notify(self, message: str, level: str = "info") -> None:
        self.notifications.append((message, level))


__all__ = ["Persistence", "Exporter", "MemoryPersistence", "count_words"]
