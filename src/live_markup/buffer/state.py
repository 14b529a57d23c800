"""Document text plus selection range, the unit every edit produces."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Selection = Tuple[int, int]  # (start, end) flat offsets


def _clamp(value: int, upper: int) -> int:
    return max(0, min(int(value), upper))


@dataclass(frozen=True, slots=True)
class TextBuffer:
    """Immutable snapshot of the editor: content and a selection range.

    Selection bounds coming from a host widget are clamped into
    ``[0, len(content)]`` and reordered so that ``start <= end``.
    """

    content: str = ""
    selection_start: int = 0
    selection_end: int = 0

    def __post_init__(self) -> None:
        length = len(self.content)
        start = _clamp(self.selection_start, length)
        end = _clamp(self.selection_end, length)
        if end < start:
            start, end = end, start
        object.__setattr__(self, "selection_start", start)
        object.__setattr__(self, "selection_end", end)

    @classmethod
    def collapsed_at(cls, content: str, offset: int) -> "TextBuffer":
        return cls(content, offset, offset)

    @property
    def selection(self) -> Selection:
        return (self.selection_start, self.selection_end)

    @property
    def selected_text(self) -> str:
        return self.content[self.selection_start : self.selection_end]

    @property
    def is_collapsed(self) -> bool:
        return self.selection_start == self.selection_end

    def with_selection(self, start: int, end: int | None = None) -> "TextBuffer":
        return TextBuffer(self.content, start, start if end is None else end)

    def with_content(self, content: str) -> "TextBuffer":
        """Replace the content, keeping (clamped) selection bounds."""

        return TextBuffer(content, self.selection_start, self.selection_end)
