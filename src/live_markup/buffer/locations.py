"""Conversions between flat offsets and ``(row, column)`` host locations."""

from __future__ import annotations

from typing import Tuple

from live_markup.errors import BufferValidationError

Location = Tuple[int, int]  # (row, column)


def ensure_offset(text: str, offset: int) -> int:
    if offset < 0 or offset > len(text):
        raise BufferValidationError("Offset out of range", offset=offset)
    return offset


def offset_for_location(text: str, location: Location) -> int:
    """Flat offset of ``location``; rows/columns past the end are clamped."""

    lines = text.split("\n")
    row, col = location
    row = max(0, min(row, len(lines) - 1))
    col = max(0, min(col, len(lines[row])))
    offset = 0
    for i in range(row):
        offset += len(lines[i]) + 1  # newline
    return offset + col


def location_for_offset(text: str, offset: int) -> Location:
    ensure_offset(text, offset)
    running = 0
    lines = text.split("\n")
    for row, line in enumerate(lines):
        line_len = len(line)
        if offset <= running + line_len:
            return (row, offset - running)
        running += line_len + 1
    return (len(lines) - 1, len(lines[-1]))


__all__ = [
    "Location",
    "ensure_offset",
    "offset_for_location",
    "location_for_offset",
]
