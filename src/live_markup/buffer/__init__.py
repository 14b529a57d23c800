"""Buffer value objects and location helpers."""

from .locations import Location, ensure_offset, location_for_offset, offset_for_location
from .state import Selection, TextBuffer

__all__ = [
    "TextBuffer",
    "Selection",
    "Location",
    "ensure_offset",
    "offset_for_location",
    "location_for_offset",
]
