import pytest

from live_markup.buffer import (
    TextBuffer,
    ensure_offset,
    location_for_offset,
    offset_for_location,
)
from live_markup.errors import BufferValidationError


def test_selection_is_clamped_into_content() -> None:
    buffer = TextBuffer("abc", -4, 99)

    assert buffer.selection == (0, 3)
    assert buffer.selected_text == "abc"


def test_reversed_selection_is_reordered() -> None:
    buffer = TextBuffer("hello", 4, 1)

    assert buffer.selection == (1, 4)
    assert buffer.is_collapsed is False


def test_with_content_keeps_selection_within_new_length() -> None:
    buffer = TextBuffer("hello world", 6, 11).with_content("hi")

    assert buffer.selection == (2, 2)
    assert buffer.is_collapsed


def test_collapsed_at_and_with_selection() -> None:
    buffer = TextBuffer.collapsed_at("abc", 2)

    assert buffer.selection == (2, 2)
    assert buffer.with_selection(0).selection == (0, 0)
    assert buffer.with_selection(0, 3).selected_text == "abc"


def test_offsets_and_locations_agree() -> None:
    text = "one\ntwo\n\nfour"

    for offset in range(len(text) + 1):
        assert offset_for_location(text, location_for_offset(text, offset)) == offset
    assert location_for_offset(text, 4) == (1, 0)
    assert location_for_offset(text, len(text)) == (3, 4)


def test_offset_for_location_clamps_out_of_range() -> None:
    assert offset_for_location("ab\ncd", (7, 9)) == 5
    assert offset_for_location("ab\ncd", (0, 9)) == 2


def test_ensure_offset_rejects_out_of_range() -> None:
    assert ensure_offset("abc", 3) == 3
    with pytest.raises(BufferValidationError) as info:
        location_for_offset("abc", 4)
    assert info.value.offset == 4
