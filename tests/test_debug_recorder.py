from typing import List

from live_markup import config
from live_markup.preview import DebugRecorder


def test_recorder_is_noop_when_debug_is_off() -> None:
    recorder = DebugRecorder()

    recorder.record("Preview updated", {"html": "<p/>"})

    assert recorder.entries == ()
    assert recorder.text == ""


def test_recorder_follows_process_wide_flag() -> None:
    recorder = DebugRecorder()
    config.set_debug_mode(True)

    recorder.record("Preview updated", {"input": "x", "html": "<p>x</p>"})
    recorder.record("Parser error")

    assert [entry.message for entry in recorder.entries] == [
        "Preview updated",
        "Parser error",
    ]
    assert recorder.entries[0].text == (
        'Preview updated\n{\n  "input": "x",\n  "html": "<p>x</p>"\n}'
    )
    assert recorder.text.endswith("Parser error\n\n")


def test_recorder_forwards_to_sink() -> None:
    lines: List[str] = []
    recorder = DebugRecorder(enabled=lambda: True, sink=lines.append)

    recorder.record("Parser error", {"error": "bad"})

    assert lines == ['Parser error\n{\n  "error": "bad"\n}']


def test_recorder_never_raises() -> None:
    def broken_sink(_: str) -> None:
        raise OSError("sink closed")

    def broken_flag() -> bool:
        raise RuntimeError("flag lookup failed")

    DebugRecorder(enabled=lambda: True, sink=broken_sink).record("x", {"a": 1})
    DebugRecorder(enabled=broken_flag).record("x")


def test_unserializable_details_fall_back_to_str() -> None:
    recorder = DebugRecorder(enabled=lambda: True)

    recorder.record("Preview updated", {"value": object})

    assert "class 'object'" in recorder.entries[0].text


def test_clear_drops_entries() -> None:
    recorder = DebugRecorder(enabled=lambda: True)
    recorder.record("one")

    recorder.clear()

    assert recorder.entries == ()


def test_empty_details_are_still_serialized() -> None:
    recorder = DebugRecorder(enabled=lambda: True)

    recorder.record("Preview updated", {})
    recorder.record("Word count", 0)
    recorder.record("Parser error")

    assert [entry.text for entry in recorder.entries] == [
        "Preview updated\n{}",
        "Word count\n0",
        "Parser error",
    ]
