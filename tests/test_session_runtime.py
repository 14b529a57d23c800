import pytest

from live_markup.config import DEFAULT_DEBOUNCE_MS, load_settings
from live_markup.markup import CaretPolicy
from live_markup.runtime import telemetry
from live_markup.session import EventBus, ResettableTimer, count_words

from conftest import FakeClock


def test_timer_rearm_pushes_deadline_out(clock: FakeClock) -> None:
    timer = ResettableTimer(200, clock=clock)
    timer.arm()
    clock.advance(150)
    timer.arm()
    clock.advance(150)

    assert timer.expired() is False
    assert timer.remaining_ms() == pytest.approx(50)

    clock.advance(60)
    assert timer.expired() is True
    assert timer.expired() is False
    assert timer.pending is False


def test_timer_deadline_tracks_the_latest_arm(clock: FakeClock) -> None:
    timer = ResettableTimer(100, clock=clock)
    assert timer.deadline is None

    timer.arm()
    first = timer.deadline
    clock.advance(40)
    timer.arm()

    assert first == pytest.approx(100.1)
    assert timer.deadline == pytest.approx(100.14)
    assert timer.pending is True


def test_timer_cancel(clock: FakeClock) -> None:
    timer = ResettableTimer(10, clock=clock)
    timer.arm()
    timer.cancel()
    clock.advance(20)

    assert timer.expired() is False
    assert timer.remaining_ms() is None


def test_event_bus_subscribe_and_unsubscribe() -> None:
    bus = EventBus()
    seen: list = []
    bus.subscribe("content-changed", seen.append)
    bus.emit("content-changed", "a")
    bus.unsubscribe("content-changed", seen.append)
    bus.emit("content-changed", "b")
    bus.emit("unheard")

    assert seen == ["a"]


def test_load_settings_reads_prefixed_environment() -> None:
    settings = load_settings(
        {
            "LIVE_MARKUP_DEBOUNCE_MS": "50",
            "LIVE_MARKUP_DEBUG": "yes",
            "LIVE_MARKUP_CARET_POLICY": "between_markers",
        }
    )

    assert settings.debounce_ms == 50
    assert settings.debug is True
    assert settings.caret_policy is CaretPolicy.BETWEEN_MARKERS


def test_load_settings_falls_back_on_bad_values() -> None:
    settings = load_settings(
        {"LIVE_MARKUP_DEBOUNCE_MS": "soon", "LIVE_MARKUP_CARET_POLICY": "middle"}
    )

    assert settings.debounce_ms == DEFAULT_DEBOUNCE_MS
    assert settings.debug is False
    assert settings.caret_policy is CaretPolicy.AFTER_SUFFIX
    assert load_settings({"LIVE_MARKUP_DEBOUNCE_MS": "-5"}).debounce_ms == DEFAULT_DEBOUNCE_MS


def test_count_words() -> None:
    assert count_words("") == 0
    assert count_words("jf Title\n  two  words ") == 4


def test_span_exposes_stringified_metadata() -> None:
    with telemetry.span("render", component=True, metadata={"length": 3}) as handle:
        assert handle.span_name == "render"
        assert handle.component_name == "render"
        assert handle.metadata == {"length": "3"}


def test_span_logs_failure_and_reraises(monkeypatch: pytest.MonkeyPatch) -> None:
    entries: list = []
    monkeypatch.setattr(
        telemetry,
        "log_kv",
        lambda logger, level, message, **kv: entries.append((level, message, kv)),
    )

    with pytest.raises(RuntimeError):
        with telemetry.span("export", metadata={"target": "pdf"}):
            raise RuntimeError("disk full")

    assert entries == [
        ("error", "span::fail", {"span": "export", "target": "pdf", "reason": "disk full"})
    ]
