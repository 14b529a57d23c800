from typing import List

import pytest

from live_markup.errors import ParseError
from live_markup.preview import (
    Failed,
    PreviewRenderer,
    Rendered,
    display_payload,
    error_block,
    normalize_input,
)


def upper_transform(source: str) -> str:
    return f"<p>{source.upper()}</p>"


def test_successful_render_wraps_html() -> None:
    renderer = PreviewRenderer(upper_transform)

    assert renderer.render("hi") == Rendered("<p>HI</p>")


def test_parse_error_becomes_failed() -> None:
    def broken(_: str) -> str:
        raise ParseError("unexpected token")

    result = PreviewRenderer(broken).render("jf oops")

    assert result == Failed("unexpected token")
    assert display_payload(result) == '<pre class="error">Error: unexpected token</pre>'


def test_any_exception_is_contained() -> None:
    def explode(_: str) -> str:
        raise KeyError("boom")

    def silent(_: str) -> str:
        raise RuntimeError()

    assert isinstance(PreviewRenderer(explode).render("x"), Failed)
    assert PreviewRenderer(silent).render("x") == Failed("RuntimeError")


def test_output_that_cannot_become_text_is_contained() -> None:
    class Unprintable:
        def __str__(self) -> str:
            raise UnicodeError("no text form")

    result = PreviewRenderer(lambda _: Unprintable()).render("x")

    assert result == Failed("no text form")


def test_failure_logging_errors_do_not_escape(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken_log(*_args, **_kwargs) -> None:
        raise OSError("log sink closed")

    def broken(_: str) -> str:
        raise ParseError("unexpected token")

    monkeypatch.setattr("live_markup.runtime.telemetry.log_kv", broken_log)

    assert PreviewRenderer(broken).render("x") == Failed("unexpected token")


def test_sanitize_runs_before_transform() -> None:
    seen: List[str] = []

    def record(source: str) -> str:
        seen.append(source)
        return source

    PreviewRenderer(record).render("a\r\nb\rc\x00")

    assert seen == ["a\nb\nc"]


def test_failing_sanitizer_is_contained() -> None:
    def bad_sanitize(_: str) -> str:
        raise ValueError("cannot sanitize")

    result = PreviewRenderer(upper_transform, sanitize=bad_sanitize).render("x")

    assert result == Failed("cannot sanitize")


def test_display_payload_passes_html_through_and_escapes_errors() -> None:
    assert display_payload(Rendered("<b>x</b>")) == "<b>x</b>"
    assert error_block("<tag>") == '<pre class="error">Error: &lt;tag&gt;</pre>'


def test_normalize_input_is_identity_on_clean_text() -> None:
    assert normalize_input("jf Title\nbody") == "jf Title\nbody"
