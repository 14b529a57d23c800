"""Executable Textual app hosting the editor and its live preview."""

from __future__ import annotations

import argparse
import asyncio
import html
from pathlib import Path
from types import MappingProxyType
from typing import List, Mapping, Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.containers import Horizontal
    from textual.widgets import Footer, Header, Log, Static, TextArea
    from textual.widgets.text_area import Selection
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use live_markup.adapters.textual.app"
    ) from exc

from live_markup import config
from live_markup.buffer import Location
from live_markup.errors import ParseError
from live_markup.preview import DebugRecorder, RenderResult, display_payload
from live_markup.runtime import telemetry
from live_markup.session import ChangeCoordinator, MemoryPersistence
from live_markup.toolbar import DEFAULT_SHORTCUTS, TOOLBAR_ACTIONS, Shortcut

from .controller import TextualPreviewAdapter, TextualUIHooks


def demo_transform(source: str) -> str:
    """Stand-in transform: escaped paragraphs, rejecting open code blocks."""

    if source.count("jkd") != source.count("dkj"):
        raise ParseError("unterminated code block")
    paragraphs = [line for line in source.split("\n") if line.strip()]
    return "\n".join(f"<p>{html.escape(line)}</p>" for line in paragraphs)


QUIT_KEY = "f12"

# Terminals send ctrl+i as tab.
TERMINAL_RESERVED_KEYS = frozenset({"ctrl+i"})

TOOLBAR_KEYS: Mapping[str, str] = MappingProxyType(
    {
        "h1": "f1",
        "h2": "f2",
        "h3": "f3",
        "ulist": "f4",
        "olist": "f5",
        "quote": "f6",
        "nested-quote": "f7",
        "code": "f8",
        "image": "f9",
        "hr": "f10",
        "bold": "ctrl+t",
        "italic": "ctrl+o",
        "underline": "ctrl+n",
        "link": "ctrl+l",
        "export-pdf": "ctrl+r",
    }
)


def build_bindings() -> List[Binding]:
    """Quit, the ctrl shortcut table, then one key per toolbar tag."""

    bindings = [Binding(QUIT_KEY, "quit", "Quit", priority=True)]
    for token, action in DEFAULT_SHORTCUTS.items():
        if token in TERMINAL_RESERVED_KEYS:
            continue
        label = action.description or action.id.rsplit(".", 1)[-1].title()
        bindings.append(
            Binding(
                token,
                f"shortcut('{Shortcut.parse(token).key}')",
                label,
                priority=True,
            )
        )
    for tag, key in TOOLBAR_KEYS.items():
        ctrl = key.startswith("ctrl+")
        bindings.append(
            Binding(
                key,
                f"toolbar('{tag}')",
                TOOLBAR_ACTIONS[tag].description,
                show=not ctrl,
                priority=ctrl,
            )
        )
    return bindings


class NotifyingPersistence(MemoryPersistence):
    """Memory persistence that also surfaces notifications as toasts."""

    def __init__(self, app: "LivePreviewApp") -> None:
        super().__init__()
        self._app = app

    def notify(self, message: str, level: str = "info") -> None:
        super().notify(message, level)
        severity = "error" if level == "error" else "information"
        self._app.notify(message, severity=severity)


class HtmlFileExporter:
    """Writes the rendered preview to an HTML file."""

    def __init__(self, path: Path) -> None:
        self.path = path

    async def to_document(self, rendered: RenderResult) -> None:
        body = display_payload(rendered)
        document = f"<!doctype html>\n<html><body>\n{body}\n</body></html>\n"
        await asyncio.to_thread(self.path.write_text, document, encoding="utf-8")


class LivePreviewApp(App[None]):
    """Editor on the left, preview on the right, debug log below."""

    CSS = """
	#panes {
		height: 1fr;
	}

	#editor, #preview {
		width: 1fr;
		border: round $accent;
	}

	#preview {
		padding: 0 1;
		overflow: auto;
	}

	#debug-output {
		height: 8;
		border: round $surface-lighten-1;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = build_bindings()

    def __init__(
        self,
        *,
        settings: Optional[config.EditorSettings] = None,
        export_path: Path = Path("preview.html"),
    ) -> None:
        super().__init__()
        self.settings = settings or config.load_settings()
        self.export_path = export_path
        self.adapter: TextualPreviewAdapter | None = None
        self._editor: TextArea | None = None
        self._preview: Static | None = None
        self._debug: Log | None = None
        self._status: Static | None = None
        self._syncing = False

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Horizontal(id="panes"):
            self._editor = TextArea(id="editor")
            yield self._editor
            self._preview = Static("", id="preview", markup=False)
            yield self._preview
        self._debug = Log(id="debug-output")
        self._debug.display = self.settings.debug
        yield self._debug
        self._status = Static("", id="status-line")
        yield self._status
        yield Footer()

    def on_mount(self) -> None:
        config.set_debug_mode(self.settings.debug)
        coordinator = ChangeCoordinator(
            NotifyingPersistence(self),
            demo_transform,
            exporter=HtmlFileExporter(self.export_path),
            recorder=DebugRecorder(sink=self._write_debug),
            debounce_ms=self.settings.debounce_ms,
            caret_policy=self.settings.caret_policy,
            default_content=self.settings.default_content,
        )
        hooks = TextualUIHooks(
            update_preview=self._update_preview,
            update_editor=self._update_editor,
            update_status=self._update_status,
        )
        self.adapter = TextualPreviewAdapter(coordinator, hooks)
        self.adapter.start()
        self.set_interval(0.05, self._process_timeouts)

    def _process_timeouts(self) -> None:
        if self.adapter:
            self.adapter.process_timeouts()

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        if not self.adapter or self._syncing:
            return
        area = event.text_area
        self.adapter.handle_text_changed(
            area.text, (area.selection.start, area.selection.end)
        )

    def on_text_area_selection_changed(self, event: TextArea.SelectionChanged) -> None:
        if not self.adapter or self._syncing:
            return
        self.adapter.handle_selection_changed(event.selection.start, event.selection.end)

    def on_descendant_blur(self, event: events.DescendantBlur) -> None:
        del event
        if self.adapter and self._editor:
            self.adapter.handle_blur(self._editor.text)

    def action_toolbar(self, tag: str) -> None:
        if self.adapter:
            self.adapter.handle_toolbar(tag)

    def action_shortcut(self, key: str) -> None:
        if self.adapter:
            self.adapter.handle_shortcut(key, modifiers=("ctrl",))

    def _update_editor(self, text: str, start: Location, end: Location) -> None:
        if not self._editor:
            return
        self._syncing = True
        try:
            if self._editor.text != text:
                self._editor.load_text(text)
            self._editor.selection = Selection(start, end)
        finally:
            self._syncing = False
        self._editor.focus()

    def _update_preview(self, payload: str) -> None:
        if self._preview:
            self._preview.update(payload)

    def _update_status(self, status: str) -> None:
        if self._status:
            self._status.update(status)

    def _write_debug(self, text: str) -> None:
        if self._debug:
            self._debug.write_line(text)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the live markup preview editor.")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Show the render-cycle debug log (also LIVE_MARKUP_DEBUG=1)",
    )
    parser.add_argument(
        "--debounce-ms",
        type=int,
        default=None,
        help="Quiet period before re-rendering typed input",
    )
    parser.add_argument(
        "--export-path",
        type=Path,
        default=Path("preview.html"),
        help="Where ctrl+e writes the exported preview (default: preview.html)",
    )
    parser.add_argument(
        "--log-preset",
        choices=telemetry.PRESETS,
        default="quiet",
        help="Telemetry preset; the default keeps the terminal to the UI",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    telemetry.configure(preset=args.log_preset)
    settings = config.load_settings()
    if args.debug:
        settings.debug = True
    if args.debounce_ms is not None and args.debounce_ms >= 0:
        settings.debounce_ms = args.debounce_ms
    app = LivePreviewApp(settings=settings, export_path=args.export_path)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
