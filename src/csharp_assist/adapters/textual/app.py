"""Executable Textual app hosting the C# editing assistant."""

from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from textual.app import App, ComposeResult
    from textual.containers import Horizontal, Vertical, VerticalScroll
    from textual.widgets import (
        Button,
        Footer,
        Header,
        Input,
        Label,
        ListItem,
        ListView,
        Static,
        TextArea,
    )
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use csharp_assist.adapters.textual.app"
    ) from exc

from rich.text import Text

from csharp_assist.runtime import telemetry
from csharp_assist.seed import SAMPLE_CODE
from csharp_assist.session import EditorSession

from .controller import (
    HistoryRow,
    SessionController,
    SessionHooks,
    input_id,
    tool_cards,
)

# Parameter path -> input placeholder
PLACEHOLDERS = {
    "rename.source": "Current name",
    "rename.target": "New name",
    "guard.method": "Method name",
    "guard.parameter": "Parameter to check",
    "region.name": "e.g. Task Management",
    "region.focus": "Method signature or block (optional)",
}


class HistoryItem(ListItem):
    def __init__(self, snapshot_id: str, label: str, stamp: str) -> None:
        super().__init__(Label(Text(f"{stamp}  {label}")))
        self.snapshot_id = snapshot_id


class AssistApp(App[None]):
    """Editor pane, tool forms, formatted preview, and the history list."""

    CSS = """
    #workspace {
        height: 2fr;
    }

    #source {
        width: 2fr;
    }

    #tools {
        width: 1fr;
        border: round $accent;
        padding: 0 1;
    }

    .tool-title {
        text-style: bold;
        margin-top: 1;
    }

    .tool-description {
        color: $text-muted;
    }

    #bottom {
        height: 1fr;
    }

    #preview {
        width: 2fr;
        border: round $accent;
        padding: 0 1;
    }

    #history {
        width: 1fr;
        border: round $accent;
    }

    #status-line {
        height: 1;
        background: $surface-darken-1;
        padding: 0 1;
    }
    """

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
        ("ctrl+f", "format", "Format"),
        ("ctrl+r", "restore", "Restore original"),
    ]

    def __init__(
        self,
        *,
        seed: str = SAMPLE_CODE,
        format_preview: bool = True,
    ) -> None:
        super().__init__()
        self.session = EditorSession(seed)
        self._format_preview = format_preview
        self.controller: SessionController | None = None
        self._input_paths: dict[str, str] = {}
        self._button_tools: dict[str, str] = {}

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Horizontal(id="workspace"):
            yield TextArea(self.session.code, id="source")
            with VerticalScroll(id="tools"):
                yield from self._compose_tools()
        with Horizontal(id="bottom"):
            with VerticalScroll(id="preview"):
                yield Static("", id="preview-body")
            yield ListView(id="history")
        yield Static("", id="status-line")
        yield Footer()

    def _compose_tools(self) -> ComposeResult:
        for card in tool_cards(self.session):
            yield Label(card.title, classes="tool-title")
            yield Static(Text(card.description), classes="tool-description")
            for path, value in card.fields:
                widget_id = input_id(path)
                self._input_paths[widget_id] = path
                yield Input(value, placeholder=PLACEHOLDERS.get(path, ""), id=widget_id)
            self._button_tools[card.button_id] = card.tool_id
            yield Button(card.action, id=card.button_id, variant="primary")
        with Vertical():
            yield Button("Restore original", id="restore-original")

    def on_mount(self) -> None:
        hooks = SessionHooks(
            update_buffer=self._update_buffer,
            update_preview=self._update_preview,
            update_history=self._update_history,
            update_status=self._update_status,
        )
        self.controller = SessionController(
            self.session, hooks, format_preview=self._format_preview
        )

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        if self.controller:
            self.controller.edit(event.text_area.text)

    def on_input_changed(self, event: Input.Changed) -> None:
        path = self._input_paths.get(event.input.id or "")
        if not self.controller or path is None:
            return
        self.controller.update_parameter(path, event.value)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if not self.controller:
            return
        button_id = event.button.id or ""
        if button_id in self._button_tools:
            self.controller.apply(self._button_tools[button_id])
        elif button_id == "restore-original":
            self.controller.restore_original()

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        if self.controller and isinstance(event.item, HistoryItem):
            self.controller.revert_to(event.item.snapshot_id)

    def action_format(self) -> None:
        if self.controller:
            self.controller.apply("format")

    def action_restore(self) -> None:
        if self.controller:
            self.controller.restore_original()

    def _update_buffer(self, code: str) -> None:
        editor = self.query_one("#source", TextArea)
        if editor.text != code:
            editor.load_text(code)

    def _update_preview(self, preview: str) -> None:
        # Plain text; C# generics and attributes would otherwise parse as markup.
        self.query_one("#preview-body", Static).update(Text(preview))

    def _update_history(self, rows: Sequence[HistoryRow]) -> None:
        self.run_worker(
            self._rebuild_history(list(rows)), group="history", exclusive=True
        )

    async def _rebuild_history(self, rows: list[HistoryRow]) -> None:
        history = self.query_one("#history", ListView)
        await history.clear()
        await history.extend(HistoryItem(*row) for row in rows)

    def _update_status(self, status: str) -> None:
        self.query_one("#status-line", Static).update(Text(status))


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Apply quick structural edits to C# code and keep a history."
    )
    parser.add_argument(
        "--seed-file",
        type=Path,
        default=os.environ.get("CSHARP_ASSIST_SEED_FILE") or None,
        help="Start from this file's contents instead of the bundled sample",
    )
    parser.add_argument(
        "--log-preset",
        choices=telemetry.PRESETS,
        default=os.environ.get("CSHARP_ASSIST_LOG_PRESET") or None,
        help="Telemetry preset (default: environment-driven configuration)",
    )
    parser.add_argument(
        "--no-format-preview",
        action="store_true",
        help="Show the raw buffer in the preview pane instead of the formatted one",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)
    seed = Path(args.seed_file).read_text(encoding="utf-8") if args.seed_file else SAMPLE_CODE
    app = AssistApp(seed=seed, format_preview=not args.no_format_preview)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
