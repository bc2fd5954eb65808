"""UI-agnostic controller that pushes session state into host callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

from csharp_assist.history import Snapshot, UnknownSnapshotError
from csharp_assist.session import EditorSession
from csharp_assist.transforms import UnknownToolError

HistoryRow = Tuple[str, str, str]  # (id, label, HH:MM:SS)


@dataclass(frozen=True, slots=True)
class ToolCard:
    """What a host needs to render one tool: heading, blurb, inputs, button."""

    tool_id: str
    title: str
    description: str
    fields: Tuple[Tuple[str, str], ...]  # (parameter path, current value)
    action: str

    @property
    def button_id(self) -> str:
        return f"apply-{self.tool_id}"


def input_id(path: str) -> str:
    return path.replace(".", "-")


def tool_cards(session: EditorSession) -> list[ToolCard]:
    params = session.parameters
    return [
        ToolCard(
            tool_id=tool.id,
            title=tool.title,
            description=tool.description,
            fields=tuple((path, params.get(path)) for path in tool.fields),
            action=tool.action,
        )
        for tool in session.tools
    ]


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class SessionHooks:
    """Callbacks the controller invokes so the host can redraw its widgets."""

    update_buffer: Callable[[str], None]
    update_preview: Callable[[str], None] = _noop
    update_history: Callable[[Sequence[HistoryRow]], None] = _noop
    update_status: Callable[[str], None] = _noop


def history_rows(entries: Sequence[Snapshot]) -> list[HistoryRow]:
    return [(entry.id, entry.label, entry.display_time()) for entry in entries]


class SessionController:
    """Bridges an ``EditorSession`` to a widget toolkit through ``SessionHooks``."""

    def __init__(
        self,
        session: EditorSession,
        hooks: SessionHooks,
        *,
        format_preview: bool = True,
    ) -> None:
        self.session = session
        self.hooks = hooks
        self.format_preview = format_preview
        self.refresh()

    def apply(self, tool_id: str) -> Optional[Snapshot]:
        try:
            entry = self.session.apply(tool_id)
        except UnknownToolError as exc:
            self.hooks.update_status(f"unknown tool: {exc.tool_id}")
            return None
        if entry is None:
            self.hooks.update_status("no changes")
        else:
            self.hooks.update_status(entry.label)
        self.refresh()
        return entry

    def update_parameter(self, path: str, value: str) -> None:
        self.session.set_parameter(path, value)

    def revert_to(self, snapshot_id: str) -> Optional[Snapshot]:
        try:
            entry = self.session.revert_to(snapshot_id)
        except UnknownSnapshotError as exc:
            self.hooks.update_status(f"unknown snapshot: {exc.snapshot_id}")
            return None
        self.hooks.update_status(f"restored: {entry.label}")
        self.refresh()
        return entry

    def restore_original(self) -> Snapshot:
        entry = self.session.restore_original()
        self.hooks.update_status(f"restored: {entry.label}")
        self.refresh()
        return entry

    def edit(self, text: str) -> None:
        """Accept hand-typed text; the editor widget already shows it."""

        if text == self.session.code:
            return
        self.session.edit(text)
        self._refresh_preview()

    def refresh(self) -> None:
        self.hooks.update_buffer(self.session.code)
        self._refresh_preview()
        self.hooks.update_history(history_rows(self.session.entries))

    def _refresh_preview(self) -> None:
        preview = self.session.preview if self.format_preview else self.session.code
        self.hooks.update_preview(preview)


__all__ = [
    "HistoryRow",
    "SessionController",
    "SessionHooks",
    "ToolCard",
    "history_rows",
    "input_id",
    "tool_cards",
]
