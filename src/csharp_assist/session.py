"""Editor session tying the tools, their parameters, and the history together."""

from __future__ import annotations

from typing import Optional, Sequence

from csharp_assist.history import HistoryStore, Snapshot
from csharp_assist.runtime import telemetry
from csharp_assist.seed import SAMPLE_CODE
from csharp_assist.transforms import (
    ToolParameters,
    ToolRegistry,
    format_whitespace,
    load_default_tools,
)


class EditorSession:
    """Owns the current buffer, its history, and the per-tool parameters.

    Every tool runs as ``candidate = tool(code, parameters)`` followed by
    ``history.record_if_changed(label, candidate)``; the transformations
    themselves never see the history.
    """

    def __init__(
        self,
        seed: str = SAMPLE_CODE,
        *,
        parameters: Optional[ToolParameters] = None,
        tools: Optional[ToolRegistry] = None,
        logger_name: str | None = "csharp_assist.session",
    ) -> None:
        self.parameters = parameters if parameters is not None else ToolParameters()
        if tools is None:
            tools = load_default_tools(ToolRegistry(logger_name=logger_name))
        self.tools = tools
        self.history = HistoryStore(seed, logger_name=logger_name)
        self._logger_name = logger_name

    @property
    def code(self) -> str:
        return self.history.current

    @property
    def entries(self) -> Sequence[Snapshot]:
        return self.history.entries

    @property
    def preview(self) -> str:
        """The current code as it would look after a whitespace format."""

        return format_whitespace(self.code)

    def apply(self, tool_id: str) -> Optional[Snapshot]:
        """Run ``tool_id`` on the current code; record the result if it changed."""

        tool = self.tools.get(tool_id)
        label = tool.label(self.parameters)
        with telemetry.span(
            f"tool::{tool.id}",
            logger_name=self._logger_name,
            component=True,
            metadata={"tool_id": tool.id},
        ):
            candidate = tool(self.code, self.parameters)
        entry = self.history.record_if_changed(label, candidate)
        telemetry.record_event(
            "tool.apply",
            data={"tool_id": tool.id, "changed": entry is not None},
            logger_name=self._logger_name,
        )
        return entry

    def rename(self) -> Optional[Snapshot]:
        return self.apply("rename")

    def insert_guard(self) -> Optional[Snapshot]:
        return self.apply("guard")

    def wrap_region(self) -> Optional[Snapshot]:
        return self.apply("region")

    def format(self) -> Optional[Snapshot]:
        return self.apply("format")

    def revert_to(self, snapshot_id: str) -> Snapshot:
        return self.history.revert_to(snapshot_id)

    def restore_original(self) -> Snapshot:
        return self.history.revert_to_oldest()

    def edit(self, text: str) -> None:
        self.history.edit(text)

    def set_parameter(self, path: str, value: str) -> None:
        self.parameters.update(path, value)


__all__ = ["EditorSession"]
