"""Tool descriptors and the registry the session dispatches through."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterator, Optional

from csharp_assist.runtime.telemetry import span

from .formatter import format_whitespace
from .guard import insert_null_guard
from .parameters import ToolParameters
from .region import wrap_in_region
from .rename import rename_identifier

ToolHandler = Callable[[str, ToolParameters], str]
LabelBuilder = Callable[[ToolParameters], str]


class UnknownToolError(KeyError):
    """Raised when a tool id is not registered."""

    def __init__(self, tool_id: str) -> None:
        super().__init__(f"Tool '{tool_id}' is not registered")
        self.tool_id = tool_id


@dataclass(frozen=True, slots=True)
class ToolRef:
    """A transformation plus the way its history label is built."""

    id: str
    title: str
    handler: ToolHandler
    label: LabelBuilder
    description: str = ""
    fields: tuple[str, ...] = ()
    action: str = "Apply"

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ToolRef id cannot be empty")
        if not callable(self.handler) or not callable(self.label):
            raise TypeError("handler and label must be callable")

    def __call__(self, code: str, parameters: ToolParameters) -> str:
        return self.handler(code, parameters)


class ToolRegistry:
    """Ordered collection of tools keyed by id."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._tools: Dict[str, ToolRef] = {}
        self._logger_name = logger_name

    def register(self, tool: ToolRef, *, replace: bool = False) -> ToolRef:
        with span(
            "tools::register",
            logger_name=self._logger_name,
            component="tools",
            metadata={"tool_id": tool.id},
        ):
            if not replace and tool.id in self._tools:
                raise ValueError(f"Tool '{tool.id}' already registered")
            self._tools[tool.id] = tool
            return tool

    def get(self, tool_id: str) -> ToolRef:
        try:
            return self._tools[tool_id]
        except KeyError as exc:
            raise UnknownToolError(tool_id) from exc

    def unregister(self, tool_id: str) -> Optional[ToolRef]:
        return self._tools.pop(tool_id, None)

    def __contains__(self, tool_id: object) -> bool:
        return tool_id in self._tools

    def __iter__(self) -> Iterator[ToolRef]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)


def _rename(code: str, params: ToolParameters) -> str:
    return rename_identifier(code, params.rename.source, params.rename.target)


def _guard(code: str, params: ToolParameters) -> str:
    return insert_null_guard(code, params.guard.parameter, params.guard.method)


def _region(code: str, params: ToolParameters) -> str:
    return wrap_in_region(code, params.region.name, params.region.focus)


def _format(code: str, params: ToolParameters) -> str:
    del params
    return format_whitespace(code)


DEFAULT_TOOLS = (
    ToolRef(
        id="rename",
        title="Rename identifier",
        handler=_rename,
        label=lambda p: f"Rename {p.rename.source} → {p.rename.target}",
        description="Replace every exact occurrence of the identifier.",
        fields=("rename.source", "rename.target"),
        action="Rename",
    ),
    ToolRef(
        id="guard",
        title="Insert guard clause",
        handler=_guard,
        label=lambda p: f"Null check for {p.guard.parameter}",
        description="Add a null check at the top of the given method.",
        fields=("guard.method", "guard.parameter"),
        action="Insert guard clause",
    ),
    ToolRef(
        id="region",
        title="Structural region",
        handler=_region,
        label=lambda p: f"Region {p.region.name}",
        description="Wrap a block, or the whole file, in a named region.",
        fields=("region.name", "region.focus"),
        action="Create region",
    ),
    ToolRef(
        id="format",
        title="Format whitespace",
        handler=_format,
        label=lambda p: "Quick format",
        description="Strip trailing spaces and collapse blank lines.",
        action="Format whitespace",
    ),
)


def load_default_tools(registry: ToolRegistry) -> ToolRegistry:
    for tool in DEFAULT_TOOLS:
        registry.register(tool, replace=True)
    return registry


__all__ = [
    "DEFAULT_TOOLS",
    "ToolRef",
    "ToolRegistry",
    "UnknownToolError",
    "load_default_tools",
]
