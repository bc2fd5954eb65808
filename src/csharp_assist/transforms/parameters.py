"""Free-text parameters the tools read from the session."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class RenameParameters:
    source: str = "Planner"
    target: str = "TaskBoard"


@dataclass(slots=True)
class GuardParameters:
    method: str = "AddTask"
    parameter: str = "description"


@dataclass(slots=True)
class RegionParameters:
    name: str = "Task Management"
    focus: str = "public void Print"


@dataclass(slots=True)
class ToolParameters:
    """One parameter group per tool, edited by the presentation layer."""

    rename: RenameParameters = field(default_factory=RenameParameters)
    guard: GuardParameters = field(default_factory=GuardParameters)
    region: RegionParameters = field(default_factory=RegionParameters)

    def update(self, path: str, value: str) -> None:
        """Set a field addressed as ``"<group>.<field>"``, e.g. ``"rename.source"``."""

        group, field_name = self._resolve(path)
        setattr(group, field_name, value)

    def get(self, path: str) -> str:
        group, field_name = self._resolve(path)
        return str(getattr(group, field_name))

    def _resolve(self, path: str) -> tuple[object, str]:
        group_name, _, field_name = path.partition(".")
        if group_name not in _GROUPS:
            raise KeyError(f"Unknown tool parameter '{path}'")
        group = getattr(self, group_name)
        if field_name not in group.__slots__:
            raise KeyError(f"Unknown tool parameter '{path}'")
        return group, field_name


_GROUPS = ("rename", "guard", "region")


__all__ = [
    "RenameParameters",
    "GuardParameters",
    "RegionParameters",
    "ToolParameters",
]
