"""Pure text transformations over a C# source buffer."""

from .formatter import format_whitespace
from .guard import insert_null_guard
from .parameters import (
    GuardParameters,
    RegionParameters,
    RenameParameters,
    ToolParameters,
)
from .patterns import escape_pattern
from .region import wrap_in_region
from .registry import (
    DEFAULT_TOOLS,
    ToolRef,
    ToolRegistry,
    UnknownToolError,
    load_default_tools,
)
from .rename import rename_identifier

__all__ = [
    "escape_pattern",
    "rename_identifier",
    "insert_null_guard",
    "wrap_in_region",
    "format_whitespace",
    "GuardParameters",
    "RegionParameters",
    "RenameParameters",
    "ToolParameters",
    "DEFAULT_TOOLS",
    "ToolRef",
    "ToolRegistry",
    "UnknownToolError",
    "load_default_tools",
]
