"""``#region`` wrapping for a focused block or the whole buffer."""

from __future__ import annotations

import re
from typing import Optional

from .patterns import is_blank, whole_word

REGION_START = "#region"
REGION_END = "#endregion"


def focus_pattern(focus: str) -> re.Pattern[str]:
    """Match from ``focus`` lazily through the next line holding only ``}``."""

    return re.compile(rf"{whole_word(focus)}[\s\S]*?\n\s*\}}", re.MULTILINE)


def _wrap_all(code: str, name: str) -> str:
    return f"{REGION_START} {name}\n{code}\n{REGION_END}\n"


def wrap_in_region(code: str, region_name: str, focus: Optional[str] = None) -> str:
    """Surround the focused block (or the whole buffer) with region markers.

    With a ``focus`` the span runs from its first whole-word occurrence to the
    first following closing-brace line, and only that span is wrapped. When
    ``focus`` is blank or not found the entire buffer is wrapped instead.
    """

    if is_blank(region_name):
        return code
    name = region_name.strip()

    if is_blank(focus):
        return _wrap_all(code, name)

    match = focus_pattern(focus.strip()).search(code)
    if match is None:
        return _wrap_all(code, name)

    wrapped = f"{REGION_START} {name}\n{match.group(0)}\n{REGION_END}"
    return code[: match.start()] + wrapped + code[match.end() :]


__all__ = ["REGION_START", "REGION_END", "focus_pattern", "wrap_in_region"]
