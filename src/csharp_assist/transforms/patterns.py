"""Pattern helpers shared by the text transformations."""

from __future__ import annotations

import re

_METACHARACTERS = re.compile(r"[.*+?^${}()|\[\]\\]")

USING_SYSTEM = "using System;"


def escape_pattern(value: str) -> str:
    """Escape regex metacharacters so ``value`` only matches itself.

    Only ``. * + ? ^ $ { } ( ) | [ ] \\`` are escaped; every other character
    is already literal in a pattern and is left untouched.
    """

    return _METACHARACTERS.sub(r"\\\g<0>", value)


def whole_word(value: str) -> str:
    """Return a pattern source matching ``value`` as a whole word."""

    return rf"\b{escape_pattern(value)}\b"


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def ensure_using_system(code: str) -> str:
    if USING_SYSTEM in code:
        return code
    return f"{USING_SYSTEM}\n{code}"


__all__ = [
    "USING_SYSTEM",
    "ensure_using_system",
    "escape_pattern",
    "is_blank",
    "whole_word",
]
