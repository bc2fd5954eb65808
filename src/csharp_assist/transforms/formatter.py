"""Whitespace normalization."""

from __future__ import annotations

import re

_BLANK_RUN = re.compile(r"\n{3,}")


def format_whitespace(code: str) -> str:
    """Strip trailing whitespace and squeeze blank-line runs to a single one."""

    trimmed = "\n".join(line.rstrip() for line in code.split("\n"))
    return _BLANK_RUN.sub("\n\n", trimmed)


__all__ = ["format_whitespace"]
