"""Whole-word identifier renaming."""

from __future__ import annotations

import re

from .patterns import is_blank, whole_word


def rename_identifier(code: str, source: str, target: str) -> str:
    """Replace every whole-word ``source`` in ``code`` with ``target``.

    Both names are trimmed first. Blank names or an identical pair leave the
    buffer untouched. Matches inside string literals and comments are renamed
    too; the buffer is never parsed.
    """

    if is_blank(source) or is_blank(target):
        return code
    source, target = source.strip(), target.strip()
    if source == target:
        return code

    # A callable replacement keeps backslashes in ``target`` literal.
    return re.sub(whole_word(source), lambda _match: target, code)


__all__ = ["rename_identifier"]
