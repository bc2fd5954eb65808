"""Null guard insertion for C# method parameters."""

from __future__ import annotations

import re
from typing import Optional

from .patterns import ensure_using_system, escape_pattern, is_blank, whole_word

_ACCESS = r"(?:public|private|protected|internal)\s+"
_MODIFIERS = r"(?:static\s+)?(?:async\s+)?"
_RETURN_TYPE = r"[\w<>\[\]]+\s+"
_ANY_NAME = r"\w+"

GUARD_TEMPLATE = (
    "\n"
    "        if ({name} is null)\n"
    "        {{\n"
    "            throw new ArgumentNullException(nameof({name}));\n"
    "        }}\n"
)


def method_signature_pattern(
    parameter: str, method_name: Optional[str] = None
) -> re.Pattern[str]:
    """Compile the pattern locating a method declaration up to its ``{``.

    The parameter list must mention ``parameter`` as a whole word. Without a
    ``method_name`` any identifier is accepted as the method name.
    """

    name = _ANY_NAME if is_blank(method_name) else escape_pattern(method_name.strip())
    parameters = rf"\([^)]*{whole_word(parameter)}[^)]*\)"
    return re.compile(
        rf"{_ACCESS}{_MODIFIERS}{_RETURN_TYPE}{name}\s*{parameters}\s*\{{",
        re.MULTILINE,
    )


def render_guard(parameter: str) -> str:
    return GUARD_TEMPLATE.format(name=parameter)


def insert_null_guard(
    code: str, parameter: str, method_name: Optional[str] = None
) -> str:
    """Insert an ``ArgumentNullException`` guard into the first matching method.

    The guard lands right after the opening brace of the first declaration
    whose parameter list contains ``parameter``. ``using System;`` is
    prepended when missing. No matching method means no change. Calling this
    again on the result guards the same method a second time.
    """

    if is_blank(parameter):
        return code
    parameter = parameter.strip()

    match = method_signature_pattern(parameter, method_name).search(code)
    if match is None:
        return code

    insert_at = match.end()
    updated = code[:insert_at] + render_guard(parameter) + code[insert_at:]
    return ensure_using_system(updated)


__all__ = [
    "GUARD_TEMPLATE",
    "insert_null_guard",
    "method_signature_pattern",
    "render_guard",
]
