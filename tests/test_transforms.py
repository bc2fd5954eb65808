from __future__ import annotations

import re

import pytest

from csharp_assist.transforms import (
    escape_pattern,
    format_whitespace,
    insert_null_guard,
    rename_identifier,
    wrap_in_region,
)
from csharp_assist.transforms.guard import render_guard

PLANNER = """public class Planner
{
    public void AddTask(string description)
    {
        _tasks.Add(description);
    }

    public void Print()
    {
        Console.WriteLine(_tasks.Count);
    }
}
"""


@pytest.mark.parametrize(
    "raw, escaped",
    [
        ("", ""),
        ("plain_name", "plain_name"),
        ("a.b", r"a\.b"),
        ("List<int>[]", r"List<int>\[\]"),
        ("(x|y)*+?", r"\(x\|y\)\*\+\?"),
        ("^${}\\", r"\^\$\{\}\\"),
    ],
)
def test_escape_pattern_prefixes_metacharacters(raw: str, escaped: str) -> None:
    assert escape_pattern(raw) == escaped


def test_escape_pattern_matches_only_the_literal() -> None:
    literal = "foo.bar(baz)[0]"

    pattern = re.compile(escape_pattern(literal))

    assert pattern.fullmatch(literal)
    assert pattern.search("fooXbar(baz)[0]") is None


def test_rename_replaces_whole_words() -> None:
    assert (
        rename_identifier("Planner p = new Planner();", "Planner", "Board")
        == "Board p = new Board();"
    )


def test_rename_skips_partial_words() -> None:
    assert rename_identifier("PlannerX x;", "Planner", "Board") == "PlannerX x;"
    assert rename_identifier("MyPlanner x;", "Planner", "Board") == "MyPlanner x;"


@pytest.mark.parametrize(
    "source, target",
    [("", "Board"), ("   ", "Board"), ("Planner", ""), ("Planner", "Planner"), (" Planner ", "Planner")],
)
def test_rename_noop_cases(source: str, target: str) -> None:
    code = "Planner p = new Planner();"

    assert rename_identifier(code, source, target) == code


def test_rename_trims_and_treats_input_literally() -> None:
    code = "var a = x.y; var b = xzy;"

    assert rename_identifier(code, "  x.y ", " value ") == "var a = value; var b = xzy;"
    assert rename_identifier("a + b", "a", r"\1") == r"\1 + b"


def test_rename_is_case_sensitive_and_touches_strings() -> None:
    code = 'planner = Planner("Planner");'

    assert rename_identifier(code, "Planner", "Board") == 'planner = Board("Board");'


def test_guard_inserted_after_matching_method_brace() -> None:
    result = insert_null_guard(PLANNER, "description", "AddTask")

    assert result.startswith("using System;\n")
    assert "AddTask(string description)\n    {" + render_guard("description") in result
    assert result.count("ArgumentNullException(nameof(description))") == 1
    assert result.endswith(PLANNER[PLANNER.index("    public void Print()") :])


def test_guard_without_method_name_uses_first_declaration() -> None:
    assert insert_null_guard(PLANNER, "description") == insert_null_guard(
        PLANNER, "description", "AddTask"
    )
    assert insert_null_guard(PLANNER, "description", "   ") == insert_null_guard(
        PLANNER, "description", "AddTask"
    )


def test_guard_repeated_call_inserts_duplicate() -> None:
    once = insert_null_guard(PLANNER, "description", "AddTask")
    twice = insert_null_guard(once, "description", "AddTask")

    assert twice.count("ArgumentNullException(nameof(description))") == 2
    assert twice.count("using System;") == 1


def test_guard_keeps_existing_using_directive() -> None:
    code = "using System;\n" + PLANNER

    result = insert_null_guard(code, "description", "AddTask")

    assert result.count("using System;") == 1
    assert result.startswith("using System;\npublic class Planner")


@pytest.mark.parametrize(
    "parameter, method",
    [("", "AddTask"), ("  ", "AddTask"), ("missing", None), ("description", "Print"), ("desc", None)],
)
def test_guard_noop_cases(parameter: str, method: str | None) -> None:
    assert insert_null_guard(PLANNER, parameter, method) == PLANNER


def test_guard_handles_modifiers_and_generic_return_types() -> None:
    code = (
        "using System;\n"
        "class Loader\n"
        "{\n"
        "    private static async Task<int> Load(string path, int retries)\n"
        "    {\n"
        "        return 0;\n"
        "    }\n"
        "}\n"
    )

    result = insert_null_guard(code, "path", "Load")

    assert "int retries)\n    {" + render_guard("path") + "\n        return 0;" in result


def test_region_wraps_whole_buffer_without_focus() -> None:
    assert wrap_in_region("x = 1;", "Setup") == "#region Setup\nx = 1;\n#endregion\n"
    assert wrap_in_region("x = 1;", " Setup ", "  ") == "#region Setup\nx = 1;\n#endregion\n"


def test_region_noop_on_blank_name() -> None:
    assert wrap_in_region(PLANNER, "", "Print") == PLANNER
    assert wrap_in_region(PLANNER, "   ") == PLANNER


def test_region_wraps_focus_through_closing_brace_line() -> None:
    code = "class A\n{\n    void Print()\n    {\n        Write();\n    }\n}\n"

    result = wrap_in_region(code, "Output", "void Print")

    assert result == (
        "class A\n{\n    #region Output\nvoid Print()\n    {\n"
        "        Write();\n    }\n#endregion\n}\n"
    )


def test_region_only_wraps_first_occurrence() -> None:
    code = "Print();\n}\nPrint();\n}\n"

    result = wrap_in_region(code, "R", "Print")

    assert result == "#region R\nPrint();\n}\n#endregion\nPrint();\n}\n"


def test_region_falls_back_to_whole_buffer_when_focus_missing() -> None:
    assert wrap_in_region(PLANNER, "Name", "NoSuchToken") == wrap_in_region(
        PLANNER, "Name"
    )


def test_format_strips_trailing_whitespace_and_collapses_blank_lines() -> None:
    code = "a  \nb\t\n\n\n\nc\n   \n \n\nd"

    assert format_whitespace(code) == "a\nb\n\nc\n\nd"


def test_format_keeps_single_blank_lines() -> None:
    assert format_whitespace("a\n\nb\n") == "a\n\nb\n"
    assert format_whitespace("") == ""


@pytest.mark.parametrize(
    "code",
    ["", "x", "a \n\n\n\n b  \n", "\n\n\n", PLANNER, "line\r\n\r\n\r\n\r\nnext"],
)
def test_format_is_idempotent(code: str) -> None:
    once = format_whitespace(code)

    assert format_whitespace(once) == once
