from __future__ import annotations

from typing import List, Sequence

from csharp_assist.adapters.textual import (
    HistoryRow,
    SessionController,
    SessionHooks,
    input_id,
    tool_cards,
)
from csharp_assist.seed import SAMPLE_CODE
from csharp_assist.session import EditorSession
from csharp_assist.transforms import ToolRef, ToolRegistry


class Recorder:
    def __init__(self) -> None:
        self.buffers: List[str] = []
        self.previews: List[str] = []
        self.histories: List[Sequence[HistoryRow]] = []
        self.statuses: List[str] = []

    def hooks(self) -> SessionHooks:
        return SessionHooks(
            update_buffer=self.buffers.append,
            update_preview=self.previews.append,
            update_history=self.histories.append,
            update_status=self.statuses.append,
        )


def make_controller(seed: str = SAMPLE_CODE, **kwargs: bool) -> tuple[SessionController, Recorder]:
    recorder = Recorder()
    controller = SessionController(EditorSession(seed), recorder.hooks(), **kwargs)
    return controller, recorder


def test_controller_pushes_initial_state() -> None:
    _, recorder = make_controller()

    assert recorder.buffers == [SAMPLE_CODE]
    assert len(recorder.previews) == 1
    assert len(recorder.histories[-1]) == 1
    assert recorder.histories[-1][0][1] == "Initial state"


def test_controller_apply_refreshes_everything() -> None:
    controller, recorder = make_controller()

    controller.apply("rename")

    assert "class TaskBoard" in recorder.buffers[-1]
    assert recorder.statuses[-1] == "Rename Planner → TaskBoard"
    labels = [label for _, label, _ in recorder.histories[-1]]
    assert labels == ["Rename Planner → TaskBoard", "Initial state"]


def test_controller_reports_unchanged_and_unknown_tools() -> None:
    controller, recorder = make_controller()

    assert controller.apply("format") is None
    assert recorder.statuses[-1] == "no changes"

    assert controller.apply("nope") is None
    assert recorder.statuses[-1] == "unknown tool: nope"


def test_controller_parameters_feed_tools() -> None:
    controller, recorder = make_controller()

    controller.update_parameter("region.focus", "")
    controller.update_parameter("region.name", "Everything")
    controller.apply("region")

    assert recorder.buffers[-1].startswith("#region Everything\n")
    assert recorder.buffers[-1].endswith("\n#endregion\n")


def test_controller_revert_and_restore() -> None:
    controller, recorder = make_controller()
    controller.apply("rename")
    controller.apply("guard")
    renamed_id = recorder.histories[-1][1][0]

    controller.revert_to(renamed_id)
    assert "class TaskBoard" in recorder.buffers[-1]
    assert "is null" not in recorder.buffers[-1]

    controller.restore_original()
    assert recorder.buffers[-1] == SAMPLE_CODE
    assert recorder.statuses[-1] == "restored: Initial state"
    assert len(recorder.histories[-1]) == 3

    assert controller.revert_to("missing") is None
    assert recorder.statuses[-1] == "unknown snapshot: missing"


def test_controller_edit_updates_preview_only() -> None:
    controller, recorder = make_controller("x")
    buffers_before = len(recorder.buffers)

    controller.edit("y   \n\n\n\nz")

    assert len(recorder.buffers) == buffers_before
    assert recorder.previews[-1] == "y\n\nz"
    assert controller.session.code == "y   \n\n\n\nz"


def test_controller_raw_preview() -> None:
    controller, recorder = make_controller("a  ", format_preview=False)

    assert recorder.previews[-1] == "a  "
    controller.edit("b  ")
    assert recorder.previews[-1] == "b  "


def test_tool_cards_come_from_the_session_registry() -> None:
    session = EditorSession()

    cards = tool_cards(session)

    assert [card.tool_id for card in cards] == ["rename", "guard", "region", "format"]
    rename = cards[0]
    assert rename.title == "Rename identifier"
    assert rename.description == "Replace every exact occurrence of the identifier."
    assert rename.fields == (("rename.source", "Planner"), ("rename.target", "TaskBoard"))
    assert rename.action == "Rename"
    assert rename.button_id == "apply-rename"
    assert cards[-1].fields == ()
    assert input_id("region.focus") == "region-focus"


def test_tool_cards_reflect_custom_tools_and_current_values() -> None:
    tools = ToolRegistry()
    tools.register(
        ToolRef(
            id="upper",
            title="Uppercase",
            handler=lambda code, params: code.upper(),
            label=lambda params: "Uppercase",
            description="Shout the whole buffer.",
            fields=("rename.source",),
            action="Shout",
        )
    )
    session = EditorSession("abc", tools=tools)
    session.set_parameter("rename.source", "Board")

    (card,) = tool_cards(session)

    assert card.title == "Uppercase"
    assert card.description == "Shout the whole buffer."
    assert card.fields == (("rename.source", "Board"),)
    assert card.action == "Shout"
