"""Textual front-end for the editing session."""

from .controller import (
    HistoryRow,
    SessionController,
    SessionHooks,
    ToolCard,
    history_rows,
    input_id,
    tool_cards,
)

__all__ = [
    "HistoryRow",
    "SessionController",
    "SessionHooks",
    "ToolCard",
    "history_rows",
    "input_id",
    "tool_cards",
]
