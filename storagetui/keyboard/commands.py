"""Abstract commands the explorer understands.

Key events are decoded into these by the Textual bindings; the presenter only
ever sees commands.
"""

from __future__ import annotations

from dataclasses import dataclass

from storagetui.constants.enums import CommandKind


@dataclass(frozen=True)
class Command:
    """A decoded user command. ``term`` is only used by SubmitSearch."""

    kind: CommandKind
    term: str = ""

    @classmethod
    def submit_search(cls, term: str) -> Command:
        return cls(CommandKind.SUBMIT_SEARCH, term)


QUIT = Command(CommandKind.QUIT)
RELOAD = Command(CommandKind.RELOAD)
NEXT_PANE = Command(CommandKind.NEXT_PANE)
PREV_PANE = Command(CommandKind.PREV_PANE)
EXPAND_OR_ACTIVATE = Command(CommandKind.EXPAND_OR_ACTIVATE)
COLLAPSE_OR_PARENT = Command(CommandKind.COLLAPSE_OR_PARENT)
TOGGLE_SUBSCRIPTION = Command(CommandKind.TOGGLE_SUBSCRIPTION)
OPEN_SEARCH = Command(CommandKind.OPEN_SEARCH)
CANCEL_SEARCH = Command(CommandKind.CANCEL_SEARCH)
CLEAR_SEARCH = Command(CommandKind.CLEAR_SEARCH)

# Binding action name -> command, used by the explorer screen.
ACTION_COMMANDS: dict[str, Command] = {
    "reload": RELOAD,
    "next_pane": NEXT_PANE,
    "prev_pane": PREV_PANE,
    "expand_or_activate": EXPAND_OR_ACTIVATE,
    "collapse_or_parent": COLLAPSE_OR_PARENT,
    "toggle_subscription": TOGGLE_SUBSCRIPTION,
    "open_search": OPEN_SEARCH,
    "clear_search": CLEAR_SEARCH,
}

__all__ = [
    "ACTION_COMMANDS",
    "CANCEL_SEARCH",
    "CLEAR_SEARCH",
    "COLLAPSE_OR_PARENT",
    "EXPAND_OR_ACTIVATE",
    "NEXT_PANE",
    "OPEN_SEARCH",
    "PREV_PANE",
    "QUIT",
    "RELOAD",
    "TOGGLE_SUBSCRIPTION",
    "Command",
]
