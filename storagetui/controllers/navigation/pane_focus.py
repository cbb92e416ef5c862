"""Pane focus state machine."""

from __future__ import annotations

import logging

from storagetui.constants.enums import CommandKind, Pane

logger = logging.getLogger(__name__)

PANE_CYCLE: tuple[Pane, ...] = (Pane.TREE, Pane.CONTENTS, Pane.PREVIEW)

# Commands still accepted while the search overlay owns input.
SEARCH_OVERLAY_COMMANDS = frozenset(
    {CommandKind.QUIT, CommandKind.SUBMIT_SEARCH, CommandKind.CANCEL_SEARCH}
)


class PaneFocusController:
    """Tracks which of the three panes has focus.

    Tree -> Contents -> Preview -> Tree on ``next_pane``, reverse on
    ``previous_pane``. While the search overlay is open it captures input;
    closing it always lands on Preview.
    """

    def __init__(self) -> None:
        self.pane: Pane = Pane.TREE
        self.search_open: bool = False

    def next_pane(self) -> Pane:
        return self.focus(PANE_CYCLE[(PANE_CYCLE.index(self.pane) + 1) % len(PANE_CYCLE)])

    def previous_pane(self) -> Pane:
        return self.focus(PANE_CYCLE[(PANE_CYCLE.index(self.pane) - 1) % len(PANE_CYCLE)])

    def focus(self, pane: Pane) -> Pane:
        if pane is not self.pane:
            logger.debug("Focus %s -> %s", self.pane.value, pane.value)
        self.pane = pane
        return pane

    @staticmethod
    def refreshes_details(pane: Pane) -> bool:
        """Entering Tree or Contents recomputes the details panel."""
        return pane in (Pane.TREE, Pane.CONTENTS)

    def open_search(self) -> None:
        self.search_open = True

    def close_search(self) -> Pane:
        self.search_open = False
        return self.focus(Pane.PREVIEW)

    def accepts(self, command: CommandKind) -> bool:
        """Whether a command may run given the overlay state."""
        if self.search_open:
            return command in SEARCH_OVERLAY_COMMANDS
        return command not in (CommandKind.SUBMIT_SEARCH, CommandKind.CANCEL_SEARCH)


__all__ = ["PANE_CYCLE", "SEARCH_OVERLAY_COMMANDS", "PaneFocusController"]
