"""Search dialog for the preview pane.

Standard Reactive Pattern:
- Dialogs are modal screens, inherit from ModalScreen
- No reactive state needed (they manage their own lifecycle)

CSS Classes: widget-search-dialog
"""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Input, Static

from storagetui.keyboard.navigation import SEARCH_DIALOG_BINDINGS

SEARCH_INPUT_ID = "search-input"


class SearchDialog(ModalScreen[str | None]):
    """Single-line search prompt.

    Dismisses with the submitted text on enter and with None on escape.
    """

    BINDINGS = SEARCH_DIALOG_BINDINGS
    DEFAULT_CLASSES = "widget-search-dialog"

    def __init__(self, term: str = "", title: str = "Search preview") -> None:
        super().__init__()
        self._term = term
        self._title = title

    def compose(self) -> ComposeResult:
        with Vertical(classes="dialog-container"):
            yield Static(self._title, classes="dialog-title")
            yield Input(value=self._term, placeholder="Filter lines...", id=SEARCH_INPUT_ID)
            yield Static("enter: apply  escape: cancel", classes="dialog-hint")

    def on_mount(self) -> None:
        self.query_one(f"#{SEARCH_INPUT_ID}", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.dismiss(event.value)

    def action_cancel(self) -> None:
        self.dismiss(None)


__all__ = ["SEARCH_INPUT_ID", "SearchDialog"]
