"""Row-cursor table for the contents pane.

CSS Classes: widget-content-table
"""

from __future__ import annotations

from textual.binding import Binding
from textual.widgets import DataTable


class ContentTable(DataTable, inherit_bindings=False):
    """DataTable limited to vertical cursor movement.

    Enter is not bound here; activation goes through the screen so it reaches
    the presenter as a command.
    """

    BINDINGS = [
        Binding("up", "cursor_up", "Cursor Up", show=False),
        Binding("down", "cursor_down", "Cursor Down", show=False),
        Binding("pageup", "page_up", "Page Up", show=False),
        Binding("pagedown", "page_down", "Page Down", show=False),
        Binding("home", "scroll_top", "Top", show=False),
        Binding("end", "scroll_bottom", "Bottom", show=False),
    ]
    DEFAULT_CLASSES = "widget-content-table"

    def __init__(self, *, id: str | None = None, classes: str | None = None) -> None:
        super().__init__(
            id=id,
            classes=classes,
            cursor_type="row",
            zebra_stripes=True,
            show_cursor=True,
        )


__all__ = ["ContentTable"]
