"""Screen-specific keyboard bindings.

Each action name maps to a command in ``storagetui.keyboard.commands``.
"""

from textual.binding import Binding

# ============================================================================
# Explorer screen
# ============================================================================

EXPLORER_SCREEN_BINDINGS: list[Binding] = [
    Binding("r", "reload", "Refresh"),
    Binding("tab", "next_pane", "Next pane", priority=True),
    Binding("shift+tab", "prev_pane", "Prev pane", priority=True, show=False),
    Binding("enter", "expand_or_activate", "Expand", show=False),
    Binding("right", "expand_or_activate", "Expand", show=False),
    Binding("left", "collapse_or_parent", "Collapse", show=False),
    Binding("space", "toggle_subscription", "Toggle subscription"),
    Binding("slash", "open_search", "Search"),
    Binding("escape", "clear_search", "Clear search"),
]

# ============================================================================
# Search dialog
# ============================================================================

SEARCH_DIALOG_BINDINGS: list[Binding] = [
    Binding("escape", "cancel", "Cancel"),
]

# ============================================================================
# Catalog tree (cursor movement only, expansion is owned by the screen)
# ============================================================================

CATALOG_TREE_BINDINGS: list[Binding] = [
    Binding("up", "cursor_up", "Cursor Up", show=False),
    Binding("down", "cursor_down", "Cursor Down", show=False),
    Binding("home", "scroll_home", "Top", show=False),
    Binding("end", "scroll_end", "Bottom", show=False),
    Binding("pageup", "page_up", "Page Up", show=False),
    Binding("pagedown", "page_down", "Page Down", show=False),
]

__all__ = [
    "CATALOG_TREE_BINDINGS",
    "EXPLORER_SCREEN_BINDINGS",
    "SEARCH_DIALOG_BINDINGS",
]
