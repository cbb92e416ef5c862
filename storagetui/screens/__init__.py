"""Storage explorer TUI screens.

Domain Structure:
    - explorer/ - Catalog tree, contents, preview and details panes

Note: keybindings live in the keyboard/ package:
    - storagetui.keyboard.EXPLORER_SCREEN_BINDINGS
    - storagetui.keyboard.commands - abstract commands the bindings map to
"""

from __future__ import annotations

from storagetui.screens.explorer import ExplorerPresenter, ExplorerScreen

__all__ = [
    "ExplorerPresenter",
    "ExplorerScreen",
]
