"""Keyboard bindings module.

This module provides all keyboard bindings for the storage explorer TUI.
Bindings are organized into three categories:

- app: App-level bindings (APP_BINDINGS)
- navigation: Screen and widget bindings (*_BINDINGS)
- commands: Abstract commands the bindings decode into
"""

from storagetui.keyboard.app import APP_BINDINGS
from storagetui.keyboard.commands import ACTION_COMMANDS, Command
from storagetui.keyboard.navigation import (
    CATALOG_TREE_BINDINGS,
    EXPLORER_SCREEN_BINDINGS,
    SEARCH_DIALOG_BINDINGS,
)

__all__ = [
    "ACTION_COMMANDS",
    "APP_BINDINGS",
    "CATALOG_TREE_BINDINGS",
    "EXPLORER_SCREEN_BINDINGS",
    "SEARCH_DIALOG_BINDINGS",
    "Command",
]
