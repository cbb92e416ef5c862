"""All enum definitions for the TUI.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# Catalog Enums
# =============================================================================

class NodeKind(Enum):
    """Kinds of entries in the navigable catalog hierarchy."""

    ROOT = "root"
    PLACEHOLDER = "placeholder"
    SUBSCRIPTION = "subscription"
    ACCOUNT = "account"
    CONTAINER = "container"
    BLOB = "blob"


class LoadScope(Enum):
    """Catalog level a provider fetch was made for."""

    SUBSCRIPTIONS = "subscriptions"
    ACCOUNTS = "accounts"
    CONTAINERS = "containers"
    BLOBS = "blobs"


# =============================================================================
# Navigation Enums
# =============================================================================

class Pane(Enum):
    """Panes that can own input focus."""

    TREE = "tree"
    CONTENTS = "contents"
    PREVIEW = "preview"


class CommandKind(Enum):
    """Abstract commands decoded from key events."""

    QUIT = "quit"
    RELOAD = "reload"
    NEXT_PANE = "next_pane"
    PREV_PANE = "prev_pane"
    EXPAND_OR_ACTIVATE = "expand_or_activate"
    COLLAPSE_OR_PARENT = "collapse_or_parent"
    TOGGLE_SUBSCRIPTION = "toggle_subscription"
    OPEN_SEARCH = "open_search"
    SUBMIT_SEARCH = "submit_search"
    CANCEL_SEARCH = "cancel_search"
    CLEAR_SEARCH = "clear_search"


__all__ = [
    "CommandKind",
    "LoadScope",
    "NodeKind",
    "Pane",
]
