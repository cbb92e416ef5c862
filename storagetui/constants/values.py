"""Scalar constants for the TUI.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "Storage Explorer"
ROOT_LABEL: Final = "Subscriptions"

# ============================================================================
# Subscription labels
# ============================================================================

SUBSCRIPTION_ENABLED_MARK: Final = "(x)"
SUBSCRIPTION_DISABLED_MARK: Final = "( )"

# ============================================================================
# Placeholder messages (tree and contents)
# ============================================================================

MSG_NO_SUBSCRIPTIONS: Final = "No subscriptions found."
MSG_NO_ACCOUNTS: Final = "No accounts."
MSG_NO_CONTAINERS: Final = "No containers."
MSG_NO_BLOBS: Final = "No blobs."
MSG_NO_BLOBS_IN_CONTAINER: Final = "No blobs in container."
MSG_ERROR_SUBSCRIPTIONS: Final = "Error loading subscriptions."
MSG_ERROR_ACCOUNTS: Final = "Error loading accounts."
MSG_ERROR_DATA: Final = "Error loading data."

MSG_SELECT_SUBSCRIPTION: Final = "Select a subscription to view accounts."
MSG_SELECT_ACCOUNT: Final = "Select an account to view containers."
MSG_SELECT_CONTAINER: Final = "Select a container to view blobs."
MSG_SUBSCRIPTION_DISABLED: Final = "Subscription disabled."

# ============================================================================
# Details / preview messages
# ============================================================================

MSG_BROWSE_ACCOUNTS: Final = "Select a subscription to browse accounts."
MSG_NO_SELECTION: Final = "No selection."
MSG_SELECT_BLOB: Final = "Select a blob to preview."
MSG_NO_PREVIEW: Final = "No preview available."
MSG_UNABLE_TO_LOAD: Final = "Unable to load data."

# ============================================================================
# Pane titles
# ============================================================================

TITLE_TREE: Final = "Subscriptions"
TITLE_CONTENTS: Final = "Contents"
TITLE_PREVIEW: Final = "Preview"
TITLE_DETAILS: Final = "Details"

__all__ = [
    "APP_TITLE",
    "MSG_BROWSE_ACCOUNTS",
    "MSG_ERROR_ACCOUNTS",
    "MSG_ERROR_DATA",
    "MSG_ERROR_SUBSCRIPTIONS",
    "MSG_NO_ACCOUNTS",
    "MSG_NO_BLOBS",
    "MSG_NO_BLOBS_IN_CONTAINER",
    "MSG_NO_CONTAINERS",
    "MSG_NO_PREVIEW",
    "MSG_NO_SELECTION",
    "MSG_NO_SUBSCRIPTIONS",
    "MSG_SELECT_ACCOUNT",
    "MSG_SELECT_BLOB",
    "MSG_SELECT_CONTAINER",
    "MSG_SELECT_SUBSCRIPTION",
    "MSG_SUBSCRIPTION_DISABLED",
    "MSG_UNABLE_TO_LOAD",
    "ROOT_LABEL",
    "SUBSCRIPTION_DISABLED_MARK",
    "SUBSCRIPTION_ENABLED_MARK",
    "TITLE_CONTENTS",
    "TITLE_DETAILS",
    "TITLE_PREVIEW",
    "TITLE_TREE",
]
