"""Widgets module for the storage explorer TUI.

This module provides the reusable widgets organized into submodules:
- feedback: Dialogs (SearchDialog)
- special: Specialized pane widgets (CatalogTree, ContentTable)
"""

# Feedback widgets
from storagetui.widgets.feedback import SearchDialog

# Special widgets
from storagetui.widgets.special import CatalogTree, ContentTable

__all__ = [
    "CatalogTree",
    "ContentTable",
    "SearchDialog",
]
