"""Feedback widgets: modal dialogs."""

from storagetui.widgets.feedback.search_dialog import SearchDialog

__all__ = [
    "SearchDialog",
]
