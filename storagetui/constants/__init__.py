"""Constants module for the storage explorer TUI.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (labels, messages, titles)
- defaults.py: Default values for settings

Note: Keyboard bindings are defined in storagetui.keyboard module.
"""

from storagetui.constants.defaults import (
    DETAILS_FOLLOW_CONTENT_DEFAULT,
    THEME_DEFAULT,
)
from storagetui.constants.enums import (
    CommandKind,
    LoadScope,
    NodeKind,
    Pane,
)
from storagetui.constants.values import (
    APP_TITLE,
    ROOT_LABEL,
    TITLE_CONTENTS,
    TITLE_DETAILS,
    TITLE_PREVIEW,
    TITLE_TREE,
)

__all__ = [
    # Application
    "APP_TITLE",
    # Enums
    "CommandKind",
    # Defaults
    "DETAILS_FOLLOW_CONTENT_DEFAULT",
    "LoadScope",
    "NodeKind",
    "Pane",
    "ROOT_LABEL",
    "THEME_DEFAULT",
    # Titles
    "TITLE_CONTENTS",
    "TITLE_DETAILS",
    "TITLE_PREVIEW",
    "TITLE_TREE",
]
