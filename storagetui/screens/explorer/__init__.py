"""Explorer screen module exports."""

from storagetui.screens.explorer.explorer_screen import ExplorerScreen
from storagetui.screens.explorer.presenter import (
    ContentLine,
    ContentsSnapshot,
    DisplaySurface,
    ExplorerPresenter,
    PreviewSnapshot,
    SessionState,
    TreeRow,
    TreeSnapshot,
    ViewState,
)

__all__ = [
    "ContentLine",
    "ContentsSnapshot",
    "DisplaySurface",
    "ExplorerPresenter",
    "ExplorerScreen",
    "PreviewSnapshot",
    "SessionState",
    "TreeRow",
    "TreeSnapshot",
    "ViewState",
]
