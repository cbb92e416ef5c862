"""Explorer screen configuration - widget IDs and column definitions."""

from __future__ import annotations

from storagetui.constants.enums import Pane

# =============================================================================
# Widget IDs
# =============================================================================

BODY_ID = "explorer-body"
TREE_PANE_ID = "tree-pane"
TREE_ID = "catalog-tree"
RIGHT_COLUMN_ID = "right-column"
CONTENTS_ID = "contents-table"
PREVIEW_ID = "preview-pane"
PREVIEW_TEXT_ID = "preview-text"
DETAILS_ID = "details-pane"
DETAILS_TEXT_ID = "details-text"

# Focusable widget per pane
PANE_WIDGET_IDS: dict[Pane, str] = {
    Pane.TREE: TREE_ID,
    Pane.CONTENTS: CONTENTS_ID,
    Pane.PREVIEW: PREVIEW_ID,
}

# =============================================================================
# Table Column Definitions: list[tuple[str, int]] = [(name, width), ...]
# =============================================================================

CONTENT_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("Name", 28),
    ("Details", 44),
]

# =============================================================================
# Styles
# =============================================================================

ERROR_ROW_STYLE = "bold red"
DETAIL_COLUMN_STYLE = "dim"
