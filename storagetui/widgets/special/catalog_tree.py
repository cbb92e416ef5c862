"""Tree widget for the catalog pane.

The explorer presenter owns expansion, so this tree only moves its cursor.
Enter, space and the arrow keys that would expand or collapse nodes are left
to the screen bindings.

CSS Classes: widget-catalog-tree
"""

from __future__ import annotations

from rich.text import Text
from textual.widgets import Tree

from storagetui.keyboard.navigation import CATALOG_TREE_BINDINGS
from storagetui.models.tree import CatalogNode, PlaceholderRef


class CatalogTree(Tree[CatalogNode], inherit_bindings=False):
    """Cursor-only tree whose node data is the catalog node it shows."""

    BINDINGS = CATALOG_TREE_BINDINGS
    DEFAULT_CLASSES = "widget-catalog-tree"

    def __init__(self, label: str, *, id: str | None = None, classes: str | None = None) -> None:
        super().__init__(label, id=id, classes=classes)
        self.show_root = False
        self.auto_expand = False
        self.guide_depth = 2

    @staticmethod
    def node_label(node: CatalogNode, label: str) -> Text:
        """Styled label; placeholders are dimmed, error placeholders red."""
        ref = node.ref
        if isinstance(ref, PlaceholderRef):
            return Text(label, style="red" if ref.is_error else "dim italic")
        return Text(label)


__all__ = ["CatalogTree"]
