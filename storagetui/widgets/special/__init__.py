"""Specialized widgets for the explorer panes."""

from storagetui.widgets.special.catalog_tree import CatalogTree
from storagetui.widgets.special.content_table import ContentTable

__all__ = [
    "CatalogTree",
    "ContentTable",
]
