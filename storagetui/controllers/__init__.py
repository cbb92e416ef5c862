"""Controllers module for the storage explorer TUI.

This module provides the catalog provider contract, the bundled static
provider, and the navigation engine that keeps the panes in sync.
"""

from __future__ import annotations

# Base classes
from storagetui.controllers.base import (
    CatalogProvider,
    LoadResult,
    ProviderError,
)

# Catalog domain
from storagetui.controllers.catalog import (
    CatalogFormatError,
    CatalogParser,
    StaticCatalogProvider,
)

# Navigation engine
from storagetui.controllers.navigation import (
    ContentListProjection,
    ContentRow,
    PaneFocusController,
    SubscriptionFilterSet,
    TreeModel,
)

# Preview
from storagetui.controllers.preview import PreviewPipeline, apply_filter

__all__ = [
    # Base
    "CatalogFormatError",
    "CatalogParser",
    "CatalogProvider",
    # Navigation
    "ContentListProjection",
    "ContentRow",
    "LoadResult",
    "PaneFocusController",
    # Preview
    "PreviewPipeline",
    "ProviderError",
    # Catalog
    "StaticCatalogProvider",
    "SubscriptionFilterSet",
    "TreeModel",
    "apply_filter",
]
