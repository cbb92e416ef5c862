"""Base provider contract for catalog controllers."""

from storagetui.controllers.base.base_controller import (
    CatalogProvider,
    LoadResult,
    ProviderError,
)

__all__ = [
    "CatalogProvider",
    "LoadResult",
    "ProviderError",
]
