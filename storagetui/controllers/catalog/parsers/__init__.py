"""Catalog document parsers."""

from storagetui.controllers.catalog.parsers.catalog_parser import (
    ALL_SUBSCRIPTIONS_KEY,
    CatalogFormatError,
    CatalogParser,
    ParsedCatalog,
)

__all__ = [
    "ALL_SUBSCRIPTIONS_KEY",
    "CatalogFormatError",
    "CatalogParser",
    "ParsedCatalog",
]
