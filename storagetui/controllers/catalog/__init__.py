"""Catalog domain: provider implementations and document parsing."""

from storagetui.controllers.catalog.parsers import CatalogFormatError, CatalogParser
from storagetui.controllers.catalog.provider import StaticCatalogProvider

__all__ = ["CatalogFormatError", "CatalogParser", "StaticCatalogProvider"]
