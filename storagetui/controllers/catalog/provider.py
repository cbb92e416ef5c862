"""Static catalog provider backed by an in-memory or YAML catalog document."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from storagetui.constants.enums import LoadScope
from storagetui.controllers.base import CatalogProvider, ProviderError
from storagetui.controllers.catalog.parsers import (
    ALL_SUBSCRIPTIONS_KEY,
    CatalogFormatError,
    CatalogParser,
    ParsedCatalog,
)
from storagetui.models.catalog import (
    AccountInfo,
    BlobInfo,
    ContainerInfo,
    SubscriptionInfo,
)

logger = logging.getLogger(__name__)

SAMPLE_CATALOG_PATH = Path(__file__).resolve().parents[2] / "data" / "sample_catalog.yaml"


class StaticCatalogProvider(CatalogProvider):
    """Serves a fixed catalog.

    Unknown subscriptions, accounts, or containers list as empty. Entries in
    the document's ``failures`` section make the matching call raise
    ``ProviderError`` instead, which is how error paths are exercised without
    a real service.
    """

    def __init__(self, catalog: ParsedCatalog | None = None) -> None:
        self._catalog = catalog or ParsedCatalog()

    @classmethod
    def from_document(cls, document: Any) -> StaticCatalogProvider:
        return cls(CatalogParser().parse(document))

    @classmethod
    def from_yaml(cls, path: Path) -> StaticCatalogProvider:
        """Load a catalog document from a YAML file.

        Raises:
            CatalogFormatError: The file cannot be read or has the wrong shape.
        """
        try:
            with Path(path).expanduser().open(encoding="utf-8") as handle:
                document = yaml.safe_load(handle)
        except (OSError, yaml.YAMLError) as exc:
            raise CatalogFormatError(f"cannot load catalog {path}: {exc}") from exc
        logger.info("Loaded catalog from %s", path)
        return cls.from_document(document)

    @classmethod
    def sample(cls) -> StaticCatalogProvider:
        """Provider serving the bundled sample catalog."""
        return cls.from_yaml(SAMPLE_CATALOG_PATH)

    @property
    def catalog(self) -> ParsedCatalog:
        return self._catalog

    def _raise_if_failing(self, scope: LoadScope, key: str) -> None:
        message = self._catalog.failures.get(scope, {}).get(key)
        if message is not None:
            raise ProviderError(scope, message)

    def list_subscriptions(self) -> list[SubscriptionInfo]:
        self._raise_if_failing(LoadScope.SUBSCRIPTIONS, ALL_SUBSCRIPTIONS_KEY)
        return list(self._catalog.subscriptions)

    def list_accounts(self, subscription_id: str) -> list[AccountInfo]:
        self._raise_if_failing(LoadScope.ACCOUNTS, subscription_id)
        return list(self._catalog.accounts.get(subscription_id, []))

    def list_containers(self, account_name: str) -> list[ContainerInfo]:
        self._raise_if_failing(LoadScope.CONTAINERS, account_name)
        return list(self._catalog.containers.get(account_name, []))

    def list_blobs(self, account_name: str, container_name: str) -> list[BlobInfo]:
        self._raise_if_failing(LoadScope.BLOBS, f"{account_name}/{container_name}")
        return list(self._catalog.blobs.get((account_name, container_name), []))


__all__ = ["SAMPLE_CATALOG_PATH", "StaticCatalogProvider"]
