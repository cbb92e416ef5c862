"""Catalog parser - turns a nested catalog document into indexed provider records."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from storagetui.constants.enums import LoadScope
from storagetui.models.catalog import (
    AccountInfo,
    BlobInfo,
    ContainerInfo,
    SubscriptionInfo,
)

logger = logging.getLogger(__name__)

# Key used under ``failures.subscriptions`` since that listing has no argument.
ALL_SUBSCRIPTIONS_KEY = "*"


class CatalogFormatError(ValueError):
    """Raised when a catalog document does not have the expected shape."""


@dataclass
class ParsedCatalog:
    """Catalog records indexed the way the provider looks them up."""

    subscriptions: list[SubscriptionInfo] = field(default_factory=list)
    accounts: dict[str, list[AccountInfo]] = field(default_factory=dict)
    containers: dict[str, list[ContainerInfo]] = field(default_factory=dict)
    blobs: dict[tuple[str, str], list[BlobInfo]] = field(default_factory=dict)
    failures: dict[LoadScope, dict[str, str]] = field(default_factory=dict)


class CatalogParser:
    """Parses catalog documents into structured records.

    Expected document shape::

        subscriptions:
          - id: sub-1
            name: Development
            accounts:
              - name: acme-dev
                region: westeurope
                containers:
                  - name: logs
                    public_access: private
                    blobs:
                      - {name: a.log, size_bytes: 10, content_type: text/plain}
        failures:
          blobs:
            acme-dev/logs: "permission denied"
    """

    def parse(self, document: Any) -> ParsedCatalog:
        """Parse a whole catalog document.

        Raises:
            CatalogFormatError: The document or one of its records is malformed.
        """
        if document is None:
            return ParsedCatalog()
        if not isinstance(document, dict):
            raise CatalogFormatError("catalog document must be a mapping")

        catalog = ParsedCatalog()
        for raw_subscription in self._as_list(document.get("subscriptions"), "subscriptions"):
            subscription = self._model(SubscriptionInfo, raw_subscription, "subscription")
            catalog.subscriptions.append(subscription)
            accounts = catalog.accounts.setdefault(subscription.id, [])
            for raw_account in self._as_list(raw_subscription.get("accounts"), "accounts"):
                account = self._model(AccountInfo, raw_account, "account")
                accounts.append(account)
                containers = catalog.containers.setdefault(account.name, [])
                for raw_container in self._as_list(raw_account.get("containers"), "containers"):
                    container = self._model(ContainerInfo, raw_container, "container")
                    containers.append(container)
                    blobs = catalog.blobs.setdefault((account.name, container.name), [])
                    for raw_blob in self._as_list(raw_container.get("blobs"), "blobs"):
                        blobs.append(self._model(BlobInfo, raw_blob, "blob"))

        catalog.failures = self.parse_failures(document.get("failures"))
        logger.debug(
            "Parsed catalog with %d subscriptions and %d accounts",
            len(catalog.subscriptions),
            sum(len(items) for items in catalog.accounts.values()),
        )
        return catalog

    def parse_failures(self, raw: Any) -> dict[LoadScope, dict[str, str]]:
        """Parse the optional ``failures`` section used to simulate errors."""
        if raw is None:
            return {}
        if not isinstance(raw, dict):
            raise CatalogFormatError("failures must be a mapping")
        failures: dict[LoadScope, dict[str, str]] = {}
        for scope_name, entries in raw.items():
            try:
                scope = LoadScope(str(scope_name))
            except ValueError as exc:
                raise CatalogFormatError(f"unknown failure scope: {scope_name}") from exc
            if not isinstance(entries, dict):
                raise CatalogFormatError(f"failures.{scope_name} must be a mapping")
            failures[scope] = {str(key): str(message) for key, message in entries.items()}
        return failures

    @staticmethod
    def _as_list(value: Any, what: str) -> list[dict[str, Any]]:
        if value is None:
            return []
        if not isinstance(value, list) or not all(isinstance(item, dict) for item in value):
            raise CatalogFormatError(f"{what} must be a list of mappings")
        return value

    @staticmethod
    def _model(model: type, raw: dict[str, Any], what: str) -> Any:
        try:
            return model.model_validate(raw)
        except ValidationError as exc:
            raise CatalogFormatError(f"invalid {what} record: {exc}") from exc


__all__ = [
    "ALL_SUBSCRIPTIONS_KEY",
    "CatalogFormatError",
    "CatalogParser",
    "ParsedCatalog",
]
