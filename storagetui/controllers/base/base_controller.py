"""Base catalog provider contract and load result types.

Providers are called synchronously from the input loop. Every failure is
reported as a ``ProviderError`` carrying the catalog level that was being
fetched, so callers can show a scoped message without inspecting the cause.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from storagetui.constants.enums import LoadScope
from storagetui.models.catalog import (
    AccountInfo,
    BlobInfo,
    ContainerInfo,
    SubscriptionInfo,
)

logger = logging.getLogger(__name__)


class ProviderError(Exception):
    """A catalog fetch failed."""

    def __init__(self, scope: LoadScope, message: str) -> None:
        super().__init__(message)
        self.scope = scope
        self.message = message

    def describe(self) -> str:
        """Human readable message naming the scope and the cause."""
        return f"Error loading {self.scope.value}: {self.message}"


@dataclass
class LoadResult:
    """Outcome of a load operation that already handled its own failure."""

    success: bool
    error: ProviderError | None = None

    @classmethod
    def ok(cls) -> LoadResult:
        return cls(success=True)

    @classmethod
    def failed(cls, error: ProviderError) -> LoadResult:
        return cls(success=False, error=error)


class CatalogProvider(ABC):
    """Source of catalog data.

    Implementations must return records in a stable order; the tree and the
    content list never sort them. Any failure must be raised as
    ``ProviderError``.
    """

    @abstractmethod
    def list_subscriptions(self) -> list[SubscriptionInfo]:
        """Return all subscriptions."""
        ...

    @abstractmethod
    def list_accounts(self, subscription_id: str) -> list[AccountInfo]:
        """Return accounts of one subscription."""
        ...

    @abstractmethod
    def list_containers(self, account_name: str) -> list[ContainerInfo]:
        """Return containers of one account."""
        ...

    @abstractmethod
    def list_blobs(self, account_name: str, container_name: str) -> list[BlobInfo]:
        """Return blobs of one container."""
        ...
