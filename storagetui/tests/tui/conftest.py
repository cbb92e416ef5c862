"""Shared fixtures for the storage explorer tests.

Providers here are real ``StaticCatalogProvider`` instances with call
recording and failure injection added, so the engine is exercised through the
same code path as in the app.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from storagetui.app import StorageExplorerApp
from storagetui.constants.enums import LoadScope, Pane
from storagetui.controllers.catalog import StaticCatalogProvider
from storagetui.controllers.catalog.parsers import CatalogParser
from storagetui.models.catalog import (
    AccountInfo,
    BlobInfo,
    ContainerInfo,
    SubscriptionInfo,
)

# =============================================================================
# Catalog documents
# =============================================================================

DEV_ID = "sub-dev"
PROD_ID = "sub-prod"
SANDBOX_ID = "sub-sandbox"


def catalog_document() -> dict[str, Any]:
    """Three subscriptions; the sandbox one has no accounts."""
    return {
        "subscriptions": [
            {
                "id": DEV_ID,
                "name": "Development",
                "accounts": [
                    {
                        "name": "acme-dev",
                        "region": "westeurope",
                        "containers": [
                            {
                                "name": "images",
                                "public_access": "private",
                                "blobs": [
                                    {
                                        "name": "hero.jpg",
                                        "size_bytes": 312844,
                                        "modified": "2024-05-12T10:05:00Z",
                                        "content_type": "image/jpeg",
                                    },
                                    {
                                        "name": "logo.svg",
                                        "size_bytes": 4821,
                                        "content_type": "image/svg+xml",
                                    },
                                ],
                            },
                            {
                                "name": "logs",
                                "public_access": "private",
                                "blobs": [
                                    {
                                        "name": "2024-05-10.log",
                                        "size_bytes": 982304,
                                        "modified": "2024-05-10T03:12:00Z",
                                        "content_type": "text/plain",
                                    },
                                    {
                                        "name": "2024-05-11.log",
                                        "size_bytes": 1048576,
                                        "modified": "2024-05-11T03:12:00Z",
                                        "content_type": "text/plain",
                                    },
                                ],
                            },
                            {"name": "empty", "public_access": "private", "blobs": []},
                        ],
                    }
                ],
            },
            {
                "id": PROD_ID,
                "name": "Production",
                "accounts": [
                    {
                        "name": "acme-prod",
                        "region": "eastus",
                        "containers": [
                            {
                                "name": "public",
                                "public_access": "blob",
                                "blobs": [
                                    {
                                        "name": "robots.txt",
                                        "size_bytes": 58,
                                        "content_type": "text/plain",
                                    },
                                    {
                                        "name": "index.html",
                                        "size_bytes": 2214,
                                        "content_type": "text/html",
                                    },
                                ],
                            },
                        ],
                    }
                ],
            },
            {"id": SANDBOX_ID, "name": "Sandbox", "accounts": []},
        ]
    }


# =============================================================================
# Providers
# =============================================================================


class CountingProvider(StaticCatalogProvider):
    """Static provider that records every call and can be told to fail."""

    def __init__(self, document: dict[str, Any] | None = None) -> None:
        super().__init__(CatalogParser().parse(document or catalog_document()))
        self.calls: Counter[tuple[str, ...]] = Counter()

    def fail(self, scope: LoadScope, key: str, message: str) -> None:
        self.catalog.failures.setdefault(scope, {})[key] = message

    def heal(self, scope: LoadScope, key: str) -> None:
        self.catalog.failures.get(scope, {}).pop(key, None)

    def count(self, method: str) -> int:
        return sum(n for call, n in self.calls.items() if call[0] == method)

    def list_subscriptions(self) -> list[SubscriptionInfo]:
        self.calls[("list_subscriptions",)] += 1
        return super().list_subscriptions()

    def list_accounts(self, subscription_id: str) -> list[AccountInfo]:
        self.calls[("list_accounts", subscription_id)] += 1
        return super().list_accounts(subscription_id)

    def list_containers(self, account_name: str) -> list[ContainerInfo]:
        self.calls[("list_containers", account_name)] += 1
        return super().list_containers(account_name)

    def list_blobs(self, account_name: str, container_name: str) -> list[BlobInfo]:
        self.calls[("list_blobs", account_name, container_name)] += 1
        return super().list_blobs(account_name, container_name)


# =============================================================================
# Display surface
# =============================================================================


class RecordingDisplay:
    """Display surface that keeps every push in order."""

    def __init__(self) -> None:
        self.pushes: list[tuple[str, Any]] = []
        self.exited = False

    def _record(self, surface: str, value: Any) -> None:
        self.pushes.append((surface, value))

    def show_tree(self, snapshot: Any) -> None:
        self._record("tree", snapshot)

    def show_contents(self, snapshot: Any) -> None:
        self._record("contents", snapshot)

    def show_details(self, text: str) -> None:
        self._record("details", text)

    def show_preview(self, snapshot: Any) -> None:
        self._record("preview", snapshot)

    def focus_pane(self, pane: Pane) -> None:
        self._record("focus", pane)

    def open_search(self, term: str) -> None:
        self._record("search", term)

    def exit(self) -> None:
        self.exited = True

    def surfaces(self) -> list[str]:
        return [surface for surface, _ in self.pushes]

    def last(self, surface: str) -> Any:
        for name, value in reversed(self.pushes):
            if name == surface:
                return value
        raise AssertionError(f"nothing pushed to {surface}")

    def clear(self) -> None:
        self.pushes.clear()


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def provider() -> CountingProvider:
    return CountingProvider()


@pytest.fixture
def display() -> RecordingDisplay:
    return RecordingDisplay()


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.yaml"


@pytest.fixture
def app(provider: CountingProvider, config_path: Path) -> StorageExplorerApp:
    """App over the test catalog with settings kept in a temp directory."""
    return StorageExplorerApp(config_path=config_path, provider=provider)


@pytest.fixture
def document() -> dict[str, Any]:
    """Fresh copy of the test catalog document, safe to modify."""
    return catalog_document()


@pytest.fixture
def make_provider() -> Callable[..., CountingProvider]:
    return CountingProvider
