"""Unit tests for StaticCatalogProvider."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from storagetui.constants.enums import LoadScope
from storagetui.controllers.base import ProviderError
from storagetui.controllers.catalog import CatalogFormatError, StaticCatalogProvider
from storagetui.controllers.catalog.provider import SAMPLE_CATALOG_PATH


class TestSampleCatalog:
    """Test the bundled sample catalog."""

    def test_sample_file_is_packaged(self) -> None:
        assert SAMPLE_CATALOG_PATH.is_file()

    def test_sample_accounts(self) -> None:
        provider = StaticCatalogProvider.sample()
        subscriptions = provider.list_subscriptions()
        assert [sub.name for sub in subscriptions] == ["Development", "Production"]
        assert [a.name for a in provider.list_accounts(subscriptions[0].id)] == ["acme-dev"]
        assert [a.name for a in provider.list_accounts(subscriptions[1].id)] == ["acme-prod"]

    def test_sample_containers_and_blobs(self) -> None:
        provider = StaticCatalogProvider.sample()
        assert [c.name for c in provider.list_containers("acme-dev")] == ["images", "logs"]
        assert [c.name for c in provider.list_containers("acme-prod")] == ["backups", "public"]
        assert [b.name for b in provider.list_blobs("acme-prod", "public")] == [
            "robots.txt",
            "index.html",
        ]
        assert [b.name for b in provider.list_blobs("acme-dev", "images")] == [
            "hero.jpg",
            "logo.svg",
        ]


class TestStaticCatalogProvider:
    """Test lookups and simulated failures."""

    def test_unknown_keys_list_empty(self, document) -> None:
        provider = StaticCatalogProvider.from_document(document)
        assert provider.list_accounts("missing") == []
        assert provider.list_containers("missing") == []
        assert provider.list_blobs("acme-dev", "missing") == []

    def test_returns_copies(self, document) -> None:
        provider = StaticCatalogProvider.from_document(document)
        provider.list_subscriptions().clear()
        assert len(provider.list_subscriptions()) == 3

    @pytest.mark.parametrize(
        ("scope", "key", "call"),
        [
            (LoadScope.SUBSCRIPTIONS, "*", lambda p: p.list_subscriptions()),
            (LoadScope.ACCOUNTS, "sub-dev", lambda p: p.list_accounts("sub-dev")),
            (LoadScope.CONTAINERS, "acme-dev", lambda p: p.list_containers("acme-dev")),
            (LoadScope.BLOBS, "acme-dev/logs", lambda p: p.list_blobs("acme-dev", "logs")),
        ],
    )
    def test_failures_raise_scoped_errors(self, document, scope, key, call) -> None:
        document["failures"] = {scope.value: {key: "simulated"}}
        provider = StaticCatalogProvider.from_document(document)
        with pytest.raises(ProviderError) as exc_info:
            call(provider)
        assert exc_info.value.scope == scope
        assert str(exc_info.value) == "simulated"

    def test_failure_only_hits_its_key(self, document) -> None:
        document["failures"] = {"blobs": {"acme-dev/logs": "simulated"}}
        provider = StaticCatalogProvider.from_document(document)
        assert len(provider.list_blobs("acme-dev", "images")) == 2

    def test_from_yaml(self, tmp_path: Path, document) -> None:
        path = tmp_path / "catalog.yaml"
        path.write_text(yaml.safe_dump(document), encoding="utf-8")
        provider = StaticCatalogProvider.from_yaml(path)
        assert len(provider.list_subscriptions()) == 3

    def test_from_yaml_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(CatalogFormatError):
            StaticCatalogProvider.from_yaml(tmp_path / "nope.yaml")

    def test_from_yaml_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("subscriptions: [\n", encoding="utf-8")
        with pytest.raises(CatalogFormatError):
            StaticCatalogProvider.from_yaml(path)
