"""Lazily loaded catalog tree.

The tree is rebuilt wholesale on ``load_root`` and extended one level at a time
on ``expand``. Children keep the provider's order. Provider failures below the
root never escape: they are returned as a failed ``LoadResult`` and logged.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from storagetui.constants.enums import LoadScope, NodeKind
from storagetui.constants.values import (
    MSG_ERROR_ACCOUNTS,
    MSG_ERROR_SUBSCRIPTIONS,
    MSG_NO_ACCOUNTS,
    MSG_NO_BLOBS,
    MSG_NO_CONTAINERS,
    MSG_NO_SUBSCRIPTIONS,
    ROOT_LABEL,
)
from storagetui.controllers.base import CatalogProvider, LoadResult, ProviderError
from storagetui.controllers.navigation.subscription_filter import SubscriptionFilterSet
from storagetui.models.catalog import BlobInfo
from storagetui.models.tree import (
    AccountRef,
    BlobRef,
    Breadcrumb,
    CatalogNode,
    ContainerRef,
    RootRef,
    SubscriptionRef,
    placeholder_node,
)
from storagetui.utils.formatting import subscription_label

logger = logging.getLogger(__name__)


class TreeModel:
    """Tree of subscriptions, accounts, containers and blobs."""

    def __init__(
        self,
        provider: CatalogProvider,
        filters: SubscriptionFilterSet | None = None,
    ) -> None:
        self._provider = provider
        self.filters = filters or SubscriptionFilterSet()
        self.root = self._new_root()
        # Eager-expansion failures from the most recent load_root.
        self.load_errors: list[ProviderError] = []

    @staticmethod
    def _new_root() -> CatalogNode:
        return CatalogNode(ref=RootRef(name=ROOT_LABEL), label=ROOT_LABEL, expanded=True)

    # =========================================================================
    # Loading
    # =========================================================================

    def load_root(self) -> CatalogNode:
        """Re-fetch all subscriptions and rebuild the tree.

        Enabled subscriptions are loaded and expanded one after another. A
        failing account fetch only degrades that subscription.

        Raises:
            ProviderError: Listing subscriptions failed. The tree is replaced
                by a single error placeholder and nothing else changes.
        """
        self.load_errors = []
        try:
            subscriptions = self._provider.list_subscriptions()
        except ProviderError as exc:
            logger.warning("Subscription listing failed: %s", exc)
            root = self._new_root()
            root.set_children([placeholder_node(MSG_ERROR_SUBSCRIPTIONS, Breadcrumb(), is_error=True)])
            self.root = root
            raise

        self.filters.merge(subscription.id for subscription in subscriptions)
        root = self._new_root()
        if not subscriptions:
            root.set_children([placeholder_node(MSG_NO_SUBSCRIPTIONS, Breadcrumb())])
            self.root = root
            return root

        nodes: list[CatalogNode] = []
        for subscription in subscriptions:
            ref = SubscriptionRef(id=subscription.id, name=subscription.name)
            nodes.append(
                CatalogNode(
                    ref=ref,
                    label=subscription_label(ref.name, self.filters.is_enabled(ref.id)),
                    breadcrumb=Breadcrumb.with_subscription(ref),
                )
            )
        root.set_children(nodes)

        for node in nodes:
            if self.filters.is_enabled(node.ref.id):
                result = self._open_subscription(node)
                if result.error is not None:
                    self.load_errors.append(result.error)

        self.root = root
        logger.info(
            "Loaded %d subscriptions (%d failed to expand)",
            len(nodes),
            len(self.load_errors),
        )
        return root

    def expand(self, node: CatalogNode) -> LoadResult:
        """Load the next level once and mark the node expanded.

        Already loaded nodes are only flagged expanded. On failure the node
        stays childless and its expanded flag is left alone.
        """
        if node.kind not in (NodeKind.SUBSCRIPTION, NodeKind.ACCOUNT, NodeKind.CONTAINER):
            return LoadResult.ok()
        if node.kind == NodeKind.SUBSCRIPTION and not self.filters.is_enabled(node.ref.id):
            return LoadResult.ok()
        if node.is_loaded:
            node.expanded = True
            return LoadResult.ok()

        result = self._fetch_children(node)
        if result.success:
            node.expanded = True
        return result

    def collapse(self, node: CatalogNode) -> None:
        """Hide children without discarding them."""
        node.expanded = False

    def toggle_expanded(self, node: CatalogNode) -> LoadResult:
        if node.expanded:
            self.collapse(node)
            return LoadResult.ok()
        return self.expand(node)

    def toggle_subscription_enabled(self, node: CatalogNode) -> LoadResult:
        """Flip a subscription's enablement and load or drop its accounts.

        Raises:
            ValueError: ``node`` is not a subscription.
        """
        if node.kind != NodeKind.SUBSCRIPTION:
            raise ValueError(f"cannot toggle a {node.kind.value} node")
        ref = node.ref
        enabled = self.filters.toggle(ref.id)
        node.label = subscription_label(ref.name, enabled)

        if not enabled:
            node.clear_children()
            node.expanded = False
            return LoadResult.ok()

        node.clear_children()
        return self._open_subscription(node)

    def _open_subscription(self, node: CatalogNode) -> LoadResult:
        """Fetch accounts and expand; a failure becomes an error placeholder."""
        result = self._fetch_children(node)
        if not result.success:
            node.set_children(
                [placeholder_node(MSG_ERROR_ACCOUNTS, node.breadcrumb, is_error=True)]
            )
        node.expanded = True
        return result

    def _fetch_children(self, node: CatalogNode) -> LoadResult:
        try:
            if node.kind == NodeKind.SUBSCRIPTION:
                children = self._account_nodes(node)
                scope = LoadScope.ACCOUNTS
            elif node.kind == NodeKind.ACCOUNT:
                children = self._container_nodes(node)
                scope = LoadScope.CONTAINERS
            else:
                children = self._blob_nodes(node)
                scope = LoadScope.BLOBS
        except ProviderError as exc:
            logger.warning("Loading %s for %s failed: %s", exc.scope.value, node.name, exc)
            return LoadResult.failed(exc)

        node.set_children(children)
        logger.debug("Loaded %d %s under %s", len(children), scope.value, node.name)
        return LoadResult.ok()

    def _account_nodes(self, node: CatalogNode) -> list[CatalogNode]:
        accounts = self._provider.list_accounts(node.ref.id)
        if not accounts:
            return [placeholder_node(MSG_NO_ACCOUNTS, node.breadcrumb)]
        children = []
        for account in accounts:
            ref = AccountRef(name=account.name, region=account.region)
            children.append(
                CatalogNode(ref=ref, label=ref.name, breadcrumb=node.breadcrumb.with_account(ref))
            )
        return children

    def _container_nodes(self, node: CatalogNode) -> list[CatalogNode]:
        containers = self._provider.list_containers(node.ref.name)
        if not containers:
            return [placeholder_node(MSG_NO_CONTAINERS, node.breadcrumb)]
        children = []
        for container in containers:
            ref = ContainerRef(name=container.name, public_access=container.public_access)
            children.append(
                CatalogNode(ref=ref, label=ref.name, breadcrumb=node.breadcrumb.with_container(ref))
            )
        return children

    def _blob_nodes(self, node: CatalogNode) -> list[CatalogNode]:
        crumb = node.breadcrumb
        blobs = self._provider.list_blobs(crumb.account, node.ref.name)
        if not blobs:
            return [placeholder_node(MSG_NO_BLOBS, crumb)]
        return [CatalogNode(ref=blob_ref(blob), label=blob.name, breadcrumb=crumb) for blob in blobs]

    # =========================================================================
    # Queries
    # =========================================================================

    def parent_of(self, node: CatalogNode) -> CatalogNode | None:
        return node.parent

    def visible_nodes(self) -> list[CatalogNode]:
        """Nodes shown on screen, depth first, excluding the root."""
        return list(self._walk_visible(self.root))

    def _walk_visible(self, node: CatalogNode) -> Iterator[CatalogNode]:
        if not node.expanded or not node.children:
            return
        for child in node.children:
            yield child
            yield from self._walk_visible(child)

    def first_node(self) -> CatalogNode:
        """Default cursor position after a reload."""
        if self.root.children:
            return self.root.children[0]
        return self.root


def blob_ref(blob: BlobInfo) -> BlobRef:
    """Blob payload from a provider record."""
    return BlobRef(
        name=blob.name,
        size_bytes=blob.size_bytes,
        modified=blob.modified,
        content_type=blob.content_type,
    )


__all__ = ["TreeModel", "blob_ref"]
