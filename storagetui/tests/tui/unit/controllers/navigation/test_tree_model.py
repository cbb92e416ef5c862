"""Unit tests for TreeModel - lazy loading, expansion and subscription toggles.

This module tests:
- load_root building subscriptions and eagerly expanding enabled ones
- Subscription listing failure replacing the tree with an error node
- Eager account failures degrading only one subscription
- expand / collapse idempotency and provider call counts
- Empty and failing child listings
- toggle_subscription_enabled round trips
- Visible node traversal and parent back-references
"""

from __future__ import annotations

import pytest

from storagetui.constants.enums import LoadScope, NodeKind
from storagetui.constants.values import (
    MSG_ERROR_ACCOUNTS,
    MSG_ERROR_SUBSCRIPTIONS,
    MSG_NO_ACCOUNTS,
    MSG_NO_BLOBS,
    MSG_NO_CONTAINERS,
    MSG_NO_SUBSCRIPTIONS,
)
from storagetui.controllers.base import ProviderError
from storagetui.controllers.navigation import SubscriptionFilterSet, TreeModel
from storagetui.models.tree import PlaceholderRef

# =============================================================================
# Helpers
# =============================================================================


def child_names(node) -> list[str]:
    return [child.name for child in node.children or []]


def subscription(tree: TreeModel, subscription_id: str):
    for node in tree.root.children:
        if node.kind == NodeKind.SUBSCRIPTION and node.ref.id == subscription_id:
            return node
    raise AssertionError(f"no subscription {subscription_id}")


# =============================================================================
# load_root
# =============================================================================


class TestLoadRoot:
    """Tests for TreeModel.load_root."""

    def test_builds_one_node_per_subscription_in_order(self, provider) -> None:
        tree = TreeModel(provider)
        root = tree.load_root()
        assert [node.ref.id for node in root.children] == ["sub-dev", "sub-prod", "sub-sandbox"]

    def test_labels_show_enabled_mark(self, provider) -> None:
        tree = TreeModel(provider)
        tree.load_root()
        assert subscription(tree, "sub-dev").label == "(x) Development"

    def test_enabled_subscriptions_are_expanded_eagerly(self, provider) -> None:
        tree = TreeModel(provider)
        tree.load_root()
        dev = subscription(tree, "sub-dev")
        assert dev.expanded is True
        assert child_names(dev) == ["acme-dev"]
        assert provider.count("list_accounts") == 3

    def test_disabled_subscription_is_not_fetched(self, provider) -> None:
        tree = TreeModel(provider, SubscriptionFilterSet(disabled=["sub-prod"]))
        tree.load_root()
        prod = subscription(tree, "sub-prod")
        assert prod.children is None
        assert prod.expanded is False
        assert prod.label == "( ) Production"
        assert provider.calls[("list_accounts", "sub-prod")] == 0

    def test_subscription_without_accounts_gets_placeholder(self, provider) -> None:
        tree = TreeModel(provider)
        tree.load_root()
        sandbox = subscription(tree, "sub-sandbox")
        assert child_names(sandbox) == [MSG_NO_ACCOUNTS]
        assert sandbox.children[0].kind == NodeKind.PLACEHOLDER

    def test_no_subscriptions_gives_single_placeholder(self, make_provider) -> None:
        tree = TreeModel(make_provider({"subscriptions": []}))
        root = tree.load_root()
        assert child_names(root) == [MSG_NO_SUBSCRIPTIONS]

    def test_subscription_failure_replaces_tree_and_raises(self, provider) -> None:
        tree = TreeModel(provider)
        provider.fail(LoadScope.SUBSCRIPTIONS, "*", "token expired")
        with pytest.raises(ProviderError) as exc_info:
            tree.load_root()
        assert exc_info.value.scope == LoadScope.SUBSCRIPTIONS
        assert child_names(tree.root) == [MSG_ERROR_SUBSCRIPTIONS]
        placeholder = tree.root.children[0].ref
        assert isinstance(placeholder, PlaceholderRef)
        assert placeholder.is_error is True

    def test_subscription_failure_leaves_enablement_untouched(self, provider) -> None:
        filters = SubscriptionFilterSet(disabled=["sub-prod"])
        tree = TreeModel(provider, filters)
        provider.fail(LoadScope.SUBSCRIPTIONS, "*", "boom")
        with pytest.raises(ProviderError):
            tree.load_root()
        assert filters.disabled_ids() == ["sub-prod"]
        assert provider.count("list_accounts") == 0

    def test_eager_failure_degrades_only_that_subscription(self, provider) -> None:
        provider.fail(LoadScope.ACCOUNTS, "sub-dev", "forbidden")
        tree = TreeModel(provider)
        tree.load_root()

        dev = subscription(tree, "sub-dev")
        assert child_names(dev) == [MSG_ERROR_ACCOUNTS]
        assert dev.children[0].ref.is_error is True
        assert child_names(subscription(tree, "sub-prod")) == ["acme-prod"]
        assert [error.scope for error in tree.load_errors] == [LoadScope.ACCOUNTS]
        assert tree.load_errors[0].message == "forbidden"

    def test_reload_twice_preserves_enablement(self, provider) -> None:
        tree = TreeModel(provider)
        tree.load_root()
        tree.toggle_subscription_enabled(subscription(tree, "sub-prod"))
        before = tree.filters.disabled_ids()

        tree.load_root()
        tree.load_root()

        assert tree.filters.disabled_ids() == before == ["sub-prod"]
        assert subscription(tree, "sub-prod").label == "( ) Production"

    def test_reload_clears_previous_load_errors(self, provider) -> None:
        provider.fail(LoadScope.ACCOUNTS, "sub-dev", "forbidden")
        tree = TreeModel(provider)
        tree.load_root()
        provider.heal(LoadScope.ACCOUNTS, "sub-dev")
        tree.load_root()
        assert tree.load_errors == []
        assert child_names(subscription(tree, "sub-dev")) == ["acme-dev"]


# =============================================================================
# expand / collapse
# =============================================================================


class TestExpandCollapse:
    """Tests for TreeModel.expand and TreeModel.collapse."""

    @pytest.fixture
    def tree(self, provider) -> TreeModel:
        tree = TreeModel(provider)
        tree.load_root()
        return tree

    def account(self, tree: TreeModel):
        return subscription(tree, "sub-dev").children[0]

    def test_expand_loads_containers_in_provider_order(self, tree) -> None:
        account = self.account(tree)
        result = tree.expand(account)
        assert result.success is True
        assert child_names(account) == ["images", "logs", "empty"]
        assert account.expanded is True

    def test_expand_twice_calls_provider_once(self, tree, provider) -> None:
        account = self.account(tree)
        tree.expand(account)
        tree.expand(account)
        assert provider.calls[("list_containers", "acme-dev")] == 1

    def test_zero_containers_gives_single_placeholder(self, document, make_provider) -> None:
        document["subscriptions"][0]["accounts"][0]["containers"] = []
        tree = TreeModel(make_provider(document))
        tree.load_root()
        account = subscription(tree, "sub-dev").children[0]

        tree.expand(account)

        assert len(account.children) == 1
        assert account.children[0].kind == NodeKind.PLACEHOLDER
        assert account.children[0].label == MSG_NO_CONTAINERS

    def test_empty_container_gets_no_blobs_placeholder(self, tree) -> None:
        account = self.account(tree)
        tree.expand(account)
        empty = account.children[2]
        tree.expand(empty)
        assert child_names(empty) == [MSG_NO_BLOBS]

    def test_expand_container_lists_blobs(self, tree) -> None:
        account = self.account(tree)
        tree.expand(account)
        logs = account.children[1]
        tree.expand(logs)
        assert child_names(logs) == ["2024-05-10.log", "2024-05-11.log"]
        assert all(child.kind == NodeKind.BLOB for child in logs.children)
        assert logs.children[0].breadcrumb.container == "logs"
        assert logs.children[0].breadcrumb.account == "acme-dev"

    def test_failed_expand_leaves_node_childless_and_collapsed(self, tree, provider) -> None:
        provider.fail(LoadScope.CONTAINERS, "acme-dev", "throttled")
        account = self.account(tree)
        result = tree.expand(account)
        assert result.success is False
        assert result.error.scope == LoadScope.CONTAINERS
        assert result.error.message == "throttled"
        assert account.children is None
        assert account.expanded is False

    def test_collapse_keeps_children(self, tree, provider) -> None:
        account = self.account(tree)
        tree.expand(account)
        tree.collapse(account)
        assert account.expanded is False
        assert child_names(account) == ["images", "logs", "empty"]
        tree.expand(account)
        assert account.expanded is True
        assert provider.calls[("list_containers", "acme-dev")] == 1

    def test_toggle_expanded_alternates(self, tree) -> None:
        account = self.account(tree)
        tree.toggle_expanded(account)
        assert account.expanded is True
        tree.toggle_expanded(account)
        assert account.expanded is False

    def test_expand_leaf_is_noop(self, tree, provider) -> None:
        account = self.account(tree)
        tree.expand(account)
        logs = account.children[1]
        tree.expand(logs)
        blob = logs.children[0]
        calls_before = sum(provider.calls.values())
        assert tree.expand(blob).success is True
        assert blob.children is None
        assert sum(provider.calls.values()) == calls_before

    def test_expand_disabled_subscription_is_noop(self, tree, provider) -> None:
        prod = subscription(tree, "sub-prod")
        tree.toggle_subscription_enabled(prod)
        calls_before = provider.calls[("list_accounts", "sub-prod")]
        tree.expand(prod)
        assert prod.children is None
        assert provider.calls[("list_accounts", "sub-prod")] == calls_before

    def test_leaf_nodes_cannot_take_children(self, tree) -> None:
        sandbox = subscription(tree, "sub-sandbox")
        placeholder = sandbox.children[0]
        with pytest.raises(ValueError):
            placeholder.set_children([])


# =============================================================================
# toggle_subscription_enabled
# =============================================================================


class TestToggleSubscription:
    """Tests for TreeModel.toggle_subscription_enabled."""

    def test_disable_discards_children_and_collapses(self, provider) -> None:
        tree = TreeModel(provider)
        tree.load_root()
        dev = subscription(tree, "sub-dev")
        tree.toggle_subscription_enabled(dev)
        assert dev.children is None
        assert dev.expanded is False
        assert dev.label == "( ) Development"
        assert tree.filters.is_enabled("sub-dev") is False

    def test_off_then_on_restores_identical_children(self, provider) -> None:
        tree = TreeModel(provider)
        tree.load_root()
        dev = subscription(tree, "sub-dev")
        before = [(child.kind, child.name) for child in dev.children]

        tree.toggle_subscription_enabled(dev)
        tree.toggle_subscription_enabled(dev)

        assert [(child.kind, child.name) for child in dev.children] == before
        assert dev.expanded is True
        assert dev.label == "(x) Development"

    def test_enable_failure_inserts_error_placeholder(self, provider) -> None:
        tree = TreeModel(provider, SubscriptionFilterSet(disabled=["sub-prod"]))
        tree.load_root()
        provider.fail(LoadScope.ACCOUNTS, "sub-prod", "denied")
        prod = subscription(tree, "sub-prod")

        result = tree.toggle_subscription_enabled(prod)

        assert result.success is False
        assert result.error.describe() == "Error loading accounts: denied"
        assert child_names(prod) == [MSG_ERROR_ACCOUNTS]

    def test_only_subscriptions_can_be_toggled(self, provider) -> None:
        tree = TreeModel(provider)
        tree.load_root()
        account = subscription(tree, "sub-dev").children[0]
        with pytest.raises(ValueError):
            tree.toggle_subscription_enabled(account)


# =============================================================================
# Queries
# =============================================================================


class TestQueries:
    """Tests for visible_nodes, parent_of and first_node."""

    def test_visible_nodes_depth_first(self, provider) -> None:
        tree = TreeModel(provider, SubscriptionFilterSet(disabled=["sub-prod"]))
        tree.load_root()
        account = subscription(tree, "sub-dev").children[0]
        tree.expand(account)

        labels = [node.label for node in tree.visible_nodes()]

        assert labels == [
            "(x) Development",
            "acme-dev",
            "images",
            "logs",
            "empty",
            "( ) Production",
            "(x) Sandbox",
            MSG_NO_ACCOUNTS,
        ]

    def test_collapsed_children_are_hidden(self, provider) -> None:
        tree = TreeModel(provider)
        tree.load_root()
        dev = subscription(tree, "sub-dev")
        tree.collapse(dev)
        assert "acme-dev" not in [node.name for node in tree.visible_nodes()]

    def test_parent_back_references(self, provider) -> None:
        tree = TreeModel(provider)
        tree.load_root()
        dev = subscription(tree, "sub-dev")
        account = dev.children[0]
        assert tree.parent_of(account) is dev
        assert tree.parent_of(dev) is tree.root
        assert account.depth == 2

    def test_first_node_is_first_subscription(self, provider) -> None:
        tree = TreeModel(provider)
        tree.load_root()
        assert tree.first_node() is subscription(tree, "sub-dev")
