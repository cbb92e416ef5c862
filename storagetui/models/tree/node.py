"""Navigable catalog nodes.

Each node kind carries its own payload type, so a blob can never exist without
its account/container ancestry and a placeholder never has a size. Ancestry is
kept in a shared ``Breadcrumb`` used for details and content titles.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Union

from storagetui.constants.enums import NodeKind

# =============================================================================
# Payloads (one per node kind)
# =============================================================================


@dataclass(frozen=True)
class RootRef:
    """Synthetic top of the hierarchy."""

    name: str

    kind = NodeKind.ROOT


@dataclass(frozen=True)
class PlaceholderRef:
    """Non-interactive leaf that stands in for empty or failed children."""

    message: str
    is_error: bool = False

    kind = NodeKind.PLACEHOLDER

    @property
    def name(self) -> str:
        return self.message


@dataclass(frozen=True)
class SubscriptionRef:
    id: str
    name: str

    kind = NodeKind.SUBSCRIPTION


@dataclass(frozen=True)
class AccountRef:
    name: str
    region: str = ""

    kind = NodeKind.ACCOUNT


@dataclass(frozen=True)
class ContainerRef:
    name: str
    public_access: str = ""

    kind = NodeKind.CONTAINER


@dataclass(frozen=True)
class BlobRef:
    """Blob payload; ``modified`` is None when unknown."""

    name: str
    size_bytes: int = 0
    modified: datetime | None = None
    content_type: str = ""

    kind = NodeKind.BLOB


NodeRef = Union[RootRef, PlaceholderRef, SubscriptionRef, AccountRef, ContainerRef, BlobRef]

# Kinds allowed to own children. Blobs and placeholders are always leaves.
BRANCH_KINDS = frozenset(
    {NodeKind.ROOT, NodeKind.SUBSCRIPTION, NodeKind.ACCOUNT, NodeKind.CONTAINER}
)


@dataclass(frozen=True)
class Breadcrumb:
    """Ancestry of a node, used for display only."""

    subscription_id: str = ""
    subscription_name: str = ""
    account: str = ""
    container: str = ""

    @staticmethod
    def with_subscription(ref: SubscriptionRef) -> Breadcrumb:
        return Breadcrumb(subscription_id=ref.id, subscription_name=ref.name)

    def with_account(self, ref: AccountRef) -> Breadcrumb:
        return Breadcrumb(
            subscription_id=self.subscription_id,
            subscription_name=self.subscription_name,
            account=ref.name,
        )

    def with_container(self, ref: ContainerRef) -> Breadcrumb:
        return Breadcrumb(
            subscription_id=self.subscription_id,
            subscription_name=self.subscription_name,
            account=self.account,
            container=ref.name,
        )


# =============================================================================
# Tree node
# =============================================================================


@dataclass(eq=False)
class CatalogNode:
    """One entry in the tree.

    ``children`` is None until the next level has been fetched. A loaded but
    empty level is a single placeholder child, never an empty list.
    """

    ref: NodeRef
    label: str
    breadcrumb: Breadcrumb = field(default_factory=Breadcrumb)
    parent: CatalogNode | None = field(default=None, repr=False)
    children: list[CatalogNode] | None = field(default=None, repr=False)
    expanded: bool = False

    @property
    def kind(self) -> NodeKind:
        return self.ref.kind

    @property
    def name(self) -> str:
        return self.ref.name

    @property
    def is_loaded(self) -> bool:
        return self.children is not None

    @property
    def can_have_children(self) -> bool:
        return self.kind in BRANCH_KINDS

    @property
    def depth(self) -> int:
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    def set_children(self, children: list[CatalogNode]) -> None:
        """Replace children, linking each back to this node."""
        if not self.can_have_children:
            raise ValueError(f"{self.kind.value} nodes cannot have children")
        for child in children:
            child.parent = self
        self.children = children

    def clear_children(self) -> None:
        """Forget loaded children so the next expand fetches again."""
        if self.children:
            for child in self.children:
                child.parent = None
        self.children = None


def placeholder_node(message: str, breadcrumb: Breadcrumb, *, is_error: bool = False) -> CatalogNode:
    """Build a placeholder leaf carrying a human-readable reason."""
    return CatalogNode(
        ref=PlaceholderRef(message=message, is_error=is_error),
        label=message,
        breadcrumb=breadcrumb,
    )


__all__ = [
    "BRANCH_KINDS",
    "AccountRef",
    "BlobRef",
    "Breadcrumb",
    "CatalogNode",
    "ContainerRef",
    "NodeRef",
    "PlaceholderRef",
    "RootRef",
    "SubscriptionRef",
    "placeholder_node",
]
