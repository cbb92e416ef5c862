"""Catalog tree node models."""

from storagetui.models.tree.node import (
    BRANCH_KINDS,
    AccountRef,
    BlobRef,
    Breadcrumb,
    CatalogNode,
    ContainerRef,
    NodeRef,
    PlaceholderRef,
    RootRef,
    SubscriptionRef,
    placeholder_node,
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
