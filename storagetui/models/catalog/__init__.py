"""Catalog record models."""

from storagetui.models.catalog.catalog_info import (
    AccountInfo,
    BlobInfo,
    ContainerInfo,
    SubscriptionInfo,
)

__all__ = [
    "AccountInfo",
    "BlobInfo",
    "ContainerInfo",
    "SubscriptionInfo",
]
