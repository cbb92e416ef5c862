"""Details panel text for nodes and content rows."""

from __future__ import annotations

from storagetui.constants.values import MSG_BROWSE_ACCOUNTS, MSG_NO_SELECTION
from storagetui.controllers.navigation.subscription_filter import SubscriptionFilterSet
from storagetui.models.tree import (
    AccountRef,
    BlobRef,
    Breadcrumb,
    ContainerRef,
    NodeRef,
    PlaceholderRef,
    RootRef,
    SubscriptionRef,
)
from storagetui.utils.formatting import format_bytes, format_time


def details_text(
    ref: NodeRef | None,
    breadcrumb: Breadcrumb,
    filters: SubscriptionFilterSet,
) -> str:
    """Describe the selected entry. Blank optional fields are left out."""
    if ref is None:
        return MSG_NO_SELECTION
    if isinstance(ref, RootRef):
        return MSG_BROWSE_ACCOUNTS
    if isinstance(ref, PlaceholderRef):
        return ref.message
    if isinstance(ref, SubscriptionRef):
        status = "enabled" if filters.is_enabled(ref.id) else "disabled"
        return f"Subscription: {ref.name}\nStatus: {status}"

    lines: list[str] = []
    if isinstance(ref, AccountRef):
        lines.append(f"Account: {ref.name}")
        _append_if(lines, "Subscription", breadcrumb.subscription_name)
        _append_if(lines, "Region", ref.region)
    elif isinstance(ref, ContainerRef):
        lines.append(f"Container: {ref.name}")
        lines.append(f"Account: {breadcrumb.account}")
        _append_if(lines, "Subscription", breadcrumb.subscription_name)
        _append_if(lines, "Public access", ref.public_access)
    elif isinstance(ref, BlobRef):
        lines.append(f"Blob: {ref.name}")
        lines.append(f"Account: {breadcrumb.account}")
        lines.append(f"Container: {breadcrumb.container}")
        _append_if(lines, "Subscription", breadcrumb.subscription_name)
        lines.append(f"Size: {format_bytes(ref.size_bytes)}")
        lines.append(f"Modified: {format_time(ref.modified)}")
        _append_if(lines, "Content type", ref.content_type)
    else:
        return MSG_NO_SELECTION
    return "\n".join(lines)


def _append_if(lines: list[str], label: str, value: str) -> None:
    if value:
        lines.append(f"{label}: {value}")


__all__ = ["details_text"]
