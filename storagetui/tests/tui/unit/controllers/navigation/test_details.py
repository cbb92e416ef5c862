"""Unit tests for details_text."""

from __future__ import annotations

from datetime import datetime, timezone

from storagetui.constants.values import MSG_BROWSE_ACCOUNTS, MSG_NO_SELECTION
from storagetui.controllers.navigation import SubscriptionFilterSet, details_text
from storagetui.models.tree import (
    AccountRef,
    BlobRef,
    Breadcrumb,
    ContainerRef,
    PlaceholderRef,
    RootRef,
    SubscriptionRef,
)

CRUMB = Breadcrumb(
    subscription_id="sub-dev",
    subscription_name="Development",
    account="acme-dev",
    container="logs",
)


class TestDetailsText:
    """Test per-kind details formatting."""

    def test_no_selection(self) -> None:
        assert details_text(None, Breadcrumb(), SubscriptionFilterSet()) == MSG_NO_SELECTION

    def test_root(self) -> None:
        assert details_text(RootRef("Subscriptions"), Breadcrumb(), SubscriptionFilterSet()) == MSG_BROWSE_ACCOUNTS

    def test_placeholder_shows_message(self) -> None:
        ref = PlaceholderRef("No containers.")
        assert details_text(ref, CRUMB, SubscriptionFilterSet()) == "No containers."

    def test_subscription_status(self) -> None:
        ref = SubscriptionRef(id="sub-dev", name="Development")
        filters = SubscriptionFilterSet()
        assert details_text(ref, CRUMB, filters) == "Subscription: Development\nStatus: enabled"
        filters.toggle("sub-dev")
        assert details_text(ref, CRUMB, filters) == "Subscription: Development\nStatus: disabled"

    def test_account(self) -> None:
        ref = AccountRef(name="acme-dev", region="westeurope")
        assert details_text(ref, CRUMB, SubscriptionFilterSet()) == (
            "Account: acme-dev\nSubscription: Development\nRegion: westeurope"
        )

    def test_account_omits_blank_fields(self) -> None:
        ref = AccountRef(name="acme-dev")
        assert details_text(ref, Breadcrumb(), SubscriptionFilterSet()) == "Account: acme-dev"

    def test_container(self) -> None:
        ref = ContainerRef(name="logs", public_access="private")
        assert details_text(ref, CRUMB, SubscriptionFilterSet()) == (
            "Container: logs\nAccount: acme-dev\nSubscription: Development\nPublic access: private"
        )

    def test_blob(self) -> None:
        ref = BlobRef(
            name="2024-05-11.log",
            size_bytes=1048576,
            modified=datetime(2024, 5, 11, 3, 12, tzinfo=timezone.utc),
            content_type="text/plain",
        )
        assert details_text(ref, CRUMB, SubscriptionFilterSet()) == (
            "Blob: 2024-05-11.log\n"
            "Account: acme-dev\n"
            "Container: logs\n"
            "Subscription: Development\n"
            "Size: 1.00 MB\n"
            "Modified: 2024-05-11T03:12:00Z\n"
            "Content type: text/plain"
        )

    def test_blob_unknown_timestamp(self) -> None:
        ref = BlobRef(name="a.bin", size_bytes=10)
        text = details_text(ref, CRUMB, SubscriptionFilterSet())
        assert "Modified: n/a" in text
        assert "Content type" not in text
