"""Per-subscription enabled/disabled flags."""

from __future__ import annotations

import logging
from collections.abc import Iterable

logger = logging.getLogger(__name__)


class SubscriptionFilterSet:
    """Enablement map keyed by subscription id.

    Unseen ids are enabled. Merging a fresh subscription listing keeps every
    flag the user already set and adds new ids as enabled.
    """

    def __init__(self, disabled: Iterable[str] = ()) -> None:
        self._enabled: dict[str, bool] = {sub_id: False for sub_id in disabled}

    def is_enabled(self, subscription_id: str) -> bool:
        if not subscription_id:
            return True
        return self._enabled.get(subscription_id, True)

    def merge(self, subscription_ids: Iterable[str]) -> None:
        """Register the ids of a new listing without touching existing flags."""
        for subscription_id in subscription_ids:
            self._enabled.setdefault(subscription_id, True)

    def toggle(self, subscription_id: str) -> bool:
        """Flip the flag and return the new value."""
        enabled = not self.is_enabled(subscription_id)
        self._enabled[subscription_id] = enabled
        logger.debug("Subscription %s enabled=%s", subscription_id, enabled)
        return enabled

    def disabled_ids(self) -> list[str]:
        return sorted(sub_id for sub_id, enabled in self._enabled.items() if not enabled)


__all__ = ["SubscriptionFilterSet"]
