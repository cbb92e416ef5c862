"""Display formatting helpers for sizes, timestamps and labels."""

from __future__ import annotations

from datetime import datetime, timezone

from storagetui.constants.values import (
    SUBSCRIPTION_DISABLED_MARK,
    SUBSCRIPTION_ENABLED_MARK,
)

_KB = 1024
_MB = 1024 * _KB
_GB = 1024 * _MB


def format_bytes(value: int) -> str:
    """Format a byte count with binary units.

    Examples:
        >>> format_bytes(58)
        '58 B'
        >>> format_bytes(1048576)
        '1.00 MB'
    """
    if value >= _GB:
        return f"{value / _GB:.2f} GB"
    if value >= _MB:
        return f"{value / _MB:.2f} MB"
    if value >= _KB:
        return f"{value / _KB:.2f} KB"
    return f"{value} B"


def format_time(value: datetime | None) -> str:
    """Format a timestamp as RFC 3339 in UTC, or ``n/a`` when unknown.

    Naive datetimes are taken to be UTC already.
    """
    if value is None:
        return "n/a"
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def subscription_label(name: str, enabled: bool) -> str:
    """Tree label for a subscription showing its enabled mark."""
    mark = SUBSCRIPTION_ENABLED_MARK if enabled else SUBSCRIPTION_DISABLED_MARK
    return f"{mark} {name}"


__all__ = ["format_bytes", "format_time", "subscription_label"]
