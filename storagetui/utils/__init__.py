"""Utility helpers for the storage explorer TUI."""

from storagetui.utils.formatting import format_bytes, format_time, subscription_label

__all__ = ["format_bytes", "format_time", "subscription_label"]
