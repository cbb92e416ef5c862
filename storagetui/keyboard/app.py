"""App-level keyboard bindings.

This module contains Textual Binding objects for app-level bindings
that work from any screen.
"""

from textual.binding import Binding

# ============================================================================
# Textual Binding objects for app-level bindings
# ============================================================================

APP_BINDINGS: list[Binding] = [
    Binding("ctrl+c", "quit", "Quit", priority=True, show=False),
    Binding("q", "quit", "Quit"),
    Binding("?", "show_help", "Help"),
]

__all__ = [
    "APP_BINDINGS",
]
