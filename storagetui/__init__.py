"""Storage explorer TUI.

Interactive terminal browser for a storage catalog of subscriptions,
accounts, containers and blobs.
"""

__version__ = "0.1.0"
