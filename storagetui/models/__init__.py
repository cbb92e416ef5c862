"""Data models for the storage explorer TUI.

- catalog: records returned by catalog providers (pydantic)
- tree: navigable tree nodes and per-kind payloads
- state: settings and persisted configuration
"""
