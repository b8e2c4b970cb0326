"""Storage infrastructure for taskview.

Loads workspace snapshots, using Result types for explicit error handling.
"""

from taskview.infrastructure.storage.json_storage import JsonStorage
from taskview.infrastructure.storage.snapshot import (
    SnapshotRepository,
    WorkspaceEntry,
    WorkspaceSnapshot,
)

__all__ = [
    "JsonStorage",
    "SnapshotRepository",
    "WorkspaceEntry",
    "WorkspaceSnapshot",
]
