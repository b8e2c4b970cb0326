"""Infrastructure layer for taskview.

Exports:
    Storage:
        - JsonStorage: Low-level JSON file I/O
        - SnapshotRepository: Workspace snapshot loading
        - WorkspaceSnapshot / WorkspaceEntry: Snapshot schema

    Workspace:
        - InMemoryWorkspace: Registry and configuration store over snapshot entries
"""

from taskview.infrastructure.storage import (
    JsonStorage,
    SnapshotRepository,
    WorkspaceEntry,
    WorkspaceSnapshot,
)
from taskview.infrastructure.workspace import InMemoryWorkspace

__all__ = [
    # Storage
    "JsonStorage",
    "SnapshotRepository",
    "WorkspaceEntry",
    "WorkspaceSnapshot",
    # Workspace
    "InMemoryWorkspace",
]
