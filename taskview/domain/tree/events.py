"""Tree domain events.

Immutable records of rebuild outcomes, used for logging and by callers
that react to a new tree becoming available.
"""

from dataclasses import dataclass

from taskview.domain.shared.events import DomainEvent


@dataclass(frozen=True)
class TreeRebuilt(DomainEvent):
    """Raised when a full rebuild completed and the new tree is visible."""

    project_count: int = 0
    faulty_count: int = 0


@dataclass(frozen=True)
class TreeRebuildFailed(DomainEvent):
    """Raised when a rebuild was aborted; the previous tree stays visible."""

    reason: str = ""
