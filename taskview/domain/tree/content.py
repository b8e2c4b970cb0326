"""Input snapshot of the tree projection."""

from collections.abc import Sequence
from dataclasses import dataclass, field

from taskview.domain.build.models import BuildProject
from taskview.domain.workspace import WorkspaceProject


@dataclass(frozen=True)
class TaskViewContent:
    """One immutable snapshot of the workspace.

    Attributes:
        projects: Build projects; only roots start a traversal.
        faulty_projects: Workspace projects whose build model failed to load.
    """

    projects: Sequence[BuildProject] = field(default_factory=tuple)
    faulty_projects: Sequence[WorkspaceProject] = field(default_factory=tuple)
