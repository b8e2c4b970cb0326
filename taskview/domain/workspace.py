"""Workspace side of the model.

The workspace tracks its own project entries (e.g. IDE projects), which
may or may not correspond to projects of a build. The tree model talks to
the workspace only through the protocols below.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from taskview.domain.shared.result import Result


@dataclass(frozen=True)
class WorkspaceProject:
    """Handle of a project tracked by the workspace."""

    name: str
    location: Path


class WorkspaceRegistry(Protocol):
    """Looks up workspace projects."""

    def find_project_by_name(self, name: str) -> Result[WorkspaceProject, str]:
        """Return the workspace project with the given name, or Err if none."""
        ...

    def has_build_nature(self, project: WorkspaceProject) -> bool:
        """Return True if the project is marked as a build-tool project."""
        ...


class ConfigurationStore(Protocol):
    """Per-project configuration persisted by the workspace."""

    def root_project_directory(self, project: WorkspaceProject) -> Result[Path, str]:
        """Return the configured build root directory, or Err if not configured."""
        ...


class ViewState(Protocol):
    """View preferences consulted on every navigation call."""

    group_tasks: bool
