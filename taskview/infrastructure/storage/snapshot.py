"""Workspace snapshots stored as JSON.

A snapshot holds everything one rebuild needs: the build projects, the
workspace entries with their persisted configuration, and the names of
workspace projects whose build model failed to load.

Example snapshot:
    {
      "projects": [
        {"name": "app", "path": ":", "project_dir": "/repo", "root_dir": "/repo",
         "tasks": [{"name": "build", "path": ":build", "group": "build"}],
         "children": [{"name": "lib", "path": ":lib", "project_dir": "/repo/lib"}]}
      ],
      "workspace": [{"name": "app", "location": "/repo", "root_project_dir": "/repo"}],
      "faulty_projects": []
    }
"""

import logging
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, model_validator

from taskview.domain.tree import TaskViewContent
from taskview.domain.build import BuildProject
from taskview.domain.shared.result import Err, Ok, Result
from taskview.domain.workspace import WorkspaceProject
from taskview.infrastructure.storage.json_storage import JsonStorage

logger = logging.getLogger(__name__)


class WorkspaceEntry(BaseModel):
    """A workspace project together with its persisted configuration."""

    name: str
    location: Path
    build_nature: bool = True
    root_project_dir: Path | None = Field(
        default=None,
        description="Build root directory recorded in the project configuration",
    )

    @property
    def handle(self) -> WorkspaceProject:
        return WorkspaceProject(name=self.name, location=self.location)


class WorkspaceSnapshot(BaseModel):
    """Build model and workspace state for a single rebuild."""

    projects: list[BuildProject] = Field(default_factory=list)
    workspace: list[WorkspaceEntry] = Field(default_factory=list)
    faulty_projects: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_faulty_projects(self) -> "WorkspaceSnapshot":
        known = {entry.name for entry in self.workspace}
        unknown = [name for name in self.faulty_projects if name not in known]
        if unknown:
            raise ValueError(f"Faulty projects not in workspace: {', '.join(unknown)}")
        return self

    def to_content(self) -> TaskViewContent:
        """Snapshot as input for the tree projection."""
        faulty: list[WorkspaceProject] = []
        for name in self.faulty_projects:
            entry = next(entry for entry in self.workspace if entry.name == name)
            faulty.append(entry.handle)
        return TaskViewContent(projects=tuple(self.projects), faulty_projects=tuple(faulty))


class SnapshotRepository:
    """Loads workspace snapshots from JSON files."""

    def __init__(self, storage: JsonStorage | None = None) -> None:
        self._storage = storage or JsonStorage()

    def load(self, path: Path) -> Result[WorkspaceSnapshot, str]:
        """Load and validate a snapshot.

        Args:
            path: Path of the snapshot JSON file.

        Returns:
            Ok(WorkspaceSnapshot) if successful, Err(str) with error message if failed.
        """
        result = self._storage.load_json(path)
        if isinstance(result, Err):
            return result

        try:
            snapshot = WorkspaceSnapshot(**result.value)
        except ValidationError as e:
            return Err(f"Invalid snapshot {path}: {e}")

        logger.debug(f"Loaded snapshot {path} with {len(snapshot.projects)} build roots")
        return Ok(snapshot)
