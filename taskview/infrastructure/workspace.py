"""In-memory workspace registry and configuration store.

Backs the workspace protocols with the entries of a snapshot.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from taskview.domain.shared.result import Err, Ok, Result
from taskview.domain.workspace import WorkspaceProject
from taskview.infrastructure.storage.snapshot import WorkspaceEntry

logger = logging.getLogger(__name__)


class InMemoryWorkspace:
    """Workspace registry and configuration store over a list of entries.

    Workspace project names are not guaranteed to be unique. When several
    entries share a name, the first registered one wins.
    """

    def __init__(self, entries: Iterable[WorkspaceEntry] = ()) -> None:
        self._entries = list(entries)

    def find_project_by_name(self, name: str) -> Result[WorkspaceProject, str]:
        matches = [entry for entry in self._entries if entry.name == name]
        if not matches:
            return Err(f"No workspace project named '{name}'")
        if len(matches) > 1:
            logger.warning(
                f"{len(matches)} workspace projects named '{name}', "
                f"using the one at {matches[0].location}"
            )
        return Ok(matches[0].handle)

    def has_build_nature(self, project: WorkspaceProject) -> bool:
        entry = self._entry_for(project)
        return entry is not None and entry.build_nature

    def root_project_directory(self, project: WorkspaceProject) -> Result[Path, str]:
        entry = self._entry_for(project)
        if entry is None:
            return Err(f"Unknown workspace project '{project.name}'")
        if entry.root_project_dir is None:
            return Err(f"No build root configured for '{project.name}'")
        return Ok(entry.root_project_dir)

    def _entry_for(self, project: WorkspaceProject) -> WorkspaceEntry | None:
        return next((entry for entry in self._entries if entry.handle == project), None)
