"""Matching build projects to workspace projects."""

import logging
from dataclasses import dataclass

from taskview.domain.build.models import BuildProject
from taskview.domain.shared.result import Err, Result
from taskview.domain.workspace import ConfigurationStore, WorkspaceProject, WorkspaceRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WorkspaceMatch:
    """Outcome of matching one build project against the workspace.

    Attributes:
        workspace_project: The matched workspace project, or Err if none.
        included: True if the project is a member of an included build,
            i.e. the workspace configured it under a different build root.
    """

    workspace_project: Result[WorkspaceProject, str]
    included: bool


class ProjectMatcher:
    """Resolves build projects to workspace projects.

    Lookup goes by project name through the registry. The inclusion flag
    is asymmetric: a project only counts as included when the build root
    recorded in the workspace configuration differs from the root of the
    build model the project came from, which tells an included-build
    member apart from the project anchoring the build.
    """

    def __init__(self, registry: WorkspaceRegistry, configuration: ConfigurationStore) -> None:
        self._registry = registry
        self._configuration = configuration

    def match(self, project: BuildProject) -> WorkspaceMatch:
        found = self._registry.find_project_by_name(project.name)
        if isinstance(found, Err):
            logger.debug(f"No workspace project for '{project.name}': {found.error}")
            return WorkspaceMatch(workspace_project=found, included=False)
        return WorkspaceMatch(
            workspace_project=found,
            included=self._is_included(found.value, project),
        )

    def _is_included(self, workspace_project: WorkspaceProject, project: BuildProject) -> bool:
        if not self._registry.has_build_nature(workspace_project):
            return False

        config_root = self._configuration.root_project_directory(workspace_project)
        if isinstance(config_root, Err):
            logger.warning(
                f"Cannot read build root of workspace project "
                f"'{workspace_project.name}': {config_root.error}"
            )
            return False
        return config_root.value != project.root_dir
