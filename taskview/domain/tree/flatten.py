"""Flattening the build project hierarchy into project nodes.

Similar to how a workspace explorer lists projects, the nested project
hierarchy of every build is turned into one flat, ordered arena of
project nodes. Parent links are kept as keys, children are derived.
"""

import logging
from collections.abc import Iterable

from taskview.domain.build.invocations import (
    InvocationIndex,
    InvocationSource,
    build_invocation_index,
)
from taskview.domain.build.models import BuildProject
from taskview.domain.tree.errors import MissingInvocationsError
from taskview.domain.tree.matching import ProjectMatcher
from taskview.domain.tree.nodes import (
    BaseProjectNode,
    FaultyProjectNode,
    ProjectForest,
    ProjectNode,
)
from taskview.domain.workspace import WorkspaceProject

logger = logging.getLogger(__name__)


def flatten_projects(
    projects: Iterable[BuildProject],
    faulty_projects: Iterable[WorkspaceProject],
    matcher: ProjectMatcher,
    invocation_source: InvocationSource = build_invocation_index,
) -> ProjectForest:
    """Build the complete, ordered project node arena.

    Only root projects of ``projects`` start a traversal; nested
    projects are reached through their root. The invocation index is
    computed once per root and shared by the whole subtree. Faulty
    workspace projects are appended last, in the given order.

    Args:
        projects: Build projects; non-root entries are skipped.
        faulty_projects: Workspace projects without a usable build model.
        matcher: Resolves workspace matches and the inclusion flag.
        invocation_source: Builds the invocation index of one build.

    Returns:
        ProjectForest with one node per build project plus faulty nodes

    Raises:
        MissingInvocationsError: If a project path has no index entry.
    """
    nodes: list[BaseProjectNode] = []
    for project in projects:
        if project.is_root:
            invocations = invocation_source(project)
            _collect_recursively(project, None, nodes, invocations, matcher)

    for workspace_project in faulty_projects:
        nodes.append(FaultyProjectNode(workspace_project))

    forest = ProjectForest(tuple(nodes))
    logger.debug(f"Flattened {len(forest)} project nodes")
    return forest


def _collect_recursively(
    project: BuildProject,
    parent: ProjectNode | None,
    nodes: list[BaseProjectNode],
    invocations: InvocationIndex,
    matcher: ProjectMatcher,
) -> None:
    project_invocations = invocations.get(project.build_path)
    if project_invocations is None:
        raise MissingInvocationsError(project.name, project.build_path)

    match = matcher.match(project)
    node = ProjectNode(
        path=project.build_path,
        root_dir=project.root_dir,
        name=project.name,
        project_dir=project.project_dir,
        parent_key=parent.key if parent is not None else None,
        workspace_project=match.workspace_project,
        included=match.included,
        invocations=project_invocations,
    )
    nodes.append(node)
    for child in project.children:
        _collect_recursively(child, node, nodes, invocations, matcher)
