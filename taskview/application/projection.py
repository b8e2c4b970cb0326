"""Tree projection for a generic tree display.

Implements the display protocol (elements, children, has_children,
parent) over the nodes of one rebuild. The whole node arena is derived
when ``elements`` is called with new content; every other call only
reads that arena. Task and group nodes are created lazily per call.

A project node's children are its tasks (or task groups) only. Nested
projects hang off the arena and are reached through ``child_projects``.
"""

import logging

from taskview.domain.build import InvocationSource, build_invocation_index
from taskview.domain.tree import (
    BaseProjectNode,
    ProjectForest,
    ProjectMatcher,
    ProjectNode,
    ProjectTaskNode,
    TaskGroupNode,
    TaskSelectorNode,
    TaskViewContent,
    TreeElement,
    flatten_projects,
    group_nodes_for,
    task_nodes_for,
)
from taskview.domain.workspace import ViewState

logger = logging.getLogger(__name__)


class TreeProjection:
    """Content provider for the task tree.

    The view mode is read from ``view_state.group_tasks`` on every
    ``children`` call, so toggling it takes effect without a rebuild.
    """

    def __init__(
        self,
        view_state: ViewState,
        matcher: ProjectMatcher,
        invocation_source: InvocationSource = build_invocation_index,
    ) -> None:
        self._view_state = view_state
        self._matcher = matcher
        self._invocation_source = invocation_source
        self._forest = ProjectForest()

    @property
    def forest(self) -> ProjectForest:
        """Project nodes of the last successful rebuild."""
        return self._forest

    def input_changed(self, old_input: object, new_input: object) -> None:
        # Nothing is maintained incrementally; elements() rebuilds.
        pass

    def elements(self, content: object) -> list[BaseProjectNode]:
        """Rebuild the node arena from ``content`` and return the top level.

        The new arena only replaces the previous one after it has been
        built completely.

        Raises:
            MissingInvocationsError: If the build model and its invocation
                data disagree; the previous arena stays in place.
        """
        if not isinstance(content, TaskViewContent):
            logger.debug(f"Ignoring unsupported input {type(content).__name__}")
            return []
        forest = flatten_projects(
            content.projects,
            content.faulty_projects,
            self._matcher,
            self._invocation_source,
        )
        self._forest = forest
        return forest.top_level()

    def has_children(self, element: object) -> bool:
        return isinstance(element, (ProjectNode, TaskGroupNode))

    def children(self, element: object) -> list[TreeElement]:
        match element:
            case ProjectNode():
                return self._tasks_of(element)
            case TaskGroupNode(task_nodes=task_nodes):
                return list(task_nodes)
            case _:
                return []

    def child_projects(self, element: object) -> list[ProjectNode]:
        """Project nodes nested directly under ``element`` in the build."""
        if isinstance(element, ProjectNode):
            return self._forest.children_of(element)
        return []

    def _tasks_of(self, project_node: ProjectNode) -> list[TreeElement]:
        if self._view_state.group_tasks:
            return list(group_nodes_for(project_node))
        return list(task_nodes_for(project_node))

    def parent(self, element: object) -> TreeElement | None:
        match element:
            case ProjectNode():
                return self._forest.parent_of(element)
            case ProjectTaskNode(project=project) | TaskSelectorNode(project=project) | TaskGroupNode(
                project=project
            ):
                return project
            case _:
                # FaultyProjectNode and unknown elements
                return None

    def dispose(self) -> None:
        pass
