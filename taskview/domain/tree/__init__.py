"""Tree domain - projecting builds into a navigable node tree.

Key Types:
    ProjectNode / FaultyProjectNode - project nodes (BaseProjectNode)
    ProjectTaskNode / TaskSelectorNode - task nodes (TaskNode)
    TaskGroupNode - tasks of a project sharing a group
    ProjectForest - ordered arena of project nodes from one rebuild

Functions:
    flatten_projects - build the project node arena
    task_nodes_for - flat task nodes of a project
    group_nodes_for - grouped task nodes of a project
"""

from taskview.domain.tree.content import TaskViewContent
from taskview.domain.tree.errors import MissingInvocationsError, TaskViewError
from taskview.domain.tree.events import TreeRebuildFailed, TreeRebuilt
from taskview.domain.tree.flatten import flatten_projects
from taskview.domain.tree.matching import ProjectMatcher, WorkspaceMatch
from taskview.domain.tree.nodes import (
    DEFAULT_GROUP_LABEL,
    BaseProjectNode,
    FaultyProjectNode,
    ProjectForest,
    ProjectKey,
    ProjectNode,
    ProjectTaskNode,
    TaskGroupNode,
    TaskNode,
    TaskSelectorNode,
    TreeElement,
    group_key,
)
from taskview.domain.tree.tasks import group_nodes_for, task_nodes_for

__all__ = [
    # Input
    "TaskViewContent",
    # Nodes
    "ProjectKey",
    "ProjectNode",
    "FaultyProjectNode",
    "BaseProjectNode",
    "ProjectTaskNode",
    "TaskSelectorNode",
    "TaskNode",
    "TaskGroupNode",
    "TreeElement",
    "ProjectForest",
    "DEFAULT_GROUP_LABEL",
    "group_key",
    # Building
    "ProjectMatcher",
    "WorkspaceMatch",
    "flatten_projects",
    "task_nodes_for",
    "group_nodes_for",
    # Errors
    "TaskViewError",
    "MissingInvocationsError",
    # Events
    "TreeRebuilt",
    "TreeRebuildFailed",
]
