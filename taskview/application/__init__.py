"""Application layer for taskview.

    projection - TreeProjection, the tree display content provider
    tree_service - rebuilds with fallback, tree walking

Example usage:
    >>> projection = TreeProjection(view_state, ProjectMatcher(registry, config))
    >>> result = rebuild_tree(projection, TaskViewContent(projects=projects))
    >>> if is_ok(result):
    ...     elements, _event = result.value
"""

from taskview.application.projection import TreeProjection
from taskview.application.tree_service import rebuild_tree, walk_tree
from taskview.domain.tree import TaskViewContent

__all__ = [
    "TaskViewContent",
    "TreeProjection",
    "rebuild_tree",
    "walk_tree",
]
