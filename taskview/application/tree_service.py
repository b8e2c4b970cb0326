"""Tree application service.

Runs rebuilds of the task tree and walks the resulting tree. A failed
rebuild leaves the projection on its previous valid tree.
"""

import logging
from collections.abc import Iterator

from taskview.application.projection import TreeProjection
from taskview.domain.shared import Err, Ok, Result
from taskview.domain.tree import (
    BaseProjectNode,
    FaultyProjectNode,
    TaskViewContent,
    TaskViewError,
    TreeElement,
    TreeRebuildFailed,
    TreeRebuilt,
)

logger = logging.getLogger(__name__)


def rebuild_tree(
    projection: TreeProjection,
    content: TaskViewContent,
) -> Result[tuple[list[BaseProjectNode], TreeRebuilt], TreeRebuildFailed]:
    """Rebuild the projection from a fresh snapshot.

    Args:
        projection: The projection to rebuild.
        content: Snapshot of build projects and faulty workspace projects.

    Returns:
        Ok((top-level nodes, TreeRebuilt)) on success, or
        Err(TreeRebuildFailed) if the snapshot is inconsistent.
    """
    try:
        elements = projection.elements(content)
    except TaskViewError as e:
        logger.error(f"Task tree rebuild failed, keeping previous tree: {e}")
        return Err(TreeRebuildFailed(reason=str(e)))

    faulty_count = sum(1 for node in elements if isinstance(node, FaultyProjectNode))
    event = TreeRebuilt(
        project_count=len(projection.forest) - faulty_count,
        faulty_count=faulty_count,
    )
    logger.info(
        f"Task tree rebuilt: {event.project_count} projects, {event.faulty_count} faulty"
    )
    return Ok((elements, event))


def walk_tree(
    projection: TreeProjection,
    elements: list[BaseProjectNode],
) -> Iterator[tuple[int, TreeElement]]:
    """Yield (depth, element) for the whole tree in display order.

    Nested projects are listed under their parent project, before its tasks.
    """

    def walk(element: TreeElement, depth: int) -> Iterator[tuple[int, TreeElement]]:
        yield depth, element
        for child_project in projection.child_projects(element):
            yield from walk(child_project, depth + 1)
        if projection.has_children(element):
            for child in projection.children(element):
                yield from walk(child, depth + 1)

    for element in elements:
        yield from walk(element, 0)
