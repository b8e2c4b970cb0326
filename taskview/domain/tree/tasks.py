"""Task nodes of a project, flat or bucketed by group.

Both functions are pure: the same project node always yields
value-equal results.
"""

from taskview.domain.tree.nodes import (
    ProjectKey,
    ProjectNode,
    ProjectTaskNode,
    TaskGroupNode,
    TaskNode,
    TaskSelectorNode,
    group_key,
)


def task_nodes_for(project_node: ProjectNode) -> list[TaskNode]:
    """Project tasks first, then task selectors, in declaration order."""
    invocations = project_node.invocations
    task_nodes: list[TaskNode] = [
        ProjectTaskNode(project_node, task) for task in invocations.project_tasks
    ]
    task_nodes.extend(
        TaskSelectorNode(project_node, selector) for selector in invocations.task_selectors
    )
    return task_nodes


def group_nodes_for(project_node: ProjectNode) -> list[TaskGroupNode]:
    """Bucket the project's task nodes into one group node per group key.

    The default group always comes first, even when empty. Members are
    merged under equal keys, so tasks and selectors sharing a group end
    up in a single node.

    Args:
        project_node: Project whose invocations are grouped.

    Returns:
        Group nodes, default first, then in first-seen group order
    """
    # (project key, group key) -> ordered member set
    buckets: dict[tuple[ProjectKey, str | None], dict[TaskNode, None]] = {
        (project_node.key, None): {}
    }
    for task_node in task_nodes_for(project_node):
        members = buckets.setdefault((project_node.key, group_key(task_node.group)), {})
        members[task_node] = None

    return [
        TaskGroupNode(project=project_node, group=group, task_nodes=tuple(members))
        for (_, group), members in buckets.items()
    ]
