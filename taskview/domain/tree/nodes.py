"""Tree node model.

Nodes are immutable and created fresh on every rebuild. Variants form
sum types dispatched by pattern matching rather than a class hierarchy:

    BaseProjectNode = ProjectNode | FaultyProjectNode
    TaskNode        = ProjectTaskNode | TaskSelectorNode
    TreeElement     = BaseProjectNode | TaskGroupNode | TaskNode

Project nodes never hold references to their children. A node refers to
its parent by key, and children are derived by filtering the
ProjectForest that owns the nodes.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import TypeAlias

from taskview.domain.build.invocations import BuildInvocations, ProjectTask, TaskSelector
from taskview.domain.shared.result import Ok, Result
from taskview.domain.types import BuildPath
from taskview.domain.workspace import WorkspaceProject

# (build root directory, project path) identifies a project across builds
ProjectKey: TypeAlias = tuple[Path, BuildPath]

DEFAULT_GROUP_LABEL = "default"


@dataclass(frozen=True)
class ProjectNode:
    """A project of a build, flattened out of the project hierarchy.

    Equality and hashing use the project key only.

    Attributes:
        path: Project path inside its build.
        root_dir: Root directory of the owning build.
        name: Project name.
        project_dir: Directory of the project itself.
        parent_key: Key of the parent project node, None at a build root.
        workspace_project: Matched workspace project, or Err if unmatched.
        included: True if the project belongs to an included build.
        invocations: Tasks and selectors available in this project.
    """

    path: BuildPath
    root_dir: Path
    name: str = field(compare=False)
    project_dir: Path = field(compare=False)
    parent_key: ProjectKey | None = field(compare=False)
    workspace_project: Result[WorkspaceProject, str] = field(compare=False)
    included: bool = field(compare=False)
    invocations: BuildInvocations = field(compare=False)

    @property
    def key(self) -> ProjectKey:
        return (self.root_dir, self.path)

    @property
    def is_matched(self) -> bool:
        """True if a workspace project corresponds to this node."""
        return isinstance(self.workspace_project, Ok)


@dataclass(frozen=True)
class FaultyProjectNode:
    """A workspace project whose build model could not be loaded."""

    workspace_project: WorkspaceProject

    @property
    def name(self) -> str:
        return self.workspace_project.name


@dataclass(frozen=True)
class ProjectTaskNode:
    project: ProjectNode
    task: ProjectTask

    @property
    def group(self) -> str | None:
        return self.task.group


@dataclass(frozen=True)
class TaskSelectorNode:
    project: ProjectNode
    selector: TaskSelector

    @property
    def group(self) -> str | None:
        return self.selector.group


BaseProjectNode: TypeAlias = ProjectNode | FaultyProjectNode
TaskNode: TypeAlias = ProjectTaskNode | TaskSelectorNode


def group_key(name: str | None) -> str | None:
    """Fold blank or missing group names into the default key (None)."""
    if name is None or not name.strip():
        return None
    return name


@dataclass(frozen=True)
class TaskGroupNode:
    """Bucket of a project's tasks sharing a group name.

    Two group nodes are equal iff they belong to the same project and
    have the same group key; members are not compared.

    Attributes:
        project: Owning project node.
        group: Group key, None for the default group.
        task_nodes: Members in first-seen order, without duplicates.
    """

    project: ProjectNode
    group: str | None
    task_nodes: tuple[TaskNode, ...] = field(default=(), compare=False)

    @property
    def is_default(self) -> bool:
        return self.group is None

    @property
    def label(self) -> str:
        return DEFAULT_GROUP_LABEL if self.group is None else self.group


TreeElement: TypeAlias = BaseProjectNode | TaskGroupNode | TaskNode


@dataclass(frozen=True)
class ProjectForest:
    """Ordered arena of the project nodes produced by one rebuild."""

    nodes: tuple[BaseProjectNode, ...] = ()
    _by_key: dict[ProjectKey, ProjectNode] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )

    def __post_init__(self) -> None:
        by_key = {node.key: node for node in self.nodes if isinstance(node, ProjectNode)}
        object.__setattr__(self, "_by_key", by_key)

    def __len__(self) -> int:
        return len(self.nodes)

    def top_level(self) -> list[BaseProjectNode]:
        """Root project nodes and faulty project nodes, in arena order."""
        return [
            node
            for node in self.nodes
            if isinstance(node, FaultyProjectNode) or node.parent_key is None
        ]

    def project_nodes(self) -> list[ProjectNode]:
        return [node for node in self.nodes if isinstance(node, ProjectNode)]

    def children_of(self, node: ProjectNode) -> list[ProjectNode]:
        """Project nodes whose parent key points at ``node``."""
        return [child for child in self.project_nodes() if child.parent_key == node.key]

    def parent_of(self, node: ProjectNode) -> ProjectNode | None:
        if node.parent_key is None:
            return None
        return self._by_key.get(node.parent_key)
