"""Build invocations: the tasks and task selectors available per project.

An InvocationIndex maps every project path of one build to the project
tasks declared by that project and the task selectors that can be run
from it. The index is built once per build root and shared read-only by
all tree nodes derived from that build.
"""

from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from taskview.domain.build.models import BuildProject, BuildTask
from taskview.domain.types import BuildPath


@dataclass(frozen=True)
class ProjectTask:
    """A concrete task declared by a specific project."""

    name: str
    path: BuildPath
    project_path: BuildPath
    description: str | None = None
    group: str | None = None
    public: bool = True

    @classmethod
    def from_build_task(cls, task: BuildTask, project_path: BuildPath) -> "ProjectTask":
        return cls(
            name=task.name,
            path=task.build_path,
            project_path=project_path,
            description=task.description,
            group=task.group,
            public=task.public,
        )


@dataclass(frozen=True)
class TaskSelector:
    """A named task reference that resolves to one or more task paths.

    Running a selector from a project runs every task of that name in the
    project and its subprojects. ``selected_task_paths`` is always
    duplicate free and sorted ascending; use :meth:`create` to build a
    selector from an arbitrary collection of paths.
    """

    name: str
    description: str
    project_path: BuildPath
    public: bool
    group: str | None
    selected_task_paths: tuple[BuildPath, ...]

    @classmethod
    def create(
        cls,
        name: str,
        description: str,
        project_path: BuildPath,
        public: bool,
        group: str | None,
        selected_task_paths: Iterable[BuildPath],
    ) -> "TaskSelector":
        """Create a selector, normalising the candidate task paths.

        Args:
            name: Task name the selector runs.
            description: Human-readable description.
            project_path: Path of the project the selector belongs to.
            public: Whether any selected task is public.
            group: Group name, or None if the selector is ungrouped.
            selected_task_paths: Candidate task paths in any order,
                possibly with duplicates.

        Returns:
            New TaskSelector with sorted, unique candidate paths
        """
        return cls(
            name=name,
            description=description,
            project_path=project_path,
            public=public,
            group=group,
            selected_task_paths=tuple(sorted(set(selected_task_paths))),
        )


@dataclass(frozen=True)
class BuildInvocations:
    """Project tasks and task selectors of a single project."""

    project_tasks: tuple[ProjectTask, ...] = ()
    task_selectors: tuple[TaskSelector, ...] = ()


@dataclass(frozen=True)
class InvocationIndex:
    """Read-only mapping from project path to that project's invocations."""

    entries: Mapping[BuildPath, BuildInvocations] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def get(self, path: BuildPath) -> BuildInvocations | None:
        return self.entries.get(path)

    def __contains__(self, path: object) -> bool:
        return path in self.entries

    def __iter__(self) -> Iterator[BuildPath]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


# Produces the index of a whole build from its root project
InvocationSource = Callable[[BuildProject], InvocationIndex]


def build_invocation_index(root: BuildProject) -> InvocationIndex:
    """Derive the invocation index for the build rooted at ``root``.

    Every project of the subtree gets an entry, including projects
    without any tasks.

    Args:
        root: Root project of the build.

    Returns:
        InvocationIndex keyed by project path
    """
    entries: dict[BuildPath, BuildInvocations] = {}
    for project in root.walk():
        project_path = project.build_path
        project_tasks = tuple(
            ProjectTask.from_build_task(task, project_path) for task in project.tasks
        )
        entries[project_path] = BuildInvocations(
            project_tasks=project_tasks,
            task_selectors=_task_selectors_for(project),
        )
    return InvocationIndex(entries)


def _task_selectors_for(project: BuildProject) -> tuple[TaskSelector, ...]:
    """One selector per distinct task name in the project and its subprojects."""
    tasks_by_name: dict[str, list[BuildTask]] = {}
    for descendant in project.walk():
        for task in descendant.tasks:
            tasks_by_name.setdefault(task.name, []).append(task)

    selectors = []
    for name in sorted(tasks_by_name):
        tasks = sorted(tasks_by_name[name], key=lambda t: t.build_path)
        selectors.append(
            TaskSelector.create(
                name=name,
                description=f"Executes '{name}' in '{project.path}' and all its subprojects.",
                project_path=project.build_path,
                public=any(task.public for task in tasks),
                group=next((t.group for t in tasks if t.group and t.group.strip()), None),
                selected_task_paths=(task.build_path for task in tasks),
            )
        )
    return tuple(selectors)
