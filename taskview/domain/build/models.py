"""Build model input types.

Pure data structures describing a build as the build tool reports it:
projects nested through ``children``, each declaring its own tasks. These
are the domain projects the tree model is derived from.
"""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, model_validator

from taskview.domain.types import BuildPath


class BuildTask(BaseModel):
    """A task declared by a single project."""

    name: str
    path: str = Field(description="Absolute task path, e.g. ':lib:test'")
    description: str | None = None
    group: str | None = None
    public: bool = True

    model_config = {"frozen": True}

    @property
    def build_path(self) -> BuildPath:
        return BuildPath.from_string(self.path)


class BuildProject(BaseModel):
    """A project in the build tool's own project hierarchy.

    ``parent_path`` is None for the root project of a build. Children
    inherit their parent path and the build root directory when these
    are not given explicitly, so a snapshot only has to spell them out
    on the root project.
    """

    name: str
    path: str = Field(default=":", description="Project path, ':' for the root")
    project_dir: Path = Field(description="Directory of this project")
    root_dir: Path = Field(description="Root directory of the owning build")
    parent_path: str | None = None
    tasks: list[BuildTask] = Field(default_factory=list)
    children: list["BuildProject"] = Field(default_factory=list)

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def _link_children(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        path = data.get("path", ":")
        root_dir = data.get("root_dir")
        linked = []
        for child in data.get("children", []):
            if isinstance(child, BuildProject):
                update: dict[str, Any] = {}
                if child.parent_path is None:
                    update["parent_path"] = path
                linked.append(child.model_copy(update=update) if update else child)
            elif isinstance(child, dict):
                child = dict(child)
                child.setdefault("parent_path", path)
                if root_dir is not None:
                    child.setdefault("root_dir", root_dir)
                linked.append(child)
            else:
                linked.append(child)
        return {**data, "children": linked}

    @property
    def build_path(self) -> BuildPath:
        return BuildPath.from_string(self.path)

    @property
    def is_root(self) -> bool:
        """True if the project has no parent in the build hierarchy."""
        return self.parent_path is None

    def walk(self) -> list["BuildProject"]:
        """Return this project and all its descendants in pre-order."""
        projects = [self]
        for child in self.children:
            projects.extend(child.walk())
        return projects
