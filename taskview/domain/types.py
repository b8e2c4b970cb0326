"""Domain value objects for taskview.

Immutable value objects shared by the build model and the tree model.
"""

from dataclasses import dataclass

SEPARATOR = ":"


@dataclass(frozen=True, order=True)
class BuildPath:
    """Immutable path of a project or task inside a build.

    Paths are colon separated and absolute: ``:`` is the root project,
    ``:lib`` a subproject and ``:lib:test`` a task of that subproject.
    Ordering compares segment by segment, so ``:a:b`` sorts before ``:a-b``.

    Example:
        path = BuildPath.from_string(":lib:core")
        parent = path.parent()  # :lib
        task = path.child("build")  # :lib:core:build
    """

    segments: tuple[str, ...]

    @classmethod
    def from_string(cls, path: str) -> "BuildPath":
        """Create a BuildPath from a colon separated string.

        Args:
            path: String path like ":lib:core". A leading colon is optional.

        Returns:
            New BuildPath with parsed segments
        """
        stripped = path.strip(SEPARATOR)
        if not stripped:
            return cls(segments=())
        return cls(segments=tuple(stripped.split(SEPARATOR)))

    @classmethod
    def root(cls) -> "BuildPath":
        """Return the path of a build's root project."""
        return cls(segments=())

    def __str__(self) -> str:
        return SEPARATOR + SEPARATOR.join(self.segments)

    def parent(self) -> "BuildPath":
        """Return the path without the last segment (root stays root)."""
        return BuildPath(segments=self.segments[:-1])

    def child(self, name: str) -> "BuildPath":
        """Return a new path with an appended segment."""
        return BuildPath(segments=self.segments + (name,))

    @property
    def leaf_name(self) -> str:
        """Return the last segment, or empty string for the root path."""
        if not self.segments:
            return ""
        return self.segments[-1]

    @property
    def is_root(self) -> bool:
        return not self.segments
