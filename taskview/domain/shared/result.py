"""Result type for explicit error handling in domain operations.

A Result is either ``Ok(value)`` or ``Err(error)``. The tree model uses it
wherever absence or failure is an expected outcome, e.g. a domain project
with no corresponding workspace project, or a snapshot file that cannot be
read.

Example usage:
    >>> def find(name: str) -> Result[str, str]:
    ...     if not name:
    ...         return Err("Empty name")
    ...     return Ok(name.upper())
    ...
    >>> result = find("core")
    >>> if is_ok(result):
    ...     print(result.value)
    CORE
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Represents a successful result containing a value.

    Attributes:
        value: The success value of type T.
    """

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Represents a failed result containing an error.

    Attributes:
        error: The error value of type E.
    """

    error: E


# Using Union here as TypeVar aliases don't work with | syntax at runtime
Result = Union[Ok[T], Err[E]]  # noqa: UP007


def is_ok(result: Ok[T] | Err[E]) -> bool:
    """Check if a result is successful."""
    return isinstance(result, Ok)


def is_err(result: Ok[T] | Err[E]) -> bool:
    """Check if a result is an error."""
    return isinstance(result, Err)
