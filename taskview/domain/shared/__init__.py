"""Shared domain building blocks.

- Result type (``Ok`` / ``Err``) for expected failures
- Base domain event
"""

from taskview.domain.shared.events import DomainEvent
from taskview.domain.shared.result import (
    Err,
    Ok,
    Result,
    is_err,
    is_ok,
)

__all__ = [
    # Result
    "Ok",
    "Err",
    "Result",
    "is_ok",
    "is_err",
    # Domain events
    "DomainEvent",
]
