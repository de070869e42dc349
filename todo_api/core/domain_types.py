"""Domain Types — identity and status types for tasks.

Invariants:
    - TaskStatus values are the exact wire strings ("not started", ...)
    - TaskId wraps int; positivity is checked by Task.validate, not here

Design Decisions:
    - str Enum: members compare equal to their wire value and serialize to JSON
      without custom encoders
"""

from enum import Enum
from typing import NewType


TaskId = NewType("TaskId", int)


class TaskStatus(str, Enum):
    """Allowed task states."""
    NOT_STARTED = "not started"
    IN_PROGRESS = "in progress"
    COMPLETED = "completed"

    @classmethod
    def is_valid(cls, value: object) -> bool:
        """True if value is one of the enumerated wire strings."""
        return isinstance(value, str) and any(value == s.value for s in cls)
