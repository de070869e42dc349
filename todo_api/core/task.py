"""Task Entity — the record this service manages, plus normalization and validation.

Invariants:
    - preprocess() trims title and description in place and is idempotent
    - validate() is pure and checks id, then title, then status
    - validate() must run after preprocess(): a whitespace-only title is empty
"""

from dataclasses import dataclass, replace

from todo_api.core.domain_types import TaskStatus
from todo_api.core.errors import (
    ErrorContext, InvalidIdError, EmptyTitleError, InvalidStatusError,
)


@dataclass
class Task:
    """A single task record."""
    id: int = 0
    title: str = ""
    description: str = ""
    status: str = ""

    def preprocess(self) -> None:
        """Strip leading/trailing whitespace from text fields."""
        self.title = self.title.strip()
        self.description = self.description.strip()

    def validate(self) -> None:
        """Raise the first TaskValidationError that applies, else return None."""
        ctx = ErrorContext(task_id=self.id, operation="validate")
        if self.id <= 0:
            raise InvalidIdError(ctx)
        if self.title == "":
            raise EmptyTitleError(ctx)
        if not TaskStatus.is_valid(self.status):
            raise InvalidStatusError(ctx)

    def copy(self) -> "Task":
        """Independent snapshot of this record."""
        return replace(self)
