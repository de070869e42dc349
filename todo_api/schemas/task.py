"""Task Schemas — request decoding and response encoding for the task JSON object.

Invariants:
    - TaskPayload is strict: id must be a JSON integer, text fields JSON strings
    - id must fit a signed 64-bit integer
    - Missing or null fields become zero values, so a missing id reaches
      Task.validate() and fails as an invalid id, not as a decode error
    - Unknown fields are ignored
    - TaskPayload does NOT trim or validate content (Task.preprocess/validate do)
    - Decoding ignores the request Content-Type: the raw body is parsed as JSON
"""

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from todo_api.core.domain_types import TaskStatus
from todo_api.core.errors import MalformedPayloadError
from todo_api.core.task import Task

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class TaskPayload(BaseModel):
    """POST/PUT body."""
    model_config = ConfigDict(strict=True, extra="ignore")

    id: int = Field(0, ge=INT64_MIN, le=INT64_MAX)
    title: str = ""
    description: str = ""
    status: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def null_is_zero_value(cls, v, info):
        if v is None:
            return cls.model_fields[info.field_name].default
        return v

    @classmethod
    def decode(cls, raw: bytes) -> "TaskPayload":
        """Parse a request body; MalformedPayloadError if it is not a task object."""
        try:
            return cls.model_validate_json(raw)
        except ValidationError as e:
            raise MalformedPayloadError() from e

    def to_task(self) -> Task:
        return Task(
            id=self.id, title=self.title,
            description=self.description, status=self.status,
        )


class TaskResponse(BaseModel):
    """Task as returned to clients."""
    id: int
    title: str
    description: str
    status: TaskStatus

    @classmethod
    def from_task(cls, task: Task) -> "TaskResponse":
        return cls(
            id=task.id, title=task.title,
            description=task.description, status=TaskStatus(task.status),
        )
