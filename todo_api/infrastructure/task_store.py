"""Task Store — authoritative in-memory collection of tasks, keyed by id.

Invariants:
    - create/update/delete/clear hold the write lock across the whole check-then-act
    - get/list/count hold the read lock
    - Tasks go in as copies and come out as copies (snapshots); callers never
      see a live stored record
    - update never changes the stored id, whatever new_data.id says

Design Decisions:
    - One instance per application, built by create_app() and handed to routes
      through a dependency (no module-level store)
    - Failures raise typed errors from core/errors.py and are logged once, by
      the API error handler; only successful mutations are logged here
"""

import logging

from todo_api.core.domain_types import TaskId
from todo_api.core.errors import (
    DuplicateIdError, ErrorContext, TaskNotFoundError,
)
from todo_api.core.rw_lock import ReadWriteLock
from todo_api.core.task import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """Thread-safe map of task id to Task."""

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._tasks: dict[TaskId, Task] = {}

    def create(self, task: Task) -> None:
        """Insert task; DuplicateIdError if the id is taken."""
        with self._lock.write_locked():
            exists = task.id in self._tasks
            if not exists:
                self._tasks[task.id] = task.copy()
        if exists:
            raise DuplicateIdError(task.id, ErrorContext(operation="create"))
        logger.debug(f"Task {task.id} created", extra={"task_id": task.id})

    def list(self) -> list[Task]:
        """Snapshot of all tasks. Order is unspecified."""
        with self._lock.read_locked():
            return [t.copy() for t in self._tasks.values()]

    def get(self, task_id: TaskId) -> Task:
        with self._lock.read_locked():
            task = self._tasks.get(task_id)
            snapshot = task.copy() if task is not None else None
        if snapshot is None:
            raise self._not_found(task_id, "get")
        return snapshot

    def update(self, task_id: TaskId, new_data: Task) -> Task:
        """Replace title/description/status of an existing task, return the result."""
        with self._lock.write_locked():
            task = self._tasks.get(task_id)
            if task is not None:
                task.title = new_data.title
                task.description = new_data.description
                task.status = new_data.status
                snapshot = task.copy()
        if task is None:
            raise self._not_found(task_id, "update")
        logger.debug(f"Task {task_id} updated", extra={"task_id": task_id})
        return snapshot

    def delete(self, task_id: TaskId) -> None:
        with self._lock.write_locked():
            removed = self._tasks.pop(task_id, None)
        if removed is None:
            raise self._not_found(task_id, "delete")
        logger.debug(f"Task {task_id} deleted", extra={"task_id": task_id})

    def count(self) -> int:
        with self._lock.read_locked():
            return len(self._tasks)

    def clear(self) -> None:
        """Drop every task."""
        with self._lock.write_locked():
            self._tasks.clear()

    def __len__(self) -> int:
        return self.count()

    @staticmethod
    def _not_found(task_id: TaskId, operation: str) -> TaskNotFoundError:
        return TaskNotFoundError(task_id, ErrorContext(operation=operation))
