"""Root conftest — shared test configuration."""

import os

import pytest

# Human-readable logs in test output, no .env surprises
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from todo_api.core.task import Task  # noqa: E402
from todo_api.infrastructure.task_store import TaskStore  # noqa: E402


@pytest.fixture
def store():
    return TaskStore()


@pytest.fixture
def make_task():
    """Factory for valid tasks; override any field by keyword."""
    def _make(**fields) -> Task:
        data = {
            "id": 1, "title": "Task", "description": "", "status": "not started",
        }
        data.update(fields)
        return Task(**data)
    return _make
