"""Route dependencies — store lookup, path id parsing, body decoding.

Invariants:
    - Routes list parse_task_id before read_task_payload, so a bad path id is
      reported before a bad body
    - The body is decoded as JSON whatever Content-Type the client sent
"""

import re

from fastapi import Request

from todo_api.core.errors import InvalidPathIdError
from todo_api.infrastructure.task_store import TaskStore
from todo_api.schemas.task import INT64_MAX, INT64_MIN, TaskPayload

_PATH_ID = re.compile(r"[+-]?[0-9]+")


def get_task_store(request: Request) -> TaskStore:
    """The store built by create_app() for this application."""
    return request.app.state.task_store


def parse_task_id(task_id: str) -> int:
    """Signed 64-bit decimal id from the path; InvalidPathIdError otherwise."""
    if not _PATH_ID.fullmatch(task_id):
        raise InvalidPathIdError()
    value = int(task_id)
    if not INT64_MIN <= value <= INT64_MAX:
        raise InvalidPathIdError()
    return value


async def read_task_payload(request: Request) -> TaskPayload:
    return TaskPayload.decode(await request.body())
