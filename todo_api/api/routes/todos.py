"""Todo Routes — collection (/todos) and item (/todos/{task_id}) endpoints.

Invariants:
    - POST and PUT run preprocess() before validate(), then exactly one store call
    - PUT takes the id from the path; any id in the body is ignored
    - On the item route the path id is checked first, then the method, then the body
    - Handlers are sync: FastAPI runs each request in its worker thread pool,
      and the store's lock is the only shared serialization point
    - Store errors propagate as TodoError; error_handlers.py renders them

Design Decisions:
    - /todos/ (empty id segment) is routed explicitly so it answers 400 "missing id"
      instead of a slash redirect
    - POST/PATCH on /todos/{task_id} are routed too, so an invalid id wins over 405
"""

from fastapi import APIRouter, Depends, Response, status

from todo_api.api.dependencies import get_task_store, parse_task_id, read_task_payload
from todo_api.core.errors import InvalidPathIdError, UnsupportedMethodError
from todo_api.core.task import Task
from todo_api.infrastructure.task_store import TaskStore
from todo_api.schemas.task import TaskPayload, TaskResponse

router = APIRouter(prefix="/todos", tags=["todos"])

ITEM_METHODS = ["GET", "PUT", "DELETE"]


def _decode_task(body: TaskPayload) -> Task:
    task = body.to_task()
    task.preprocess()
    task.validate()
    return task


# ─── Collection ─────────────────────────────────────────────────

@router.post(
    "", status_code=status.HTTP_201_CREATED, response_class=Response,
)
def create_todo(
    body: TaskPayload = Depends(read_task_payload),
    store: TaskStore = Depends(get_task_store),
) -> Response:
    """Create a task with a client-supplied id."""
    store.create(_decode_task(body))
    return Response(status_code=status.HTTP_201_CREATED)


@router.get("", response_model=list[TaskResponse])
def list_todos(store: TaskStore = Depends(get_task_store)):
    """All tasks, in no particular order."""
    return [TaskResponse.from_task(t) for t in store.list()]


# ─── Item ───────────────────────────────────────────────────────

@router.get("/{task_id}", response_model=TaskResponse)
def get_todo(
    task_id: int = Depends(parse_task_id),
    store: TaskStore = Depends(get_task_store),
):
    return TaskResponse.from_task(store.get(task_id))


@router.put("/{task_id}", response_model=TaskResponse)
def replace_todo(
    task_id: int = Depends(parse_task_id),
    body: TaskPayload = Depends(read_task_payload),
    store: TaskStore = Depends(get_task_store),
):
    """Replace title, description and status of an existing task."""
    updated = store.update(task_id, _decode_task(body))
    return TaskResponse.from_task(updated)


@router.delete(
    "/{task_id}", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_todo(
    task_id: int = Depends(parse_task_id),
    store: TaskStore = Depends(get_task_store),
) -> Response:
    store.delete(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.api_route(
    "/{task_id}", methods=["POST", "PATCH"], include_in_schema=False,
)
def todo_method_not_allowed(task_id: int = Depends(parse_task_id)):
    raise UnsupportedMethodError(ITEM_METHODS)


@router.api_route(
    "/", methods=[*ITEM_METHODS, "POST", "PATCH"], include_in_schema=False,
)
def missing_todo_id():
    raise InvalidPathIdError(missing=True)
