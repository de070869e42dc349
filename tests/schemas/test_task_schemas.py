"""Task Schemas — strict decoding of request bodies and encoding of responses.

Invariants:
    - id must be a JSON integer; strings, floats and booleans are malformed
    - missing or null fields default to zero values (validation, not decoding,
      rejects them)
    - id must fit a signed 64-bit integer
    - decode() turns any parse failure into MalformedPayloadError
    - unknown fields are ignored
"""

import pytest
from pydantic import ValidationError

from todo_api.core.domain_types import TaskStatus
from todo_api.core.errors import MalformedPayloadError
from todo_api.core.task import Task
from todo_api.schemas.task import INT64_MAX, TaskPayload, TaskResponse


def test_payload_decodes_full_object():
    payload = TaskPayload.model_validate_json(
        '{"id": 1, "title": "Task 1", "description": "Test", "status": "not started"}',
    )
    assert payload.to_task() == Task(
        id=1, title="Task 1", description="Test", status="not started",
    )


def test_payload_missing_fields_take_zero_values():
    task = TaskPayload.model_validate({}).to_task()
    assert task == Task(id=0, title="", description="", status="")


def test_payload_ignores_unknown_fields():
    payload = TaskPayload.model_validate({"id": 2, "title": "x", "owner": "bob"})
    assert not hasattr(payload, "owner")


@pytest.mark.parametrize("bad", [
    {"id": "1"},
    {"id": 1.5},
    {"id": True},
    {"title": 5},
    {"status": ["completed"]},
])
def test_payload_rejects_wrong_types(bad):
    with pytest.raises(ValidationError):
        TaskPayload.model_validate(bad)


def test_payload_does_not_trim():
    payload = TaskPayload.model_validate({"id": 1, "title": "  padded  "})
    assert payload.title == "  padded  "


def test_response_serializes_status_as_wire_value():
    resp = TaskResponse.from_task(
        Task(id=3, title="t", description="d", status="in progress"),
    )
    assert resp.status is TaskStatus.IN_PROGRESS
    assert resp.model_dump(mode="json") == {
        "id": 3, "title": "t", "description": "d", "status": "in progress",
    }


def test_payload_null_fields_take_zero_values():
    payload = TaskPayload.decode(
        b'{"id": null, "title": null, "description": null, "status": null}',
    )
    assert payload.to_task() == Task(id=0, title="", description="", status="")


def test_payload_accepts_largest_int64_id():
    assert TaskPayload.decode(f'{{"id": {INT64_MAX}}}'.encode()).id == INT64_MAX


@pytest.mark.parametrize("task_id", [INT64_MAX + 1, 10**30, -(2**63) - 1])
def test_payload_rejects_ids_beyond_int64(task_id):
    with pytest.raises(MalformedPayloadError):
        TaskPayload.decode(f'{{"id": {task_id}, "title": "x"}}'.encode())


@pytest.mark.parametrize("raw", [b"", b"{", b"[]", b"null", b'"task"', b'{"id": "1"}'])
def test_decode_wraps_parse_failures(raw):
    with pytest.raises(MalformedPayloadError):
        TaskPayload.decode(raw)
