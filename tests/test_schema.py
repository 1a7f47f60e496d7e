# tests/test_schema.py

from __future__ import annotations

import pytest
from pydantic import ValidationError

from task_cli.schema import Task, TaskList, TaskStatus


def _tasks(*specs: tuple[int, str]) -> TaskList:
    return TaskList([Task(id=i, description=f"task {i}", status=s) for i, s in specs])


def test_task_defaults_to_todo_with_aware_timestamps() -> None:
    task = Task(id=1, description="buy milk")
    assert task.status is TaskStatus.TODO
    assert task.created_at.tzinfo is not None
    assert task.updated_at.tzinfo is not None


def test_task_serializes_camel_case_timestamps() -> None:
    data = Task(id=1, description="buy milk").model_dump(mode="json", by_alias=True)
    assert set(data) == {"id", "description", "status", "createdAt", "updatedAt"}
    assert data["status"] == "todo"


def test_task_accepts_alias_and_field_names() -> None:
    by_alias = Task.model_validate(
        {"id": 1, "description": "x", "createdAt": "2024-01-02T03:04:05Z", "updatedAt": "2024-01-02T03:04:05Z"}
    )
    by_name = Task(id=1, description="x", created_at=by_alias.created_at, updated_at=by_alias.updated_at)
    assert by_alias == by_name


def test_task_rejects_bad_status_and_non_positive_id() -> None:
    with pytest.raises(ValidationError):
        Task(id=1, description="x", status="blocked")
    with pytest.raises(ValidationError):
        Task(id=0, description="x")


def test_next_id_is_max_plus_one() -> None:
    assert TaskList().next_id() == 1
    # a gap left by a delete must not be reused
    assert _tasks((2, "todo"), (5, "done")).next_id() == 6


def test_find_and_filter_keep_order() -> None:
    task_list = _tasks((1, "done"), (2, "todo"), (3, "done"))
    assert task_list.find(2).description == "task 2"
    assert task_list.find(9) is None
    assert [t.id for t in task_list.filter("done")] == [1, 3]
    assert [t.id for t in task_list.filter(TaskStatus.TODO)] == [2]
    assert [t.id for t in task_list.filter("")] == [1, 2, 3]
    assert [t.id for t in task_list.filter(None)] == [1, 2, 3]
