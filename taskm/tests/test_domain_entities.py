from __future__ import annotations

from datetime import UTC, datetime

import pytest

from taskm.domain.tasks.entities import Task, TaskChanges, TaskQuery, TaskStatus
from taskm.domain.tasks.exceptions import TaskInvariantError


def _task(**overrides) -> Task:
    fields = dict(
        id="abc",
        owner_id=1,
        title="Buy milk",
        description=None,
        status=TaskStatus.PENDING,
        created_at=datetime(2025, 1, 1, tzinfo=UTC),
    )
    fields.update(overrides)
    return Task(**fields)


def test_status_parse_is_exact() -> None:
    assert TaskStatus.parse("Pending") is TaskStatus.PENDING
    assert TaskStatus.parse("Completed") is TaskStatus.COMPLETED
    assert TaskStatus.parse("pending") is None
    assert TaskStatus.parse("Done") is None


def test_task_invariants() -> None:
    with pytest.raises(TaskInvariantError) as exc_info:
        _task(id="")
    assert exc_info.value.field == "id"

    with pytest.raises(TaskInvariantError) as exc_info:
        _task(owner_id=0)
    assert exc_info.value.field == "owner_id"


def test_changes_skip_none_fields() -> None:
    assert TaskChanges().as_values() == {}
    assert TaskChanges(title="", description=None).as_values() == {"title": ""}


def test_changes_carry_status() -> None:
    assert TaskChanges(status=TaskStatus.COMPLETED).as_values() == {"status": TaskStatus.COMPLETED}


def test_query_without_filters_matches_everything() -> None:
    query = TaskQuery(status="", title_contains="")

    assert query.status_filter is None
    assert query.title_filter is None
    assert not query.is_unsatisfiable()
    assert query.matches(_task())


def test_query_title_is_case_insensitive_substring() -> None:
    assert TaskQuery(title_contains="MILK").matches(_task())
    assert not TaskQuery(title_contains="bread").matches(_task())


def test_query_unknown_status_is_unsatisfiable() -> None:
    query = TaskQuery(status="Archived")

    assert query.is_unsatisfiable()
    assert not query.matches(_task())


def test_query_status_filter() -> None:
    assert TaskQuery(status="Pending").matches(_task())
    assert not TaskQuery(status="Completed").matches(_task())
