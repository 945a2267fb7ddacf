from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from taskm.domain.tasks.entities import Task, TaskChanges, TaskQuery, TaskStatus
from taskm.domain.users.entities import User
from taskm.domain.users.exceptions import UserAlreadyExistsError
from taskm.infrastructure.db import Database
from taskm.infrastructure.repositories import SqlAlchemyTaskRepository, SqlAlchemyUserRepository
from taskm.shared.errors import StoreError

T0 = datetime(2025, 1, 1, 12, 0, tzinfo=UTC)


@pytest.fixture()
def schema(database: Database) -> Database:
    database.init_schema()
    return database


@pytest.fixture()
def users(schema: Database) -> SqlAlchemyUserRepository:
    return SqlAlchemyUserRepository(schema.session_factory)


@pytest.fixture()
def tasks(schema: Database) -> SqlAlchemyTaskRepository:
    return SqlAlchemyTaskRepository(schema.session_factory)


@pytest.fixture()
def owner(users: SqlAlchemyUserRepository) -> User:
    return users.add(User(id=0, email="a@x.com", password_hash="h", created_at=T0))


def _task(task_id: str, owner_id: int, title: str, minutes: int) -> Task:
    return Task(
        id=task_id,
        owner_id=owner_id,
        title=title,
        description=None,
        status=TaskStatus.PENDING,
        created_at=T0 + timedelta(minutes=minutes),
    )


def test_user_round_trip(users: SqlAlchemyUserRepository, owner: User) -> None:
    found = users.find_by_email("a@x.com")

    assert found == owner
    assert found.id > 0
    assert found.created_at == T0
    assert users.find_by_email("A@x.com") is None


def test_duplicate_email_maps_to_conflict(users: SqlAlchemyUserRepository, owner: User) -> None:
    with pytest.raises(UserAlreadyExistsError):
        users.add(User(id=0, email=owner.email, password_hash="h2", created_at=T0))


def test_list_orders_newest_first(tasks: SqlAlchemyTaskRepository, owner: User) -> None:
    tasks.add(_task("a", owner.id, "old", 0))
    tasks.add(_task("c", owner.id, "newest", 10))
    tasks.add(_task("b", owner.id, "middle", 5))

    listed = tasks.list_for_owner(owner.id, TaskQuery())

    assert [t.id for t in listed] == ["c", "b", "a"]
    assert listed[0].created_at == T0 + timedelta(minutes=10)


def test_list_title_filter_is_literal_and_case_insensitive(
    tasks: SqlAlchemyTaskRepository, owner: User
) -> None:
    tasks.add(_task("a", owner.id, "Buy MILK", 0))
    tasks.add(_task("b", owner.id, "50% off", 1))
    tasks.add(_task("c", owner.id, "snake_case", 2))

    def ids(needle: str) -> list[str]:
        return [t.id for t in tasks.list_for_owner(owner.id, TaskQuery(title_contains=needle))]

    assert ids("milk") == ["a"]
    assert ids("%") == ["b"]
    assert ids("_") == ["c"]


def test_list_title_filter_folds_non_ascii_case(
    tasks: SqlAlchemyTaskRepository, owner: User
) -> None:
    tasks.add(_task("a", owner.id, "Äpfel kaufen", 0))
    tasks.add(_task("b", owner.id, "Café run", 1))
    tasks.add(_task("c", owner.id, "Straße fegen", 2))

    def ids(needle: str) -> list[str]:
        return [t.id for t in tasks.list_for_owner(owner.id, TaskQuery(title_contains=needle))]

    assert ids("äpfel") == ["a"]
    assert ids("CAFÉ") == ["b"]
    assert ids("STRASSE") == ["c"]


def test_list_combines_status_and_title(tasks: SqlAlchemyTaskRepository, owner: User) -> None:
    tasks.add(_task("a", owner.id, "Äpfel kaufen", 0))
    tasks.add(_task("b", owner.id, "äpfel schälen", 1))
    tasks.update_for_owner(owner.id, "a", TaskChanges(status=TaskStatus.COMPLETED))

    completed = tasks.list_for_owner(owner.id, TaskQuery(status="Completed", title_contains="ÄPFEL"))

    assert [t.id for t in completed] == ["a"]


def test_update_and_delete_are_owner_scoped(
    users: SqlAlchemyUserRepository, tasks: SqlAlchemyTaskRepository, owner: User
) -> None:
    other = users.add(User(id=0, email="b@x.com", password_hash="h", created_at=T0))
    tasks.add(_task("a", owner.id, "mine", 0))
    completed = TaskChanges(status=TaskStatus.COMPLETED)

    assert tasks.update_for_owner(other.id, "a", completed) is None
    assert tasks.delete_for_owner(other.id, "a") is False

    updated = tasks.update_for_owner(owner.id, "a", completed)
    assert updated is not None
    assert updated.status is TaskStatus.COMPLETED
    assert tasks.list_for_owner(owner.id, TaskQuery(status="Completed"))[0].id == "a"

    assert tasks.delete_for_owner(owner.id, "a") is True
    assert tasks.delete_for_owner(owner.id, "a") is False


def test_missing_table_raises_store_error(schema: Database, users: SqlAlchemyUserRepository) -> None:
    schema.drop_schema()

    with pytest.raises(StoreError) as exc_info:
        users.find_by_email("a@x.com")

    assert exc_info.value.status == 500
    assert "no such table" in exc_info.value.message
