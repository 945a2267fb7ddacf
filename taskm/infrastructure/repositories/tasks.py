# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from taskm.domain.tasks.entities import Task as DomainTask
from taskm.domain.tasks.entities import TaskChanges, TaskQuery
from taskm.domain.tasks.repositories import TaskRepository
from taskm.infrastructure.db.models import Task, as_utc
from taskm.infrastructure.unit_of_work import unit_of_work_scope


def _to_domain(row: Task) -> DomainTask:
    return DomainTask(
        id=row.id,
        owner_id=row.owner_id,
        title=row.title,
        description=row.description,
        status=row.status,
        created_at=as_utc(row.created_at),
    )


class SqlAlchemyTaskRepository(TaskRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def add(self, task: DomainTask) -> DomainTask:
        with unit_of_work_scope(self._session_factory) as session:
            row = Task(
                id=task.id,
                owner_id=task.owner_id,
                title=task.title,
                description=task.description,
                status=task.status,
                created_at=task.created_at,
            )
            session.add(row)
            session.flush()
            return _to_domain(row)

    def list_for_owner(self, owner_id: int, query: TaskQuery) -> Sequence[DomainTask]:
        stmt = select(Task).where(Task.owner_id == owner_id)
        status = query.status_filter
        if status is not None:
            stmt = stmt.where(Task.status == status)
        stmt = stmt.order_by(Task.created_at.desc(), Task.id.desc())

        with unit_of_work_scope(self._session_factory) as session:
            rows = session.scalars(stmt).all()
            tasks = [_to_domain(row) for row in rows]

        # SQLite lower() and LIKE fold ASCII only; titles are matched with casefold().
        return [task for task in tasks if query.matches(task)]

    def update_for_owner(
        self, owner_id: int, task_id: str, changes: TaskChanges
    ) -> DomainTask | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.scalars(
                select(Task).where(Task.id == task_id, Task.owner_id == owner_id)
            ).first()
            if row is None:
                return None
            for name, value in changes.as_values().items():
                setattr(row, name, value)
            session.flush()
            return _to_domain(row)

    def delete_for_owner(self, owner_id: int, task_id: str) -> bool:
        with unit_of_work_scope(self._session_factory) as session:
            result = session.execute(
                delete(Task).where(Task.id == task_id, Task.owner_id == owner_id)
            )
            return bool(result.rowcount)
