# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import uuid
from collections.abc import Callable
from datetime import UTC, datetime

from taskm.domain.tasks.entities import Task, TaskStatus
from taskm.domain.tasks.exceptions import TitleRequiredError
from taskm.domain.tasks.repositories import TaskRepository
from taskm.domain.users.entities import Identity
from taskm.shared.logging import logger


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _new_task_id() -> str:
    return uuid.uuid4().hex


class CreateTaskUseCase:
    def __init__(
        self,
        *,
        tasks: TaskRepository,
        clock: Callable[[], datetime] = _utcnow,
        id_factory: Callable[[], str] = _new_task_id,
    ) -> None:
        self._tasks = tasks
        self._clock = clock
        self._id_factory = id_factory

    def execute(self, identity: Identity, title: str | None, description: str | None) -> Task:
        if not title:
            raise TitleRequiredError()
        task = Task(
            id=self._id_factory(),
            owner_id=identity.user_id,
            title=title,
            description=description,
            status=TaskStatus.PENDING,
            created_at=self._clock(),
        )
        persisted = self._tasks.add(task)
        logger.info(f"task.create: ok (user_id={identity.user_id}, task_id={persisted.id})")
        return persisted
