# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from taskm.domain.tasks.entities import Task, TaskChanges, TaskStatus
from taskm.domain.tasks.exceptions import TaskNotFoundError
from taskm.domain.tasks.repositories import TaskRepository
from taskm.domain.users.entities import Identity
from taskm.shared.logging import logger


class CompleteTaskUseCase:
    def __init__(self, *, tasks: TaskRepository) -> None:
        self._tasks = tasks

    def execute(self, identity: Identity, task_id: str) -> Task:
        # Completing an already completed task is not an error.
        task = self._tasks.update_for_owner(
            identity.user_id, task_id, TaskChanges(status=TaskStatus.COMPLETED)
        )
        if task is None:
            logger.info(f"task.complete: not_found (user_id={identity.user_id}, task_id={task_id})")
            raise TaskNotFoundError()
        logger.info(f"task.complete: ok (user_id={identity.user_id}, task_id={task_id})")
        return task
