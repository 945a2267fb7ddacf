# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from taskm.domain.tasks.exceptions import TaskNotFoundError
from taskm.domain.tasks.repositories import TaskRepository
from taskm.domain.users.entities import Identity
from taskm.shared.logging import logger


class DeleteTaskUseCase:
    def __init__(self, *, tasks: TaskRepository) -> None:
        self._tasks = tasks

    def execute(self, identity: Identity, task_id: str) -> None:
        if not self._tasks.delete_for_owner(identity.user_id, task_id):
            logger.info(f"task.delete: not_found (user_id={identity.user_id}, task_id={task_id})")
            raise TaskNotFoundError()
        logger.info(f"task.delete: ok (user_id={identity.user_id}, task_id={task_id})")
