# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from taskm.domain.tasks.entities import Task, TaskChanges
from taskm.domain.tasks.exceptions import TaskNotFoundError
from taskm.domain.tasks.repositories import TaskRepository
from taskm.domain.users.entities import Identity
from taskm.shared.logging import logger


class EditTaskUseCase:
    """Overwrite title and/or description of an owned task.

    Unlike creation, an empty title is accepted here. Fields passed as None
    are left untouched.
    """

    def __init__(self, *, tasks: TaskRepository) -> None:
        self._tasks = tasks

    def execute(
        self,
        identity: Identity,
        task_id: str,
        title: str | None,
        description: str | None,
    ) -> Task:
        if title == "":
            logger.warning(
                f"task.edit: empty title accepted (user_id={identity.user_id}, task_id={task_id})"
            )
        changes = TaskChanges(title=title, description=description)
        task = self._tasks.update_for_owner(identity.user_id, task_id, changes)
        if task is None:
            logger.info(f"task.edit: not_found (user_id={identity.user_id}, task_id={task_id})")
            raise TaskNotFoundError()
        logger.info(f"task.edit: ok (user_id={identity.user_id}, task_id={task_id})")
        return task
