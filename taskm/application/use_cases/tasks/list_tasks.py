# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from time import perf_counter

from taskm.domain.tasks.entities import Task, TaskQuery
from taskm.domain.tasks.repositories import TaskRepository
from taskm.domain.users.entities import Identity
from taskm.shared.logging import logger


class ListTasksUseCase:
    """Caller's tasks matching the filters, newest first."""

    def __init__(self, *, tasks: TaskRepository) -> None:
        self._tasks = tasks

    def execute(self, identity: Identity, query: TaskQuery) -> list[Task]:
        if query.is_unsatisfiable():
            logger.debug(f"tasks.list: unknown status {query.status!r}, nothing to match")
            return []
        t0 = perf_counter()
        items = list(self._tasks.list_for_owner(identity.user_id, query))
        dt = (perf_counter() - t0) * 1000
        logger.info(f"tasks.list: ok (user_id={identity.user_id}, n={len(items)}, dt_ms={dt:.0f})")
        return items
