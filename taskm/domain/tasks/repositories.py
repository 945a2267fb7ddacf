# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Task, TaskChanges, TaskQuery


class TaskRepository(Protocol):
    """Task persistence; every lookup is scoped to the owning user."""

    def add(self, task: Task) -> Task: ...

    def list_for_owner(self, owner_id: int, query: TaskQuery) -> Sequence[Task]: ...

    def update_for_owner(
        self, owner_id: int, task_id: str, changes: TaskChanges
    ) -> Task | None: ...

    def delete_for_owner(self, owner_id: int, task_id: str) -> bool: ...
