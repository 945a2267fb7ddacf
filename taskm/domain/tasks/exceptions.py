# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from taskm.shared.errors.base import NotFoundError, ValidationError


class TitleRequiredError(ValidationError):
    default_code = "title_required"
    default_message = "Title is required"


class TaskNotFoundError(NotFoundError):
    # Raised for missing tasks and for tasks owned by someone else alike.
    default_code = "task_not_found"
    default_message = "Task not found"


class TaskInvariantError(ValueError):
    """A ``Task`` was built with fields no repository may hold.

    Never reaches the API: ids and owners come from the server, not the caller.
    """

    def __init__(self, field: str, problem: str) -> None:
        super().__init__(f"task.{field} {problem}")
        self.field = field
