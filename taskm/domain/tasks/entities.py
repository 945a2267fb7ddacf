# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Domain entities for the per-user task list."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from .exceptions import TaskInvariantError


class TaskStatus(str, Enum):
    PENDING = "Pending"
    COMPLETED = "Completed"

    @classmethod
    def parse(cls, value: str) -> TaskStatus | None:
        """Exact, case-sensitive lookup; unknown values give None."""

        for member in cls:
            if member.value == value:
                return member
        return None


@dataclass(slots=True, frozen=True)
class Task:
    """A unit of work owned by exactly one user."""

    id: str
    owner_id: int
    title: str
    description: str | None
    status: TaskStatus
    created_at: datetime

    def __post_init__(self) -> None:
        if not self.id:
            raise TaskInvariantError("id", "must be set")
        if self.owner_id <= 0:
            raise TaskInvariantError("owner_id", "must be a positive user id")


@dataclass(slots=True, frozen=True)
class TaskChanges:
    """Field overwrites for an existing task; None leaves a field unchanged."""

    title: str | None = None
    description: str | None = None
    status: TaskStatus | None = None

    def as_values(self) -> dict[str, Any]:
        values: dict[str, Any] = {}
        if self.title is not None:
            values["title"] = self.title
        if self.description is not None:
            values["description"] = self.description
        if self.status is not None:
            values["status"] = self.status
        return values


@dataclass(slots=True, frozen=True)
class TaskQuery:
    """List filters as received from the caller.

    Empty strings mean "no filter". A status that is not one of the known
    values cannot match any task, so the query is unsatisfiable rather than
    invalid.
    """

    status: str | None = None
    title_contains: str | None = None

    @property
    def status_filter(self) -> TaskStatus | None:
        if not self.status:
            return None
        return TaskStatus.parse(self.status)

    @property
    def title_filter(self) -> str | None:
        return self.title_contains or None

    def is_unsatisfiable(self) -> bool:
        return bool(self.status) and self.status_filter is None

    def matches(self, task: Task) -> bool:
        if self.is_unsatisfiable():
            return False
        status = self.status_filter
        if status is not None and task.status is not status:
            return False
        needle = self.title_filter
        if needle is not None and needle.casefold() not in task.title.casefold():
            return False
        return True
