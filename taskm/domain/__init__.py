# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .tasks import Task, TaskChanges, TaskQuery, TaskStatus
from .users import Identity, SessionToken, User

__all__ = [
    "Identity",
    "SessionToken",
    "Task",
    "TaskChanges",
    "TaskQuery",
    "TaskStatus",
    "User",
]
