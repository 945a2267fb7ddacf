# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Task, TaskChanges, TaskQuery, TaskStatus
from .repositories import TaskRepository

__all__ = ["Task", "TaskChanges", "TaskQuery", "TaskRepository", "TaskStatus"]
