# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.tasks import (
    CompleteTaskUseCase,
    CreateTaskUseCase,
    DeleteTaskUseCase,
    EditTaskUseCase,
    ListTasksUseCase,
)
from .use_cases.users import AuthorizeUserUseCase, LoginUserUseCase, RegisterUserUseCase

__all__ = [
    "AuthorizeUserUseCase",
    "CompleteTaskUseCase",
    "CreateTaskUseCase",
    "DeleteTaskUseCase",
    "EditTaskUseCase",
    "ListTasksUseCase",
    "LoginUserUseCase",
    "RegisterUserUseCase",
]
