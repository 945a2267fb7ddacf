# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from taskm.application.services.password_hashing import WerkzeugPasswordHasher
from taskm.application.services.tokens import JwtTokenCodec
from taskm.application.use_cases.tasks import (
    CompleteTaskUseCase,
    CreateTaskUseCase,
    DeleteTaskUseCase,
    EditTaskUseCase,
    ListTasksUseCase,
)
from taskm.application.use_cases.users import (
    AuthorizeUserUseCase,
    LoginUserUseCase,
    RegisterUserUseCase,
)
from taskm.domain.users.repositories import PasswordHasher
from taskm.infrastructure.db import Database
from taskm.infrastructure.repositories import SqlAlchemyTaskRepository, SqlAlchemyUserRepository
from taskm.interfaces.http.controllers import AuthController, MiscController, TasksController
from taskm.shared.config import AppConfig


class Container:
    """Builds every collaborator once, from one config and one database handle."""

    def __init__(
        self,
        config: AppConfig,
        database: Database,
        *,
        password_hasher: PasswordHasher | None = None,
    ) -> None:
        self.config = config
        self.database = database
        self._password_hasher_override = password_hasher

    @cached_property
    def password_hasher(self) -> PasswordHasher:
        return self._password_hasher_override or WerkzeugPasswordHasher()

    @cached_property
    def token_codec(self) -> JwtTokenCodec:
        return JwtTokenCodec(
            self.config.secret_key,
            ttl=timedelta(days=self.config.token_ttl_days),
            algorithm=self.config.jwt_algorithm,
        )

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.database.session_factory)

    @cached_property
    def task_repository(self) -> SqlAlchemyTaskRepository:
        return SqlAlchemyTaskRepository(self.database.session_factory)

    # Authentication

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            tokens=self.token_codec,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_codec,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def authorize_user_use_case(self) -> AuthorizeUserUseCase:
        return AuthorizeUserUseCase(tokens=self.token_codec)

    # Tasks

    @cached_property
    def create_task_use_case(self) -> CreateTaskUseCase:
        return CreateTaskUseCase(tasks=self.task_repository)

    @cached_property
    def list_tasks_use_case(self) -> ListTasksUseCase:
        return ListTasksUseCase(tasks=self.task_repository)

    @cached_property
    def complete_task_use_case(self) -> CompleteTaskUseCase:
        return CompleteTaskUseCase(tasks=self.task_repository)

    @cached_property
    def edit_task_use_case(self) -> EditTaskUseCase:
        return EditTaskUseCase(tasks=self.task_repository)

    @cached_property
    def delete_task_use_case(self) -> DeleteTaskUseCase:
        return DeleteTaskUseCase(tasks=self.task_repository)

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
        )

    @cached_property
    def tasks_controller(self) -> TasksController:
        return TasksController(
            authorize_use_case=self.authorize_user_use_case,
            create_use_case=self.create_task_use_case,
            list_use_case=self.list_tasks_use_case,
            complete_use_case=self.complete_task_use_case,
            edit_use_case=self.edit_task_use_case,
            delete_use_case=self.delete_task_use_case,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(database=self.database)
