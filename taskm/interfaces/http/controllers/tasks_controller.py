# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from taskm.application.use_cases.tasks import (
    CompleteTaskUseCase,
    CreateTaskUseCase,
    DeleteTaskUseCase,
    EditTaskUseCase,
    ListTasksUseCase,
)
from taskm.application.use_cases.users.authorize_user import AuthorizeUserUseCase
from taskm.domain.users.entities import Identity
from taskm.interfaces.http.auth import auth_required
from taskm.interfaces.http.dto.tasks import (
    CreateTaskRequestDTO,
    EditTaskRequestDTO,
    TaskDeletedResponseDTO,
    TaskDTO,
    TaskListResponseDTO,
    TaskQueryDTO,
    TaskResponseDTO,
)
from taskm.interfaces.http.json_body import json_object
from taskm.shared.errors.validation import raise_validation_error


def _task_response(dto: TaskResponseDTO | TaskListResponseDTO) -> Response:
    return jsonify(dto.model_dump(mode="json", by_alias=True))


class TasksController:
    def __init__(
        self,
        *,
        authorize_use_case: AuthorizeUserUseCase,
        create_use_case: CreateTaskUseCase,
        list_use_case: ListTasksUseCase,
        complete_use_case: CompleteTaskUseCase,
        edit_use_case: EditTaskUseCase,
        delete_use_case: DeleteTaskUseCase,
    ) -> None:
        self._authorize_use_case = authorize_use_case
        self._create_use_case = create_use_case
        self._list_use_case = list_use_case
        self._complete_use_case = complete_use_case
        self._edit_use_case = edit_use_case
        self._delete_use_case = delete_use_case

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("tasks", __name__, url_prefix="/api/tasks")
        bp.add_url_rule("", view_func=self.create, methods=["POST"])
        bp.add_url_rule("", view_func=self.list_tasks, methods=["GET"])
        bp.add_url_rule("/<task_id>", view_func=self.complete, methods=["PUT"])
        bp.add_url_rule("/<task_id>/edit", view_func=self.edit, methods=["PUT"])
        bp.add_url_rule("/<task_id>", view_func=self.delete, methods=["DELETE"])
        return bp

    @auth_required
    def create(self, identity: Identity) -> tuple[Response, int]:
        try:
            dto = CreateTaskRequestDTO.model_validate(json_object(request))
        except ValidationError as exc:
            raise_validation_error(exc)

        task = self._create_use_case.execute(identity, dto.title, dto.description)
        return _task_response(TaskResponseDTO(task=TaskDTO.from_domain(task))), 201

    @auth_required
    def list_tasks(self, identity: Identity) -> Response:
        query = TaskQueryDTO(
            status=request.args.get("status"),
            title=request.args.get("title"),
        ).to_query()

        tasks = self._list_use_case.execute(identity, query)
        return _task_response(
            TaskListResponseDTO(tasks=[TaskDTO.from_domain(task) for task in tasks])
        )

    @auth_required
    def complete(self, task_id: str, identity: Identity) -> Response:
        task = self._complete_use_case.execute(identity, task_id)
        return _task_response(TaskResponseDTO(task=TaskDTO.from_domain(task)))

    @auth_required
    def edit(self, task_id: str, identity: Identity) -> Response:
        try:
            dto = EditTaskRequestDTO.model_validate(json_object(request))
        except ValidationError as exc:
            raise_validation_error(exc)

        task = self._edit_use_case.execute(identity, task_id, dto.title, dto.description)
        return _task_response(TaskResponseDTO(task=TaskDTO.from_domain(task)))

    @auth_required
    def delete(self, task_id: str, identity: Identity) -> Response:
        self._delete_use_case.execute(identity, task_id)
        return jsonify(TaskDeletedResponseDTO().model_dump(mode="json"))
