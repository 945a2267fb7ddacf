# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from taskm.application.use_cases.users.login_user import LoginUserUseCase
from taskm.application.use_cases.users.register_user import RegisterUserUseCase
from taskm.interfaces.http.dto.auth import (
    CredentialsRequestDTO,
    LoginResponseDTO,
    SignupResponseDTO,
    UserDTO,
)
from taskm.interfaces.http.json_body import json_object
from taskm.shared.errors.validation import raise_validation_error


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case

    def signup(self) -> tuple[Response, int]:
        try:
            dto = CredentialsRequestDTO.model_validate(json_object(request))
        except ValidationError as exc:
            raise_validation_error(exc)

        user, token = self._register_use_case.execute(dto.email or "", dto.password or "")

        payload = SignupResponseDTO(user=UserDTO.from_domain(user), token=token)
        return jsonify(payload.model_dump(mode="json", by_alias=True)), 200

    def login(self) -> tuple[Response, int]:
        try:
            dto = CredentialsRequestDTO.model_validate(json_object(request))
        except ValidationError as exc:
            raise_validation_error(exc)

        token = self._login_use_case.execute(dto.email or "", dto.password or "")

        payload = LoginResponseDTO(token=token)
        return jsonify(payload.model_dump(mode="json")), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/auth")
        bp.add_url_rule("/signup", view_func=self.signup, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        return bp
