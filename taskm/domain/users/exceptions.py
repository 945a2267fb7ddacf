# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from taskm.shared.errors.base import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)


class MissingCredentialsError(ValidationError):
    default_code = "missing_credentials"
    default_message = "All fields required"


class UserAlreadyExistsError(ConflictError):
    default_code = "user_already_exists"
    default_message = "User already exists"


class UserNotFoundError(NotFoundError):
    # Login reports an unknown email as a bad request.
    default_code = "user_not_found"
    default_message = "User not found"
    default_status = HTTPStatus.BAD_REQUEST


class InvalidCredentialsError(AuthenticationError):
    default_code = "invalid_credentials"
    default_message = "Invalid credentials"


class TokenMissingError(AuthenticationError):
    default_code = "token_missing"
    default_message = "No token provided"


class InvalidTokenError(AuthenticationError):
    default_code = "token_invalid"
    default_message = "Invalid or expired token"
    default_status = HTTPStatus.FORBIDDEN
