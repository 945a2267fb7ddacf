# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, cast


@dataclass(slots=True, eq=False)
class AppError(Exception):
    message: str
    status: HTTPStatus
    code: str = "app_error"
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message)

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message}


class DomainError(AppError):
    """Error raised by a use case; subclasses set class-level defaults."""

    def __init__(
        self,
        message: str | None = None,
        *,
        code: str | None = None,
        status: HTTPStatus | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        resolved_message = message or cast(str, getattr(type(self), "default_message", ""))
        resolved_code = code or cast(str, getattr(type(self), "default_code", "domain_error"))
        resolved_status = status or cast(
            HTTPStatus, getattr(type(self), "default_status", HTTPStatus.BAD_REQUEST)
        )
        super().__init__(
            message=resolved_message,
            status=resolved_status,
            code=resolved_code,
            context=context,
        )


class ValidationError(DomainError):
    default_code = "validation_error"
    default_message = "Invalid request"
    default_status = HTTPStatus.BAD_REQUEST


class ConflictError(DomainError):
    # Duplicate records are reported as 400, not 409.
    default_code = "conflict"
    default_message = "Resource already exists"
    default_status = HTTPStatus.BAD_REQUEST


class NotFoundError(DomainError):
    default_code = "not_found"
    default_message = "Not found"
    default_status = HTTPStatus.NOT_FOUND


class AuthenticationError(DomainError):
    default_code = "authentication_failed"
    default_message = "Unauthorized"
    default_status = HTTPStatus.UNAUTHORIZED


class StoreError(AppError):
    """Persistence failure; the message is the driver's error text."""

    def __init__(
        self,
        message: str,
        *,
        code: str = "store_error",
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            status=HTTPStatus.INTERNAL_SERVER_ERROR,
            code=code,
            context=context,
        )
