# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""JSON error responses.

Every failure leaves the API as ``{"message": ...}`` with the status carried
by the error class. Anything that is not an :class:`AppError` is reported as a
bare 500 so internals never reach the client.
"""

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response, g, jsonify, request
from werkzeug.exceptions import HTTPException

from taskm.shared.logging import logger

from .base import AppError, StoreError

GENERIC_ERROR_MESSAGE = "Internal server error"


def handle_app_error(error: AppError) -> tuple[Response, HTTPStatus]:
    return jsonify(error.to_dict()), error.status


def _where() -> str:
    return f"{request.method} {request.path}, user={g.get('user_id')}"


def register_error_handler(
    app: Flask,
    *,
    debug_mode: bool = False,
    default_status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR,
) -> None:
    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        if isinstance(exc, StoreError):
            logger.error(f"Store failure on {_where()}: {exc.message}")
        else:
            logger.warning(f"{exc.code} ({int(exc.status)}) on {_where()}")
        return handle_app_error(exc)

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        # Routing errors (404, 405) and malformed requests raised by werkzeug.
        return jsonify({"message": exc.description or exc.name}), exc.code or default_status

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        if debug_mode:
            logger.exception(f"Unhandled {type(exc).__name__} on {_where()}")
        else:
            logger.error(f"Unhandled {type(exc).__name__} on {_where()}")
        return jsonify({"message": GENERIC_ERROR_MESSAGE}), default_status


__all__ = ["GENERIC_ERROR_MESSAGE", "handle_app_error", "register_error_handler"]
