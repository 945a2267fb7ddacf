# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Access log for the API.

Every request gets a correlation id (the caller's ``X-Request-ID`` or a fresh
one) that is bound to all log lines emitted while it is handled and echoed
back on the response.
"""

from __future__ import annotations

import hashlib
import secrets
from time import perf_counter

from flask import Flask, Response, g, request

from taskm.shared.logging import clear_correlation_id, get_correlation_id, logger, set_correlation_id

REQUEST_ID_HEADER = "X-Request-ID"

# Health probes are frequent and uninteresting.
_QUIET_PATHS = frozenset({"/api/health"})
_SECRET_HEADERS = frozenset({"authorization", "cookie"})


def _fingerprint(value: str) -> str:
    return hashlib.sha256(value.encode()).hexdigest()[:8]


def _client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.remote_addr or "unknown"


def _describe_request() -> str:
    parts = [f"{request.method} {request.path}", f"from {_client_ip()}"]
    if request.args:
        # Filters only (status, title); nothing secret travels in the query.
        parts.append(f"args={request.args.to_dict()}")
    for name, value in request.headers.items():
        if name.lower() in _SECRET_HEADERS:
            parts.append(f"{name.lower()}#{_fingerprint(value)}")
    return ", ".join(parts)


def configure_request_logging(app: Flask, *, debug_mode: bool = False) -> None:
    def _log(message: str) -> None:
        if request.path in _QUIET_PATHS:
            logger.debug(message)
        else:
            logger.info(message)

    @app.before_request
    def _start() -> None:
        set_correlation_id(request.headers.get(REQUEST_ID_HEADER) or secrets.token_hex(6))
        g.request_started = perf_counter()
        if debug_mode:
            _log(f"-> {_describe_request()}, body_size={request.content_length or 0}")

    @app.after_request
    def _finish(response: Response) -> Response:
        elapsed_ms = (perf_counter() - g.get("request_started", perf_counter())) * 1000
        _log(
            f"<- {request.method} {request.path} {response.status_code} "
            f"({elapsed_ms:.1f} ms, user={g.get('user_id')})"
        )
        response.headers.setdefault(REQUEST_ID_HEADER, get_correlation_id())
        return response

    @app.teardown_request
    def _teardown(exc: BaseException | None) -> None:
        if exc is not None:
            logger.error(f"Request aborted by {type(exc).__name__} on {request.method} {request.path}")
        clear_correlation_id()


__all__ = ["REQUEST_ID_HEADER", "configure_request_logging"]
