# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import wraps

from flask import Request, g, request

from taskm.application.use_cases.users.authorize_user import AuthorizeUserUseCase
from taskm.domain.users.entities import Identity
from taskm.shared.errors import AuthenticationError
from taskm.shared.logging import logger


def bearer_token(req: Request) -> str | None:
    """Token part of ``Authorization: <scheme> <token>``, or None."""

    auth = req.headers.get("Authorization", "")
    parts = auth.split(" ", 1)
    if len(parts) != 2:
        return None
    return parts[1].strip() or None


def auth_required(f):
    """Resolve the caller before a controller method runs.

    The controller must expose ``_authorize_use_case``. The verified identity
    is passed to the view as the ``identity`` keyword.
    """

    @wraps(f)
    def inner(self, *a, **kw):
        authorize: AuthorizeUserUseCase = self._authorize_use_case
        token = bearer_token(request)
        try:
            identity: Identity = authorize.execute(token)
        except AuthenticationError as exc:
            logger.warning(
                f"Auth failed ({exc.code}) on {request.method} {request.path} "
                f"from {request.headers.get('X-Forwarded-For', request.remote_addr)}"
            )
            raise

        g.user_id = identity.user_id
        kw["identity"] = identity
        logger.debug(f"Auth OK: user={identity.user_id} {request.method} {request.path}")
        return f(self, *a, **kw)

    return inner
