# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Stateless signed session tokens.

A token is a JWT carrying the user id and email plus ``iat``/``exp``. Nothing
is stored server side: a token stays valid until it expires.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

import jwt

from taskm.domain.users.entities import Identity, SessionToken
from taskm.domain.users.exceptions import InvalidTokenError, TokenMissingError
from taskm.domain.users.repositories import TokenCodec

DEFAULT_TTL = timedelta(days=7)
DEFAULT_ALGORITHM = "HS256"


def encode_token(
    identity: Identity,
    secret: str,
    *,
    ttl: timedelta = DEFAULT_TTL,
    algorithm: str = DEFAULT_ALGORITHM,
    now: datetime | None = None,
) -> SessionToken:
    issued_at = (now or datetime.now(UTC)).replace(microsecond=0)
    expires_at = issued_at + ttl
    payload: dict[str, Any] = {
        "id": identity.user_id,
        "email": identity.email,
        "iat": issued_at,
        "exp": expires_at,
    }
    token = jwt.encode(payload, secret, algorithm=algorithm)
    return SessionToken(
        token=token,
        identity=identity,
        issued_at=issued_at,
        expires_at=expires_at,
    )


def decode_token(
    token: str | None,
    secret: str,
    *,
    algorithm: str = DEFAULT_ALGORITHM,
) -> Identity:
    if not token:
        raise TokenMissingError()
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[algorithm],
            options={"require": ["exp", "iat"]},
        )
    except jwt.ExpiredSignatureError as exc:
        raise InvalidTokenError(context={"reason": "expired"}) from exc
    except jwt.InvalidTokenError as exc:
        raise InvalidTokenError(context={"reason": type(exc).__name__}) from exc

    user_id = payload.get("id")
    email = payload.get("email")
    if isinstance(user_id, bool) or not isinstance(user_id, int) or not isinstance(email, str):
        raise InvalidTokenError(context={"reason": "claims"})
    return Identity(user_id=user_id, email=email)


class JwtTokenCodec(TokenCodec):
    def __init__(
        self,
        secret: str,
        *,
        ttl: timedelta = DEFAULT_TTL,
        algorithm: str = DEFAULT_ALGORITHM,
    ) -> None:
        self._secret = secret
        self._ttl = ttl
        self._algorithm = algorithm

    def issue(self, identity: Identity) -> SessionToken:
        return encode_token(identity, self._secret, ttl=self._ttl, algorithm=self._algorithm)

    def verify(self, token: str | None) -> Identity:
        return decode_token(token, self._secret, algorithm=self._algorithm)
