"""Use-case for resolving a bearer token to the caller's identity."""

from __future__ import annotations

from taskm.domain.users.entities import Identity
from taskm.domain.users.repositories import TokenCodec


class AuthorizeUserUseCase:
    """Trusts the token contents alone; the user table is never consulted."""

    def __init__(self, *, tokens: TokenCodec) -> None:
        self._tokens = tokens

    def execute(self, token: str | None) -> Identity:
        return self._tokens.verify(token)
