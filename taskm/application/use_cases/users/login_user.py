# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from taskm.domain.users.entities import Identity
from taskm.domain.users.exceptions import (
    InvalidCredentialsError,
    MissingCredentialsError,
    UserNotFoundError,
)
from taskm.domain.users.repositories import PasswordHasher, TokenCodec, UserRepository
from taskm.shared.logging import logger


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenCodec,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    def execute(self, email: str, password: str) -> str:
        if not email or not password:
            raise MissingCredentialsError()

        user = self._users.find_by_email(email)
        if user is None:
            logger.info("auth.login: unknown email")
            raise UserNotFoundError()

        if not self._password_hasher.verify(password, user.password_hash):
            logger.info(f"auth.login: bad password user_id={user.id}")
            raise InvalidCredentialsError()

        # Earlier tokens for this user stay valid until they expire.
        token = self._tokens.issue(Identity(user_id=user.id, email=user.email))
        logger.info(f"auth.login: ok user_id={user.id}")
        return token.token
