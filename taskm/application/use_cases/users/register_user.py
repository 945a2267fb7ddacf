# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from taskm.domain.users.entities import Identity, User
from taskm.domain.users.exceptions import MissingCredentialsError, UserAlreadyExistsError
from taskm.domain.users.repositories import PasswordHasher, TokenCodec, UserRepository
from taskm.shared.logging import logger


class RegisterUserUseCase:
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

    def execute(self, email: str, password: str) -> tuple[User, str]:
        if not email or not password:
            raise MissingCredentialsError()
        existing = self._users.find_by_email(email)
        if existing:
            raise UserAlreadyExistsError()
        now = datetime.now(UTC)
        hashed = self._password_hasher.hash(password)
        user = User(id=0, email=email, password_hash=hashed, created_at=now)
        persisted = self._users.add(user)
        token = self._tokens.issue(Identity(user_id=persisted.id, email=persisted.email))
        logger.info(f"auth.register: ok user_id={persisted.id}")
        return persisted, token.token
