# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from taskm.domain.users.entities import User as DomainUser
from taskm.domain.users.exceptions import UserAlreadyExistsError
from taskm.domain.users.repositories import UserRepository
from taskm.infrastructure.db.models import User, as_utc
from taskm.infrastructure.unit_of_work import unit_of_work_scope
from taskm.shared.errors import StoreError


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        email=row.email,
        password_hash=row.password_hash,
        created_at=as_utc(row.created_at),
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def find_by_email(self, email: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.scalars(select(User).where(User.email == email)).first()
            if not row:
                return None
            return _to_domain(row)

    def add(self, user: DomainUser) -> DomainUser:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = User(
                    email=user.email,
                    password_hash=user.password_hash,
                    created_at=user.created_at,
                )
                session.add(row)
                session.flush()
                return _to_domain(row)
        except StoreError as exc:
            # A concurrent signup won the race for the unique email.
            if isinstance(exc.__cause__, IntegrityError):
                raise UserAlreadyExistsError() from exc
            raise
