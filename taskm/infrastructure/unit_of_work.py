# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Transaction scope used by every repository call."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import AbstractContextManager, contextmanager
from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from taskm.shared.errors import StoreError
from taskm.shared.logging import logger


def store_error_text(exc: SQLAlchemyError) -> str:
    """Driver-level message without SQLAlchemy's statement dump."""

    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


@dataclass(slots=True)
class SqlAlchemyUnitOfWork(AbstractContextManager):
    """One session, committed on success and rolled back on any error.

    Driver failures leave as :class:`StoreError` (chained to the original
    exception) so callers only ever see the application error hierarchy.
    """

    session_factory: Callable[[], Session]
    _session: Session | None = None

    @property
    def session(self) -> Session:
        if self._session is None:
            raise RuntimeError("session accessed outside the unit of work")
        return self._session

    def __enter__(self) -> SqlAlchemyUnitOfWork:
        self._session = self.session_factory()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        session = self.session
        try:
            if exc is None:
                session.commit()
            else:
                logger.debug(f"uow: rollback ({exc_type.__name__})")
                session.rollback()
        except SQLAlchemyError as finalise_exc:
            session.rollback()
            logger.error(f"uow: commit failed ({type(finalise_exc).__name__})")
            raise StoreError(store_error_text(finalise_exc)) from finalise_exc
        finally:
            session.close()
            self._session = None

        if isinstance(exc, SQLAlchemyError):
            raise StoreError(store_error_text(exc)) from exc


@contextmanager
def unit_of_work_scope(factory: Callable[[], Session]) -> Iterator[Session]:
    with SqlAlchemyUnitOfWork(factory) as uow:
        yield uow.session
