# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .tasks import SqlAlchemyTaskRepository
from .users import SqlAlchemyUserRepository

__all__ = ["SqlAlchemyTaskRepository", "SqlAlchemyUserRepository"]
