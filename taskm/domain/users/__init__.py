# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Identity, SessionToken, User
from .repositories import PasswordHasher, TokenCodec, UserRepository

__all__ = [
    "Identity",
    "PasswordHasher",
    "SessionToken",
    "TokenCodec",
    "User",
    "UserRepository",
]
