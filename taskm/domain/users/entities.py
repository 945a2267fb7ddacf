# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class User:
    id: int
    email: str
    password_hash: str
    created_at: datetime


@dataclass(slots=True, frozen=True)
class Identity:
    """Caller identity as carried by a verified session token."""

    user_id: int
    email: str


@dataclass(slots=True, frozen=True)
class SessionToken:
    token: str
    identity: Identity
    issued_at: datetime
    expires_at: datetime
