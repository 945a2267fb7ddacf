# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Client-side session token cache."""

from __future__ import annotations

from threading import Lock
from typing import Protocol

TOKEN_KEY = "token"


class TokenStore(Protocol):
    """Key-value store the client keeps its session token in."""

    def set(self, key: str, value: str) -> None: ...
    def get(self, key: str) -> str | None: ...
    def remove(self, key: str) -> None: ...


class InMemoryTokenStore(TokenStore):
    def __init__(self) -> None:
        self._items: dict[str, str] = {}
        self._lock = Lock()

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._items[key] = value

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._items.get(key)

    def remove(self, key: str) -> None:
        with self._lock:
            self._items.pop(key, None)
