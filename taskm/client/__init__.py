# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .api import ApiError, NotLoggedInError, TaskApiClient
from .token_store import TOKEN_KEY, InMemoryTokenStore, TokenStore

__all__ = [
    "ApiError",
    "InMemoryTokenStore",
    "NotLoggedInError",
    "TOKEN_KEY",
    "TaskApiClient",
    "TokenStore",
]
