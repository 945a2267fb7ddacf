# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""HTTP client for the task API, as used by the mobile app."""

from __future__ import annotations

from typing import Any

import httpx

from taskm.shared.logging import logger

from .token_store import TOKEN_KEY, InMemoryTokenStore, TokenStore

DEFAULT_TIMEOUT = 10.0


class ApiError(Exception):
    """Non-2xx answer from the server, carrying its ``message``."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class NotLoggedInError(ApiError):
    def __init__(self) -> None:
        super().__init__("Not logged in", 401)


class TaskApiClient:
    """Thin wrapper over the REST routes.

    Signup and login cache the returned token in ``token_store``; every task
    call reads it back from there. Logging out only discards the cached token,
    the server keeps no session.
    """

    def __init__(
        self,
        base_url: str,
        *,
        token_store: TokenStore | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._tokens = token_store or InMemoryTokenStore()
        self._http = httpx.Client(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            transport=transport,
        )

    def __enter__(self) -> TaskApiClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    # Session

    def is_logged_in(self) -> bool:
        return bool(self._tokens.get(TOKEN_KEY))

    def register(self, email: str, password: str) -> dict[str, Any]:
        data = self._request("POST", "/api/auth/signup", json={"email": email, "password": password})
        self._tokens.set(TOKEN_KEY, data["token"])
        return data

    def login(self, email: str, password: str) -> dict[str, Any]:
        data = self._request("POST", "/api/auth/login", json={"email": email, "password": password})
        self._tokens.set(TOKEN_KEY, data["token"])
        return data

    def logout(self) -> None:
        self._tokens.remove(TOKEN_KEY)

    # Tasks

    def create_task(self, title: str, description: str | None = None) -> dict[str, Any]:
        return self._request(
            "POST",
            "/api/tasks",
            json={"title": title, "description": description},
            auth=True,
        )

    def list_tasks(self, *, status: str | None = None, title: str | None = None) -> dict[str, Any]:
        params = {}
        if status:
            params["status"] = status
        if title:
            params["title"] = title
        return self._request("GET", "/api/tasks", params=params, auth=True)

    def complete_task(self, task_id: str) -> dict[str, Any]:
        return self._request("PUT", f"/api/tasks/{task_id}", auth=True)

    def edit_task(self, task_id: str, title: str, description: str | None) -> dict[str, Any]:
        return self._request(
            "PUT",
            f"/api/tasks/{task_id}/edit",
            json={"title": title, "description": description},
            auth=True,
        )

    def delete_task(self, task_id: str) -> dict[str, Any]:
        return self._request("DELETE", f"/api/tasks/{task_id}", auth=True)

    def _request(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
        params: dict[str, str] | None = None,
        auth: bool = False,
    ) -> dict[str, Any]:
        headers: dict[str, str] = {}
        if auth:
            token = self._tokens.get(TOKEN_KEY)
            if not token:
                raise NotLoggedInError()
            headers["Authorization"] = f"Bearer {token}"

        response = self._http.request(method, path, json=json, params=params, headers=headers)
        try:
            data = response.json()
        except ValueError:
            data = {}

        if response.is_error:
            message = data.get("message") if isinstance(data, dict) else None
            logger.debug(f"client: {method} {path} -> {response.status_code}")
            raise ApiError(message or response.reason_phrase, response.status_code)
        return data
