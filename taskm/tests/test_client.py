from __future__ import annotations

from collections.abc import Iterator

import httpx
import pytest
from flask import Flask

from taskm.client import TOKEN_KEY, ApiError, InMemoryTokenStore, NotLoggedInError, TaskApiClient


@pytest.fixture()
def store() -> InMemoryTokenStore:
    return InMemoryTokenStore()


@pytest.fixture()
def api(app: Flask, store: InMemoryTokenStore) -> Iterator[TaskApiClient]:
    transport = httpx.WSGITransport(app=app)
    with TaskApiClient("http://testserver", token_store=store, transport=transport) as client:
        yield client


def test_register_caches_token(api: TaskApiClient, store: InMemoryTokenStore) -> None:
    assert not api.is_logged_in()

    data = api.register("a@x.com", "pw1")

    assert api.is_logged_in()
    assert store.get(TOKEN_KEY) == data["token"]


def test_task_calls_use_cached_token(api: TaskApiClient) -> None:
    api.register("a@x.com", "pw1")

    task = api.create_task("Buy milk", "2L")["task"]
    api.create_task("Walk dog")
    api.complete_task(task["id"])

    assert [t["title"] for t in api.list_tasks(status="Completed")["tasks"]] == ["Buy milk"]
    assert [t["title"] for t in api.list_tasks(title="dog")["tasks"]] == ["Walk dog"]

    edited = api.edit_task(task["id"], "Buy oat milk", None)["task"]
    assert edited["title"] == "Buy oat milk"
    assert edited["description"] == "2L"

    assert api.delete_task(task["id"])["success"] is True
    assert len(api.list_tasks()["tasks"]) == 1


def test_logout_only_forgets_token(api: TaskApiClient, store: InMemoryTokenStore) -> None:
    api.register("a@x.com", "pw1")
    token = store.get(TOKEN_KEY)

    api.logout()

    assert not api.is_logged_in()
    with pytest.raises(NotLoggedInError):
        api.list_tasks()

    store.set(TOKEN_KEY, token)
    assert api.list_tasks()["tasks"] == []


def test_login_after_logout(api: TaskApiClient) -> None:
    api.register("a@x.com", "pw1")
    api.logout()

    api.login("a@x.com", "pw1")

    assert api.is_logged_in()


def test_server_message_surfaces_in_api_error(api: TaskApiClient) -> None:
    with pytest.raises(ApiError) as exc_info:
        api.login("nobody@x.com", "pw1")

    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "User not found"
    assert not api.is_logged_in()


def test_failed_create_reports_validation_message(api: TaskApiClient) -> None:
    api.register("a@x.com", "pw1")

    with pytest.raises(ApiError) as exc_info:
        api.create_task("")

    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "Title is required"
