# tests/test_http_client.py

from __future__ import annotations

import json

import httpx
import pytest

from todo_client.api.client import HttpTaskApi
from todo_client.core.controller import TaskListController
from todo_client.core.errors import HttpStatusError, MalformedPayloadError, NetworkError
from todo_client.core.models import Task

BASE = "http://backend.test/api"


class Recorder:
    """MockTransport handler that answers with a fixed response and keeps requests."""

    def __init__(self, status: int = 200, body=None, *, raw: bytes | None = None) -> None:
        self.status = status
        self.body = body
        self.raw = raw
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raw is not None:
            return httpx.Response(self.status, content=self.raw)
        if self.body is None:
            return httpx.Response(self.status)
        return httpx.Response(self.status, json=self.body)


def make_api(handler) -> HttpTaskApi:
    return HttpTaskApi(BASE, transport=httpx.MockTransport(handler))


def test_list_tasks_unwraps_data_envelope() -> None:
    rec = Recorder(body={"data": [{"id": "1", "title": "A"}]})
    api = make_api(rec)

    assert api.list_tasks() == [{"id": "1", "title": "A"}]
    req = rec.requests[0]
    assert req.method == "GET"
    assert str(req.url) == f"{BASE}/tasks"
    assert req.headers["accept"] == "application/json"


def test_list_tasks_missing_data_is_empty() -> None:
    api = make_api(Recorder(body={"data": None}))
    assert api.list_tasks() == []


def test_list_tasks_non_list_data_is_malformed() -> None:
    api = make_api(Recorder(body={"data": {"id": "1"}}))
    with pytest.raises(MalformedPayloadError):
        api.list_tasks()


def test_non_json_body_is_malformed() -> None:
    api = make_api(Recorder(raw=b"<html>oops</html>"))
    with pytest.raises(MalformedPayloadError):
        api.list_tasks()


def test_non_object_body_is_malformed() -> None:
    api = make_api(Recorder(body=[1, 2, 3]))
    with pytest.raises(MalformedPayloadError):
        api.create_task("x")


def test_error_status_maps_to_http_status_error() -> None:
    api = make_api(Recorder(status=500, body={"message": "boom"}))
    with pytest.raises(HttpStatusError) as exc_info:
        api.list_tasks()
    assert exc_info.value.status_code == 500


def test_transport_failure_maps_to_network_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    api = make_api(handler)
    with pytest.raises(NetworkError):
        api.list_tasks()


def test_create_posts_title_as_json() -> None:
    rec = Recorder(status=201, body={"data": {"id": "9", "title": "Buy milk", "isComplete": False}})
    api = make_api(rec)

    assert api.create_task("Buy milk") == {"id": "9", "title": "Buy milk", "isComplete": False}

    req = rec.requests[0]
    assert req.method == "POST"
    assert str(req.url) == f"{BASE}/tasks"
    assert req.headers["content-type"] == "application/json"
    assert json.loads(req.content) == {"title": "Buy milk"}


def test_update_puts_full_record() -> None:
    rec = Recorder(body={"data": {"id": "42", "title": "A", "isComplete": True}})
    api = make_api(rec)

    api.update_task("42", title="A", is_complete=True)

    req = rec.requests[0]
    assert req.method == "PUT"
    assert str(req.url) == f"{BASE}/tasks/42"
    assert json.loads(req.content) == {"title": "A", "isComplete": True}


def test_delete_ignores_body() -> None:
    rec = Recorder(status=204)
    api = make_api(rec)

    assert api.delete_task("42") is None
    assert rec.requests[0].method == "DELETE"
    assert str(rec.requests[0].url) == f"{BASE}/tasks/42"


def test_delete_not_found_raises() -> None:
    api = make_api(Recorder(status=404, body={"message": "not found"}))
    with pytest.raises(HttpStatusError) as exc_info:
        api.delete_task("42")
    assert exc_info.value.status_code == 404


def test_trailing_slash_in_base_url_is_ignored() -> None:
    rec = Recorder(body={"data": []})
    api = HttpTaskApi(BASE + "/", transport=httpx.MockTransport(rec))

    api.list_tasks()

    assert api.base_url == BASE
    assert str(rec.requests[0].url) == f"{BASE}/tasks"


def test_controller_over_http_filters_initial_list() -> None:
    rec = Recorder(
        body={
            "data": [
                {"id": "1", "title": "A", "isComplete": False},
                {"id": "2", "title": ""},
            ]
        }
    )
    with make_api(rec) as api:
        ctrl = TaskListController(api)
        ctrl.load_all()

    assert ctrl.state.tasks == (Task(id="1", title="A", is_complete=False),)


def test_controller_over_http_reports_status_failure() -> None:
    api = make_api(Recorder(status=502))
    ctrl = TaskListController(api)

    ctrl.add_task("Buy milk")

    assert ctrl.state.tasks == ()
    assert ctrl.state.error == "Failed to add task (HTTP 502)"


def test_task_ids_are_path_quoted() -> None:
    rec = Recorder(body={"data": {"id": "a/b c", "title": "A", "isComplete": True}})
    api = make_api(rec)

    api.update_task("a/b c", title="A", is_complete=True)
    rec.body = None
    api.delete_task("a/b c")

    assert [r.method for r in rec.requests] == ["PUT", "DELETE"]
    for req in rec.requests:
        assert req.url.raw_path == b"/api/tasks/a%2Fb%20c"


def test_close_releases_http_client() -> None:
    api = make_api(Recorder(body={"data": []}))
    api.close()
    assert api._client.is_closed
