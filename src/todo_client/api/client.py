# src/todo_client/api/client.py

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from ..core.errors import HttpStatusError, MalformedPayloadError, NetworkError
from ..core.models import create_body, update_body

logger = logging.getLogger(__name__)

_DEFAULT_HEADERS = {"Accept": "application/json"}


def _make_timeout_obj(timeout_s: float | None) -> httpx.Timeout:
    """
    None -> no client-side timeout at all (failures come from the transport).
    A number applies to connect/read/write/pool alike.
    """
    return httpx.Timeout(timeout_s)


class HttpTaskApi:
    """
    REST client for the `tasks` resource.

    Wire contract:
    - GET    /tasks        -> {"data": [Task, ...]}
    - POST   /tasks        -> {"data": Task}
    - PUT    /tasks/{id}   -> {"data": Task}
    - DELETE /tasks/{id}   -> 2xx, body ignored

    Every failure is mapped onto the TaskApiError taxonomy; httpx exceptions
    never leak to callers.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout_s: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = httpx.Client(
            base_url=self._base_url,
            headers=_DEFAULT_HEADERS,
            timeout=_make_timeout_obj(timeout_s),
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> HttpTaskApi:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    # ---- low-level helpers ----

    @staticmethod
    def _task_path(task_id: str) -> str:
        return f"/tasks/{quote(str(task_id), safe='')}"

    def _request(self, method: str, path: str, *, json_body: dict[str, Any] | None = None) -> httpx.Response:
        try:
            resp = self._client.request(method, path, json=json_body)
        except httpx.TransportError as e:
            logger.debug("%s %s failed: %s", method, path, e.__class__.__name__)
            raise NetworkError(f"{method} {path}: {e.__class__.__name__}") from e

        logger.debug("%s %s -> %s", method, path, resp.status_code)
        if not resp.is_success:
            raise HttpStatusError(f"{method} {path} returned {resp.status_code}", resp.status_code)
        return resp

    @staticmethod
    def _data(resp: httpx.Response) -> Any:
        """Unwrap the {"data": ...} envelope."""
        try:
            body = resp.json()
        except ValueError as e:
            raise MalformedPayloadError("Response body is not valid JSON") from e
        if not isinstance(body, dict):
            raise MalformedPayloadError("Response body is not a JSON object")
        return body.get("data")

    # ---- TaskApi ----

    def list_tasks(self) -> list[Any]:
        data = self._data(self._request("GET", "/tasks"))
        if data is None:
            return []
        if not isinstance(data, list):
            raise MalformedPayloadError("Expected a list under 'data'")
        return data

    def create_task(self, title: str) -> Any:
        return self._data(self._request("POST", "/tasks", json_body=create_body(title)))

    def update_task(self, task_id: str, *, title: str, is_complete: bool) -> Any:
        body = update_body(title, is_complete)
        return self._data(self._request("PUT", self._task_path(task_id), json_body=body))

    def delete_task(self, task_id: str) -> None:
        self._request("DELETE", self._task_path(task_id))
