# src/todo_client/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The controller depends on a Protocol instead of a concrete HTTP client.
This keeps the backend swappable (HTTP, offline demo) and makes testing easier.
"""

from typing import Any, Protocol


class TaskApi(Protocol):
    """
    Remote `tasks` resource.

    Every method raises TaskApiError (or a subclass) on failure.
    Returned records are raw server dicts; validation is the caller's job.
    """

    def list_tasks(self) -> list[Any]: ...

    def create_task(self, title: str) -> Any: ...

    def update_task(self, task_id: str, *, title: str, is_complete: bool) -> Any: ...

    def delete_task(self, task_id: str) -> None: ...

    def close(self) -> None: ...
