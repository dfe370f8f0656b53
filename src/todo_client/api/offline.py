# src/todo_client/api/offline.py

from __future__ import annotations

import itertools
from typing import Any

from ..core.errors import HttpStatusError


class OfflineTaskApi:
    """
    In-memory backend used for demos when no server is running (TODO_OFFLINE=1).

    Behaves like the REST backend: assigns string ids, defaults isComplete to
    False, answers 404 for unknown ids. Nothing survives the process.
    """

    def __init__(self) -> None:
        self._ids = itertools.count(1)
        self._tasks: dict[str, dict[str, Any]] = {}

    def list_tasks(self) -> list[Any]:
        return [dict(t) for t in self._tasks.values()]

    def create_task(self, title: str) -> Any:
        task_id = str(next(self._ids))
        record = {"id": task_id, "title": title, "isComplete": False}
        self._tasks[task_id] = record
        return dict(record)

    def update_task(self, task_id: str, *, title: str, is_complete: bool) -> Any:
        record = self._tasks.get(task_id)
        if record is None:
            raise HttpStatusError(f"PUT /tasks/{task_id} returned 404", 404)
        record.update(title=title, isComplete=is_complete)
        return dict(record)

    def delete_task(self, task_id: str) -> None:
        if self._tasks.pop(task_id, None) is None:
            raise HttpStatusError(f"DELETE /tasks/{task_id} returned 404", 404)

    def close(self) -> None:
        return
