# src/todo_client/core/controller.py

"""
TaskListController: the only owner of the task list.

Each operation is one request followed by a local patch:
- load_all   -> replace the whole list
- add_task   -> append
- toggle_task-> replace in place (by id, order preserved)
- delete_task-> remove

Failures never escape: they land in state.error (flat message) and
state.last_error (tagged TaskApiError). The next successful operation clears both.

There is no in-flight tracking. Two overlapping calls on the same id (from
different threads) may apply their results in either order.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace

from .errors import MalformedPayloadError, TaskApiError, friendly_error_message
from .models import task_from_payload, tasks_from_payload
from .ports import TaskApi
from .state import ControllerState

logger = logging.getLogger(__name__)

StateListener = Callable[[ControllerState], None]

MSG_FETCH_FAILED = "Failed to fetch tasks"
MSG_ADD_FAILED = "Failed to add task"
MSG_UPDATE_FAILED = "Failed to update task"
MSG_DELETE_FAILED = "Failed to delete task"
MSG_INVALID_TASK = "Invalid task data received"
MSG_INVALID_RESPONSE = "Invalid response from server"


class TaskListController:
    def __init__(self, api: TaskApi, *, state: ControllerState | None = None) -> None:
        self._api = api
        self._state = state if state is not None else ControllerState()
        self._listeners: list[StateListener] = []

    # ---- state ----

    @property
    def state(self) -> ControllerState:
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Call `listener` with every new snapshot. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _set_state(self, new_state: ControllerState) -> None:
        self._state = new_state
        for listener in list(self._listeners):
            listener(new_state)

    def _fail(self, message: str, err: TaskApiError) -> bool:
        logger.warning("%s: %s", message, err.message)
        self._set_state(self._state.with_error(message, err))
        return False

    def set_draft(self, text: str) -> None:
        self._set_state(replace(self._state, draft_title=text))

    # ---- operations ----

    def load_all(self) -> bool:
        self._set_state(replace(self._state, loading=True, error=None, last_error=None))
        try:
            items = self._api.list_tasks()
        except TaskApiError as e:
            self._set_state(replace(self._state, loading=False))
            return self._fail(friendly_error_message(e, MSG_FETCH_FAILED), e)

        tasks = tasks_from_payload(items)
        dropped = len(items) - len(tasks)
        if dropped:
            logger.info("Dropped %d malformed task record(s) from server list.", dropped)

        self._set_state(replace(self._state, tasks=tuple(tasks), loading=False))
        logger.info("Loaded %d task(s).", len(tasks))
        return True

    def add_task(self, title: str | None = None) -> bool:
        """
        Create a task. With no title, the draft buffer is used.
        Blank titles are ignored without a request.
        """
        raw = self._state.draft_title if title is None else title
        clean = raw.strip()
        if not clean:
            return False

        try:
            record = self._api.create_task(clean)
        except TaskApiError as e:
            return self._fail(friendly_error_message(e, MSG_ADD_FAILED), e)

        task = task_from_payload(record)
        if task is None:
            return self._fail(MSG_INVALID_TASK, MalformedPayloadError(MSG_INVALID_TASK))

        self._set_state(
            replace(
                self._state,
                tasks=self._state.tasks + (task,),
                draft_title="",
                error=None,
                last_error=None,
            )
        )
        logger.info("Added task id=%s", task.id)
        return True

    def toggle_task(self, task_id: str, current_complete: bool, title: str) -> bool:
        """
        Flip completion on the backend. The full record is sent because the
        backend's PUT replaces the whole task.
        """
        try:
            record = self._api.update_task(task_id, title=title, is_complete=not current_complete)
        except TaskApiError as e:
            return self._fail(friendly_error_message(e, MSG_UPDATE_FAILED), e)

        task = task_from_payload(record)
        if task is None or task.id != task_id:
            return self._fail(MSG_INVALID_RESPONSE, MalformedPayloadError(MSG_INVALID_RESPONSE))

        tasks = tuple(task if t.id == task_id else t for t in self._state.tasks)
        self._set_state(replace(self._state, tasks=tasks, error=None, last_error=None))
        logger.info("Toggled task id=%s complete=%s", task_id, task.is_complete)
        return True

    def delete_task(self, task_id: str) -> bool:
        try:
            self._api.delete_task(task_id)
        except TaskApiError as e:
            return self._fail(friendly_error_message(e, MSG_DELETE_FAILED), e)

        tasks = tuple(t for t in self._state.tasks if t.id != task_id)
        self._set_state(replace(self._state, tasks=tasks, error=None, last_error=None))
        logger.info("Deleted task id=%s", task_id)
        return True
