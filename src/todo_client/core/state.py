# src/todo_client/core/state.py

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from .errors import TaskApiError
from .models import Task

if TYPE_CHECKING:
    from .controller import TaskListController
    from .ports import TaskApi


@dataclass(frozen=True, slots=True)
class ControllerState:
    """
    Snapshot of the task list as the UI should render it.

    Snapshots are never mutated; the controller swaps in a new one after each
    change, so a renderer can hold on to the one it drew.
    """

    tasks: tuple[Task, ...] = ()
    loading: bool = False
    error: str | None = None
    last_error: TaskApiError | None = None
    draft_title: str = ""

    def find(self, task_id: str) -> Task | None:
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def with_error(self, message: str, err: TaskApiError | None) -> ControllerState:
        return replace(self, error=message, last_error=err)


@dataclass
class AppState:
    # Settings live on the state for easy access in commands and connectors.
    settings: object

    api: TaskApi
    controller: TaskListController

    # Strike-through for completed rows; only when stdout is a terminal.
    ansi: bool = False
